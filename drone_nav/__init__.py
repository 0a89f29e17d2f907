# drone_nav/__init__.py
"""
Drone navigation package: optimal closed tour over 3-D waypoints.

Current state:
- Cost matrices from drone physics (energy kJ, time s, capacity Ah, distance m)
- Exact branch-and-bound TSP over reduced cost matrices (asymmetric, missing edges)
- OR-Tools CP-SAT circuit model as an alternative exact backend / cross-check
- Text + JSON report, CSV export, 3-D matplotlib figure
"""

from .types import (
    Point,
    DroneParams,
    CostMatrices,
    PathEdge,
    SearchStats,
    FindResult,
)

from .errors import (
    NavigationError,
    ParamsParseError,
    InvalidMatrixError,
    UnableToFindPathError,
    SearchTimeoutError,
)

from .costing import generate_cost_matrices

from .io_json import (
    load_params,
    parse_params,
)

from .path_finder import (
    Frontier,
    Node,
    find,
    reduce_matrix,
)

from .solver_circuit_cp_sat import (
    CircuitParams,
    solve_circuit_cp_sat,
)

from .metrics import (
    TourMetrics,
    compute_tour_metrics,
    tour_cost,
)

from .run import (
    RunResult,
    run_navigation,
    run_from_file,
)

__all__ = [
    # types
    "Point",
    "DroneParams",
    "CostMatrices",
    "PathEdge",
    "SearchStats",
    "FindResult",
    # errors
    "NavigationError",
    "ParamsParseError",
    "InvalidMatrixError",
    "UnableToFindPathError",
    "SearchTimeoutError",
    # costing / io
    "generate_cost_matrices",
    "load_params",
    "parse_params",
    # solvers
    "Frontier",
    "Node",
    "find",
    "reduce_matrix",
    "CircuitParams",
    "solve_circuit_cp_sat",
    # metrics
    "TourMetrics",
    "compute_tour_metrics",
    "tour_cost",
    # runner
    "RunResult",
    "run_navigation",
    "run_from_file",
]
