# drone_nav/run.py
# High-level convenience runner that ties together:
# - cost matrix generation
# - solver (branch and bound, or CP-SAT circuit)
# - validation
# - per-tour metrics
#
# This is meant to be called from the CLI or your own scripts.
# Example:
#   from drone_nav.run import run_from_file
#   res = run_from_file("params.json", "energy")
#   print(res.result.cost, res.metrics.time)

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .config import DEFAULTS, SOLVERS, matrix_for, parse_optimize
from .costing import generate_cost_matrices
from .errors import UnableToFindPathError
from .io_json import load_params
from .logger import get_logger
from .metrics import TourMetrics, compute_tour_metrics, path_indices, path_points
from .path_finder import find
from .solver_circuit_cp_sat import CircuitParams, solve_circuit_cp_sat
from .types import CostMatrices, DroneParams, FindResult, Point
from .utils import timer
from .validate import raise_on_errors, validate_tour


@dataclass(frozen=True)
class RunResult:
    params: DroneParams
    optimize: str
    solver: str
    matrices: CostMatrices
    result: FindResult
    metrics: TourMetrics
    points: Tuple[Point, ...]
    indices: Tuple[int, ...]

    @property
    def energy_cost(self) -> float:
        return self.metrics.energy

    @property
    def time_cost(self) -> float:
        return self.metrics.time

    @property
    def capacity_cost(self) -> float:
        return self.metrics.capacity


def solve_matrix(matrix, *, solver: str = DEFAULTS.default_solver, time_limit_s: Optional[float] = None) -> Optional[FindResult]:
    """Dispatch to the selected exact solver."""
    if solver == "bnb":
        return find(matrix, time_limit_s=time_limit_s)
    if solver == "cpsat":
        params = CircuitParams(time_limit_s=time_limit_s) if time_limit_s is not None else CircuitParams()
        return solve_circuit_cp_sat(matrix, params)
    raise ValueError(f"Unknown solver {solver!r}; expected one of {SOLVERS}")


def run_navigation(
    params: DroneParams,
    optimize: str,
    *,
    solver: str = DEFAULTS.default_solver,
    time_limit_s: Optional[float] = None,
    validate: bool = True,
) -> RunResult:
    """
    Plan the optimal closed tour for `params`, minimizing the `optimize` cost.

    Raises UnableToFindPathError when no tour exists.
    """
    log = get_logger()
    optimize = parse_optimize(optimize)

    matrices = generate_cost_matrices(params)
    matrix = matrix_for(matrices, optimize)
    log.info(f"Planning {params.num_points} waypoints, optimize={optimize}, solver={solver}")

    with timer("solve") as t:
        result = solve_matrix(matrix, solver=solver, time_limit_s=time_limit_s)
    if result is None:
        raise UnableToFindPathError()
    log.info(f"Solved in {t['seconds']:.3f} s, cost={result.cost:.3f}")

    if validate:
        raise_on_errors(validate_tour(matrix, result))

    return RunResult(
        params=params,
        optimize=optimize,
        solver=solver,
        matrices=matrices,
        result=result,
        metrics=compute_tour_metrics(matrices, result.path),
        points=tuple(path_points(params, result.path)),
        indices=tuple(path_indices(result.path)),
    )


def run_from_file(
    params_file: str | Path,
    optimize: str,
    *,
    solver: str = DEFAULTS.default_solver,
    time_limit_s: Optional[float] = None,
) -> RunResult:
    params = load_params(params_file)
    return run_navigation(params, optimize, solver=solver, time_limit_s=time_limit_s)
