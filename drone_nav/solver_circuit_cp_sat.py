# drone_nav/solver_circuit_cp_sat.py
# Alternative exact backend (OR-Tools CP-SAT) for the closed-tour problem:
# - one Boolean per finite arc, tied together with AddCircuit
# - objective on costs scaled to integers (CP-SAT has no floating point)
# - the reported cost is re-summed from the float matrix, so it is directly
#   comparable with the branch-and-bound result
#
# Mainly used to cross-check path_finder.find on random instances; also
# selectable from the CLI with --solver cpsat.

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
from ortools.sat.python import cp_model

from .config import DEFAULTS
from .errors import NavigationError, SearchTimeoutError
from .logger import get_logger
from .types import FindResult, PathEdge, SearchStats
from .validate import MatrixLike, as_cost_matrix, isolated_vertices


@dataclass(frozen=True)
class CircuitParams:
    # Costs are multiplied by scale and rounded; 1000 keeps 3 decimals exact
    scale: int = DEFAULTS.cpsat_scale
    time_limit_s: float = DEFAULTS.cpsat_time_limit_s
    num_workers: int = DEFAULTS.cpsat_workers


def _follow_successors(succ: Dict[int, int], n: int) -> List[PathEdge]:
    path: List[PathEdge] = []
    cur = DEFAULTS.origin
    for _ in range(n):
        nxt = succ[cur]
        path.append(PathEdge(cur, nxt))
        cur = nxt
    return path


def solve_circuit_cp_sat(
    cost: MatrixLike,
    params: Optional[CircuitParams] = None,
) -> Optional[FindResult]:
    """
    Solve the closed tour with a CP-SAT circuit model.
    Returns FindResult (cost in the matrix's own units) or None if no tour exists.
    Raises SearchTimeoutError when the time limit runs out before any tour is found.
    """
    params = params or CircuitParams()
    matrix = as_cost_matrix(cost)
    n = matrix.shape[0]
    log = get_logger()

    dead = isolated_vertices(matrix)
    if dead:
        log.search("CP-SAT circuit", n, f"no tour, vertices {dead} cannot be entered or left", 0.0)
        return None
    finite = matrix != np.inf

    m = cp_model.CpModel()
    arcs: Dict[Tuple[int, int], cp_model.IntVar] = {}
    for i in range(n):
        for j in range(n):
            if finite[i, j]:
                arcs[i, j] = m.NewBoolVar(f"x[{i},{j}]")

    m.AddCircuit([(i, j, lit) for (i, j), lit in arcs.items()])
    m.Minimize(sum(int(round(matrix[i, j] * params.scale)) * lit for (i, j), lit in arcs.items()))

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = float(params.time_limit_s)
    solver.parameters.num_workers = int(params.num_workers)

    t0 = time.perf_counter()
    status = solver.Solve(m)
    seconds = time.perf_counter() - t0

    if status == cp_model.INFEASIBLE:
        log.search("CP-SAT circuit", n, "no tour (INFEASIBLE)", seconds)
        return None
    if status == cp_model.UNKNOWN:
        raise SearchTimeoutError(
            f"CP-SAT found no tour within {params.time_limit_s} s (status UNKNOWN)"
        )
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        raise NavigationError(f"CP-SAT circuit model failed: {solver.StatusName(status)}")
    if status == cp_model.FEASIBLE:
        log.warn(f"CP-SAT stopped after {params.time_limit_s} s; tour may not be optimal")

    succ = {i: j for (i, j), lit in arcs.items() if solver.Value(lit) == 1}
    path = _follow_successors(succ, n)
    total = float(sum(matrix[e.src, e.dst] for e in path))

    log.search("CP-SAT circuit", n, f"cost={total:.3f} status={solver.StatusName(status)}", seconds)
    return FindResult(
        cost=total,
        path=tuple(path),
        stats=SearchStats(nodes_expanded=int(solver.NumBranches()), seconds=seconds),
    )
