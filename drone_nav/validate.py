# drone_nav/validate.py
# Validation utilities:
# - reject malformed cost matrices at the solver boundary
# - check a returned tour is a single cycle through every waypoint
# - check the reported cost against the matrix (independent oracle)
#
# Useful both during development and to sanity-check solver output.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from .config import DEFAULTS
from .errors import InvalidMatrixError
from .types import FindResult, PathEdge


MatrixLike = Union[np.ndarray, Sequence[Sequence[float]]]


@dataclass(frozen=True)
class ValidationIssue:
    level: str   # "ERROR" or "WARN"
    message: str
    edge_index: Optional[int] = None


def as_cost_matrix(matrix: MatrixLike) -> np.ndarray:
    """
    Check a cost matrix and return a float64 copy with the diagonal forced to inf.

    Raises InvalidMatrixError for: non 2-D input, non-square shape, fewer than
    2 vertices, NaN entries and negative entries. The caller's matrix is never
    modified.
    """
    try:
        m = np.array(matrix, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidMatrixError(f"Cost matrix is not numeric: {e}") from e

    if m.ndim != 2:
        raise InvalidMatrixError(f"Cost matrix must be 2-D, got {m.ndim}-D")
    n, k = m.shape
    if n != k:
        raise InvalidMatrixError(f"Cost matrix must be square, got {n}x{k}")
    if n < 2:
        raise InvalidMatrixError(f"Cost matrix needs at least 2 vertices, got {n}")
    if np.isnan(m).any():
        raise InvalidMatrixError("Cost matrix contains NaN")
    if (m < 0).any():
        i, j = np.argwhere(m < 0)[0]
        raise InvalidMatrixError(f"Cost matrix contains a negative cost at ({i}, {j}): {m[i, j]}")

    np.fill_diagonal(m, np.inf)
    return m


def isolated_vertices(matrix: np.ndarray) -> List[int]:
    """Vertices with no finite outgoing or no finite incoming edge; any one of them rules out a tour."""
    finite = matrix != np.inf
    dead = ~finite.any(axis=1) | ~finite.any(axis=0)
    return [int(v) for v in np.flatnonzero(dead)]


def validate_tour(matrix: MatrixLike, result: FindResult) -> List[ValidationIssue]:
    """
    Check that result.path is a closed tour from/to the origin visiting every
    vertex once over finite edges, and that result.cost matches the matrix.
    Returns a list of issues (empty if OK).
    """
    m = np.asarray(matrix, dtype=np.float64)
    n = m.shape[0]
    issues: List[ValidationIssue] = []
    path: Sequence[PathEdge] = result.path

    if len(path) != n:
        issues.append(ValidationIssue(level="ERROR", message=f"Tour has {len(path)} edges, expected {n}"))
        return issues

    if path[0].src != DEFAULTS.origin:
        issues.append(
            ValidationIssue(level="ERROR", message=f"Tour starts at {path[0].src}, not at origin {DEFAULTS.origin}", edge_index=0)
        )
    if path[-1].dst != DEFAULTS.origin:
        issues.append(
            ValidationIssue(level="ERROR", message=f"Tour ends at {path[-1].dst}, not at origin {DEFAULTS.origin}", edge_index=n - 1)
        )

    for k, (a, b) in enumerate(zip(path, path[1:])):
        if a.dst != b.src:
            issues.append(
                ValidationIssue(level="ERROR", message=f"Edge {k + 1} starts at {b.src}, previous ended at {a.dst}", edge_index=k + 1)
            )

    sources = sorted(e.src for e in path)
    if sources != list(range(n)):
        issues.append(ValidationIssue(level="ERROR", message=f"Tour does not visit every vertex exactly once: {sources}"))

    total = 0.0
    for k, e in enumerate(path):
        if not (0 <= e.src < n and 0 <= e.dst < n):
            issues.append(ValidationIssue(level="ERROR", message=f"Edge {e.as_tuple()} out of range", edge_index=k))
            continue
        c = m[e.src, e.dst]
        if c == np.inf:
            issues.append(ValidationIssue(level="ERROR", message=f"Edge {e.as_tuple()} has no finite cost", edge_index=k))
        total += c

    if math.isfinite(total) and not math.isclose(total, result.cost, rel_tol=DEFAULTS.cost_rel_tol, abs_tol=1e-9):
        issues.append(
            ValidationIssue(level="ERROR", message=f"Reported cost {result.cost} differs from edge sum {total}")
        )

    return issues


def raise_on_errors(issues: List[ValidationIssue]) -> None:
    errs = [i for i in issues if i.level.upper() == "ERROR"]
    if errs:
        msg = "\n".join(f"[{e.level}] edge={e.edge_index} :: {e.message}" for e in errs)
        raise ValueError("Validation failed:\n" + msg)
