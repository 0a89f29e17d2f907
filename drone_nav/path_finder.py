# drone_nav/path_finder.py
# Exact travelling-salesman solver: best-first branch and bound over reduced
# cost matrices.
#
# - Every Node owns a reduced copy of its parent's matrix plus an admissible
#   lower bound on any tour that completes its partial path.
# - The frontier is a plain min-heap keyed by (bound, insertion order), so
#   equal bounds are popped first-in first-out.
# - The first node popped at full depth carries an optimal tour; no incumbent
#   tracking is needed because bounds never decrease along a branch.
#
# Usage:
#   from drone_nav.path_finder import find
#   result = find(matrix)      # FindResult or None if no tour exists

from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config import DEFAULTS
from .errors import SearchTimeoutError
from .logger import get_logger
from .types import FindResult, PathEdge, SearchStats
from .validate import MatrixLike, as_cost_matrix, isolated_vertices


ORIGIN = DEFAULTS.origin


def reduce_matrix(matrix: np.ndarray) -> float:
    """
    Reduce `matrix` in place and return the reduction cost.

    Each row, then each column, has its minimum finite entry subtracted from
    every finite entry. A row or column with no finite entry is left alone and
    contributes 0 to the cost.

    The cost is folded as ((cost + row_0) + col_0) + row_1 + col_1 ... so that
    tours of equal true cost end up with bit-identical bounds, and the FIFO
    tie rule picks between them deterministically.
    """
    row_min = matrix.min(axis=1)
    row_min = np.where(row_min == np.inf, 0.0, row_min)
    matrix -= row_min[:, np.newaxis]

    col_min = matrix.min(axis=0)
    col_min = np.where(col_min == np.inf, 0.0, col_min)
    matrix -= col_min[np.newaxis, :]

    cost = 0.0
    for r, c in zip(row_min.tolist(), col_min.tolist()):
        cost = cost + r + c
    return cost


@dataclass(frozen=True, eq=False)
class Node:
    """Visiting vertex `vertex` at depth `level` with the data computed for that step."""
    reduced_matrix: np.ndarray
    path: Tuple[PathEdge, ...]
    bound: float
    vertex: int
    level: int

    @classmethod
    def root(cls, cost: np.ndarray) -> "Node":
        matrix = cost.copy()
        matrix[ORIGIN, ORIGIN] = np.inf
        bound = reduce_matrix(matrix)
        return cls(reduced_matrix=matrix, path=(), bound=bound, vertex=ORIGIN, level=0)

    def child(self, j: int) -> "Node":
        """Extend the partial tour with the edge (self.vertex, j)."""
        i = self.vertex
        n = self.reduced_matrix.shape[0]
        level = self.level + 1
        edge_cost = float(self.reduced_matrix[i, j])

        matrix = self.reduced_matrix.copy()
        # i can no longer be left, j can no longer be entered
        matrix[i, :] = np.inf
        matrix[:, j] = np.inf
        # No early return to the origin, except on the closing move
        if level != n - 1:
            matrix[j, ORIGIN] = np.inf

        bound = self.bound + edge_cost + reduce_matrix(matrix)
        return Node(
            reduced_matrix=matrix,
            path=self.path + (PathEdge(i, j),),
            bound=bound,
            vertex=j,
            level=level,
        )

    def successors(self) -> Iterator[int]:
        """Vertices reachable from this node over a finite reduced edge."""
        row = self.reduced_matrix[self.vertex]
        for j in range(row.shape[0]):
            if row[j] != np.inf:
                yield j


class Frontier:
    """Min-priority queue of nodes; ties on bound are broken by insertion order."""

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Node]] = []
        self._counter = itertools.count()
        self.max_size = 0

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (node.bound, next(self._counter), node))
        if len(self._heap) > self.max_size:
            self.max_size = len(self._heap)

    def pop(self) -> Node:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def find(cost: MatrixLike, *, time_limit_s: Optional[float] = None) -> Optional[FindResult]:
    """
    Solve the travelling salesman problem for `cost` (indexed [from][to]).

    Returns the optimal closed tour from/to vertex 0, or None when no tour
    exists. Malformed matrices raise InvalidMatrixError. If `time_limit_s` is
    given and the search runs past it, SearchTimeoutError is raised.
    """
    matrix = as_cost_matrix(cost)
    n = matrix.shape[0]
    log = get_logger()

    t0 = time.perf_counter()
    dead = isolated_vertices(matrix)
    if dead:
        log.search("Branch and bound", n, f"no tour, vertices {dead} cannot be entered or left",
                   time.perf_counter() - t0)
        return None

    frontier = Frontier()
    frontier.push(Node.root(matrix))
    expanded = 0
    generated = 1

    while frontier:
        if time_limit_s is not None and time.perf_counter() - t0 >= time_limit_s:
            raise SearchTimeoutError(
                f"Search exceeded {time_limit_s} s after expanding {expanded} nodes "
                f"({len(frontier)} still queued)"
            )

        node = frontier.pop()

        # All vertices are visited, go back to the origin
        if node.level == n - 1:
            if node.reduced_matrix[node.vertex, ORIGIN] == np.inf:
                continue
            stats = SearchStats(
                nodes_expanded=expanded,
                nodes_generated=generated,
                max_frontier=frontier.max_size,
                seconds=time.perf_counter() - t0,
            )
            log.search(
                "Branch and bound", n,
                f"cost={node.bound:.3f} expanded={expanded} generated={generated} "
                f"peak_frontier={stats.max_frontier}",
                stats.seconds,
            )
            return FindResult(
                cost=node.bound,
                path=node.path + (PathEdge(node.vertex, ORIGIN),),
                stats=stats,
            )

        expanded += 1
        for j in node.successors():
            frontier.push(node.child(j))
            generated += 1

    log.search("Branch and bound", n, f"no tour after expanding {expanded} nodes", time.perf_counter() - t0)
    return None
