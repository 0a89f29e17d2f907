# drone_nav/metrics.py
# Metrics for a planned tour:
# - cost of a path on any cost matrix (independent of the solver's own total)
# - energy / time / capacity / distance totals for the chosen path
#
# These metrics are solver-agnostic: they work for any sequence of edges.

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from .types import CostMatrices, DroneParams, PathEdge, Point


@dataclass(frozen=True)
class TourMetrics:
    energy: float    # kJ
    time: float      # s
    capacity: float  # Ah
    distance: float  # m


def tour_cost(matrix: np.ndarray, path: Iterable[PathEdge]) -> float:
    """Sum of matrix[src][dst] over the path edges."""
    total = 0.0
    for e in path:
        total += float(matrix[e.src, e.dst])
    return total


def compute_tour_metrics(matrices: CostMatrices, path: Iterable[PathEdge]) -> TourMetrics:
    path = list(path)
    return TourMetrics(
        energy=tour_cost(matrices.energy, path),
        time=tour_cost(matrices.time, path),
        capacity=tour_cost(matrices.capacity, path),
        distance=tour_cost(matrices.distance, path),
    )


def path_points(params: DroneParams, path: Iterable[PathEdge]) -> List[Point]:
    """
    Waypoints in flying order: start of the first edge, then the end of each
    edge. A closed tour of N edges yields N + 1 points (origin repeated).
    """
    out: List[Point] = []
    for k, e in enumerate(path):
        if k == 0:
            out.append(params.coords[e.src])
        out.append(params.coords[e.dst])
    return out


def path_indices(path: Iterable[PathEdge]) -> List[int]:
    """Same ordering as path_points, as waypoint indices."""
    out: List[int] = []
    for k, e in enumerate(path):
        if k == 0:
            out.append(e.src)
        out.append(e.dst)
    return out
