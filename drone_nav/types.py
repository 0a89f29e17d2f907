# drone_nav/types.py
# Core data structures for tour planning over 3-D waypoints.
# Keep this file dependency-light (numpy only) so it can be imported everywhere.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np


# ----------------------------
# Inputs
# ----------------------------

@dataclass(frozen=True)
class Point:
    """Waypoint coordinates in meters."""
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class DroneParams:
    """Drone parameters and the coordinates that need to be visited."""
    battery_voltage: float   # V

    speed_horizontal: float  # m/s
    speed_up: float          # m/s
    speed_down: float        # m/s

    power_horizontal: float  # W
    power_up: float          # W
    power_down: float        # W
    power_hover: float       # W

    hover_time: int          # s, required hovering time at each waypoint

    coords: Tuple[Point, ...] = ()

    def __post_init__(self):
        for name in ("battery_voltage", "speed_horizontal", "speed_up", "speed_down"):
            if not getattr(self, name) > 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        for name in ("power_horizontal", "power_up", "power_down", "power_hover"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.hover_time < 0:
            raise ValueError(f"hover_time must be >= 0, got {self.hover_time}")
        if not self.coords:
            raise ValueError("coords must contain at least one point")

    @property
    def num_points(self) -> int:
        return len(self.coords)


# ----------------------------
# Cost matrices
# ----------------------------

@dataclass(frozen=True, eq=False)
class CostMatrices:
    """
    Cost matrices (N x N) for each ordered pair of waypoints, indexed [from][to].
    The diagonal is always inf.
    """
    energy: np.ndarray    # kJ
    time: np.ndarray      # s
    capacity: np.ndarray  # Ah
    distance: np.ndarray  # m, 2-D distance for an intuitive (flat) visit

    @property
    def size(self) -> int:
        return int(self.energy.shape[0])


# ----------------------------
# Outputs
# ----------------------------

@dataclass(frozen=True)
class PathEdge:
    """Cost matrix indices of one committed leg of the tour."""
    src: int
    dst: int

    def __post_init__(self):
        if self.src == self.dst:
            raise ValueError(f"PathEdge endpoints must differ, got ({self.src}, {self.dst})")

    def as_tuple(self) -> Tuple[int, int]:
        return self.src, self.dst


@dataclass(frozen=True)
class SearchStats:
    """Diagnostics collected by a solver run."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    max_frontier: int = 0
    seconds: float = 0.0


@dataclass(frozen=True)
class FindResult:
    """Optimal closed tour: total cost plus ordered edges starting and ending at 0."""
    cost: float
    path: Tuple[PathEdge, ...]
    stats: Optional[SearchStats] = field(default=None, compare=False)

    def vertices(self) -> List[int]:
        """Visiting order including the return to the origin, e.g. [0, 2, 1, 0]."""
        if not self.path:
            return []
        return [self.path[0].src] + [e.dst for e in self.path]

    def edge_tuples(self) -> List[Tuple[int, int]]:
        return [e.as_tuple() for e in self.path]
