# drone_nav/sample_data.py
# Utilities to generate sample / random instances for quick benchmarking and tests.
# Random matrices are rounded to 3 decimals so integer-scaled solvers see them exactly.

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .types import DroneParams, Point


# Drone used throughout the examples (hover_time=0 reproduces REFERENCE_* matrices)
REFERENCE_DRONE = dict(
    battery_voltage=22.8,
    speed_horizontal=12.5,
    speed_up=3.1,
    speed_down=3.0,
    power_horizontal=486.2,
    power_up=899.04,
    power_down=309.17,
    power_hover=545.8,
)

REFERENCE_COORDS: Tuple[Point, ...] = (
    Point(0, 0, 0),
    Point(10, 200, 300),
    Point(200, 450, 12),
    Point(400, 460, 350),
    Point(350, 240, 14),
    Point(450, 100, 200),
)


def reference_params(hover_time: int = 0) -> DroneParams:
    return DroneParams(hover_time=hover_time, coords=REFERENCE_COORDS, **REFERENCE_DRONE)


@dataclass(frozen=True)
class RandomWaypointsConfig:
    seed: int = 123
    n_points: int = 7

    # coordinate ranges (m)
    xy_range: Tuple[float, float] = (0.0, 500.0)
    z_range: Tuple[float, float] = (0.0, 350.0)

    hover_time: int = 10


def generate_random_params(cfg: RandomWaypointsConfig) -> DroneParams:
    """Reference drone flying over random waypoints; origin is always (0, 0, 0)."""
    rnd = random.Random(cfg.seed)
    coords: List[Point] = [Point(0.0, 0.0, 0.0)]
    for _ in range(cfg.n_points - 1):
        coords.append(
            Point(
                x=round(rnd.uniform(*cfg.xy_range), 1),
                y=round(rnd.uniform(*cfg.xy_range), 1),
                z=round(rnd.uniform(*cfg.z_range), 1),
            )
        )
    return DroneParams(hover_time=cfg.hover_time, coords=tuple(coords), **REFERENCE_DRONE)


@dataclass(frozen=True)
class RandomMatrixConfig:
    seed: int = 7
    n: int = 6
    cost_range: Tuple[float, float] = (1.0, 100.0)

    # probability an off-diagonal edge is missing (inf)
    p_missing: float = 0.0

    # if False, cost[i][j] == cost[j][i]
    asymmetric: bool = True


def generate_random_matrix(cfg: RandomMatrixConfig) -> np.ndarray:
    """Random N x N cost matrix with inf diagonal and optional missing edges."""
    rnd = random.Random(cfg.seed)
    m = np.full((cfg.n, cfg.n), np.inf)
    for i in range(cfg.n):
        for j in range(cfg.n):
            if i == j or (not cfg.asymmetric and j < i):
                continue
            if rnd.random() < cfg.p_missing:
                continue
            m[i, j] = round(rnd.uniform(*cfg.cost_range), 3)
    if not cfg.asymmetric:
        lower = np.tril_indices(cfg.n, -1)
        m[lower] = m.T[lower]
    return m
