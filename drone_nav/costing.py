# drone_nav/costing.py
# Cost matrix generation from drone parameters:
# - energy consumption (kJ), flying time (s), battery capacity usage (Ah)
# - plain 2-D distance (m) for an "intuitive" flight
#
# Notes:
# - Vertical and horizontal legs are flown at independent speeds; time is the
#   longer of the two, energy is the sum of both.
# - Hovering at each visited waypoint adds a constant to energy, time and
#   capacity of every edge.
# - The diagonal is inf (no self-loops).

from __future__ import annotations

from typing import Tuple

import numpy as np

from .config import DEFAULTS
from .types import CostMatrices, DroneParams, Point


def leg_costs(a: Point, b: Point, params: DroneParams) -> Tuple[float, float, float]:
    """
    Costs of flying from a to b without hovering.
    Returns (energy_J, time_s, capacity_Ah).
    """
    if a.z < b.z:
        t_ver = (b.z - a.z) / params.speed_up
        power_ver = params.power_up
    else:
        t_ver = (a.z - b.z) / params.speed_down
        power_ver = 0.0 if a.z == b.z else params.power_down

    t_hor = float(np.hypot(a.x - b.x, a.y - b.y)) / params.speed_horizontal

    energy = t_ver * power_ver + t_hor * params.power_horizontal
    capacity = energy / (params.battery_voltage * DEFAULTS.sec_per_hour)
    return energy, max(t_hor, t_ver), capacity


def generate_cost_matrices(params: DroneParams) -> CostMatrices:
    """Build the four N x N cost matrices for every ordered pair of waypoints."""
    # Constants that represent the cost of hovering at each visited waypoint
    energy_hover = params.power_hover * params.hover_time
    capacity_hover = energy_hover / (params.battery_voltage * DEFAULTS.sec_per_hour)

    n = params.num_points
    energy = np.full((n, n), np.inf)
    time_s = np.full((n, n), np.inf)
    capacity = np.full((n, n), np.inf)
    distance = np.full((n, n), np.inf)

    coords = params.coords
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            e, t, c = leg_costs(coords[i], coords[j], params)
            energy[i, j] = (e + energy_hover) / DEFAULTS.joules_per_kj
            time_s[i, j] = t + params.hover_time
            capacity[i, j] = c + capacity_hover
            distance[i, j] = np.hypot(coords[i].x - coords[j].x, coords[i].y - coords[j].y)

    return CostMatrices(energy=energy, time=time_s, capacity=capacity, distance=distance)
