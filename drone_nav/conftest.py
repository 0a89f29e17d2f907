# drone_nav/conftest.py
# Shared pytest fixtures: the reference six-waypoint mission and its cost matrices.

from __future__ import annotations

import json

import numpy as np
import pytest

INF = np.inf


@pytest.fixture
def energy_cost() -> np.ndarray:
    return np.array([
        [INF, 94.793, 22.634, 125.215, 20.567, 75.933],
        [38.706, INF, 41.894, 32.732, 42.790, 27.856],
        [20.391, 95.737, INF, 105.813, 10.618, 71.252],
        [59.780, 23.384, 42.622, INF, 43.402, 29.595],
        [17.950, 96.260, 10.244, 106.220, INF, 60.634],
        [38.542, 46.552, 36.104, 57.639, 25.860, INF],
    ])


@pytest.fixture
def time_cost() -> np.ndarray:
    return np.array([
        [INF, 96.774, 39.395, 112.903, 33.951, 64.516],
        [100.000, INF, 96.000, 37.498, 95.333, 36.098],
        [39.395, 92.903, INF, 109.032, 20.646, 60.645],
        [116.667, 37.498, 112.667, INF, 112.000, 50.000],
        [33.951, 92.258, 20.646, 108.387, INF, 60.000],
        [66.667, 36.098, 62.667, 48.387, 62.000, INF],
    ])


@pytest.fixture
def capacity_cost() -> np.ndarray:
    return np.array([
        [INF, 1.155, 0.276, 1.526, 0.251, 0.925],
        [0.472, INF, 0.510, 0.399, 0.521, 0.339],
        [0.248, 1.166, INF, 1.289, 0.129, 0.868],
        [0.728, 0.285, 0.519, INF, 0.529, 0.361],
        [0.219, 1.173, 0.125, 1.294, INF, 0.739],
        [0.470, 0.567, 0.440, 0.702, 0.315, INF],
    ])


@pytest.fixture
def params_dict() -> dict:
    return {
        "battery_voltage": 22.8,
        "speed_horizontal": 12.5,
        "speed_up": 3.1,
        "speed_down": 3,
        "power_horizontal": 486.2,
        "power_up": 899.04,
        "power_down": 309.17,
        "power_hover": 545.8,
        "hover_time": 0,
        "coords": [
            {"x": 0, "y": 0, "z": 0},
            {"x": 10, "y": 200, "z": 300},
            {"x": 200, "y": 450, "z": 12},
            {"x": 400, "y": 460, "z": 350},
            {"x": 350, "y": 240, "z": 14},
            {"x": 450, "y": 100, "z": 200},
        ],
    }


@pytest.fixture
def params_file(tmp_path, params_dict):
    path = tmp_path / "params.json"
    path.write_text(json.dumps(params_dict), encoding="utf-8")
    return path
