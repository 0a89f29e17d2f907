# drone_nav/config.py
# Centralized defaults and configuration helpers.
# Keeps "magic numbers" (origin, unit conversions, solver knobs) in one place.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from .types import CostMatrices


@dataclass(frozen=True)
class Defaults:
    # Tour always starts and ends here
    origin: int = 0

    # Unit conversions
    sec_per_hour: int = 3600
    joules_per_kj: float = 1000.0

    # Output
    float_precision: int = 3
    json_indent: int = 2
    export_prefix: str = "route"

    # Solver selection: "bnb" (branch and bound) or "cpsat" (OR-Tools circuit model)
    default_solver: str = "bnb"

    # CP-SAT works on integers; costs are multiplied by this and rounded
    cpsat_scale: int = 1000
    cpsat_time_limit_s: float = 10.0
    cpsat_workers: int = 1

    # Relative tolerance when checking a tour cost against the matrix sum
    cost_rel_tol: float = 1e-6


DEFAULTS = Defaults()

# Optimization target -> CostMatrices attribute
OPTIMIZE_MODES: Dict[str, str] = {
    "intuitive": "distance",
    "time": "time",
    "battery": "capacity",
    "energy": "energy",
}

OPTIMIZE_UNITS: Dict[str, str] = {
    "intuitive": "m",
    "time": "s",
    "battery": "Ah",
    "energy": "kJ",
}

_ALIASES: Dict[str, str] = {
    "i": "intuitive",
    "distance": "intuitive",
    "t": "time",
    "b": "battery",
    "capacity": "battery",
    "e": "energy",
}

SOLVERS: Tuple[str, ...] = ("bnb", "cpsat")


def parse_optimize(text: str) -> str:
    """
    Normalize an optimization mode: 'energy', 'E', 'capacity' -> canonical name.
    """
    s = str(text).strip().lower()
    s = _ALIASES.get(s, s)
    if s not in OPTIMIZE_MODES:
        raise ValueError(f"Unknown optimization mode {text!r}; expected one of {sorted(OPTIMIZE_MODES)}")
    return s


def matrix_for(matrices: CostMatrices, optimize: str) -> np.ndarray:
    """Pick the cost matrix that the given optimization mode minimizes."""
    return getattr(matrices, OPTIMIZE_MODES[parse_optimize(optimize)])
