# drone_nav/utils.py
# Small utilities used across the project:
# - timing context manager
# - inf-aware conversion of matrices to plain lists
#
# Keeps dependencies minimal (stdlib + numpy).

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

import numpy as np


@contextmanager
def timer(label: str = "timer") -> Iterator[Dict[str, float]]:
    """
    Usage:
      with timer("solve") as t:
          ...
      print(t["seconds"])
    """
    t0 = time.perf_counter()
    payload: Dict[str, float] = {}
    try:
        yield payload
    finally:
        payload["seconds"] = time.perf_counter() - t0


def finite_or_none(v: float) -> Optional[float]:
    """inf -> None, anything else -> float (JSON has no infinity)."""
    v = float(v)
    return None if v == np.inf else v


def matrix_to_rows(matrix: np.ndarray) -> List[List[Optional[float]]]:
    return [[finite_or_none(v) for v in row] for row in matrix]
