# drone_nav/io_csv.py
# CSV export helpers:
# - export the tour (one row per waypoint in flying order)
# - export each cost matrix (row = departure, column = destination)

from __future__ import annotations

import csv
from pathlib import Path

import numpy as np

from .config import DEFAULTS
from .run import RunResult


def export_path_csv(run: RunResult, path: str | Path) -> None:
    """
    Write the tour into a CSV file. The origin appears first and last.
    point_index is 1-based, like the text report.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = ["order", "point_index", "x", "y", "z"]

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for order, (idx, p) in enumerate(zip(run.indices, run.points)):
            w.writerow({"order": order, "point_index": idx + 1, "x": p.x, "y": p.y, "z": p.z})


def export_matrix_csv(matrix: np.ndarray, path: str | Path) -> None:
    """Write a cost matrix; inf entries are written as 'inf'."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    n = matrix.shape[0]
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["from/to"] + [str(j + 1) for j in range(n)])
        for i in range(n):
            w.writerow([str(i + 1)] + ["inf" if v == np.inf else repr(float(v)) for v in matrix[i]])


def export_all(run: RunResult, out_dir: str | Path, prefix: str = DEFAULTS.export_prefix) -> None:
    """
    Export the tour and the energy, time, capacity and distance matrices into out_dir.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    export_path_csv(run, out_dir / f"{prefix}_path.csv")
    for name in ("energy", "time", "capacity", "distance"):
        export_matrix_csv(getattr(run.matrices, name), out_dir / f"{prefix}_{name}.csv")
