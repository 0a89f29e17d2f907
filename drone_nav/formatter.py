# drone_nav/formatter.py
# Render a RunResult as a human-readable text report or as pretty JSON.
#
# Text layout:
#   - energy, capacity and time matrices (row = departure, column = destination)
#   - the tour as 1-based waypoint index + coordinates
#   - energy / capacity / time totals of the tour

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

import numpy as np

from .config import DEFAULTS
from .run import RunResult
from .utils import matrix_to_rows


def _fmt(v: float, prec: int) -> str:
    return "inf" if v == np.inf else f"{v:.{prec}f}"


def format_matrix(matrix: np.ndarray, prec: int = DEFAULTS.float_precision) -> str:
    cells = [[_fmt(v, prec) for v in row] for row in matrix]
    width = max((len(c) for row in cells for c in row), default=0)
    return "\n".join("  " + " ".join(c.rjust(width) for c in row) for row in cells)


def format_text(run: RunResult, prec: int = DEFAULTS.float_precision) -> str:
    m = run.matrices
    lines: List[str] = ["Row - departure point, column - destination point", ""]
    lines += ["Energy:", format_matrix(m.energy, prec), ""]
    lines += ["Capacity:", format_matrix(m.capacity, prec), ""]
    lines += ["Time:", format_matrix(m.time, prec), ""]

    lines.append("Path:")
    for idx, p in zip(run.indices, run.points):
        lines.append(f"{idx + 1}: ({p.x:.{prec}f}, {p.y:.{prec}f}, {p.z:.{prec}f})")

    lines.append("")
    lines.append(f"Energy: {run.energy_cost:.{prec}f} kJ")
    lines.append(f"Capacity: {run.capacity_cost:.{prec}f} Ah")
    lines.append(f"Time: {run.time_cost:.{prec}f} s")
    return "\n".join(lines) + "\n"


def result_to_dict(run: RunResult) -> Dict[str, Any]:
    """JSON-friendly dict; inf matrix entries become None."""
    m = run.matrices
    return {
        "energy": matrix_to_rows(m.energy),
        "time": matrix_to_rows(m.time),
        "capacity": matrix_to_rows(m.capacity),
        "path": [{"x": p.x, "y": p.y, "z": p.z} for p in run.points],
        "energy_cost": run.energy_cost,
        "time_cost": run.time_cost,
        "capacity_cost": run.capacity_cost,
    }


def format_json(run: RunResult, *, indent: int = DEFAULTS.json_indent) -> str:
    return json.dumps(result_to_dict(run), indent=indent, allow_nan=False) + "\n"


def write_report(run: RunResult, out: Optional[str | Path] = None, *, as_json: bool = False) -> None:
    """Write the report to `out` (file path) or to stdout."""
    text = format_json(run) if as_json else format_text(run)
    if out is None:
        _write(sys.stdout, text)
        return
    path = Path(out)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        _write(f, text)


def _write(stream: TextIO, text: str) -> None:
    stream.write(text)
    stream.flush()
