# drone_nav/io_json.py
# Load drone parameters JSON into DroneParams.
#
# Expected JSON shape:
# {
#   "battery_voltage": 22.8,
#   "speed_horizontal": 12.5, "speed_up": 3.1, "speed_down": 3,
#   "power_horizontal": 486.2, "power_up": 899.04, "power_down": 309.17,
#   "power_hover": 545.8,
#   "hover_time": 10,
#   "coords": [{"x": 0, "y": 0, "z": 0}, {"x": 10, "y": 200, "z": 300}, ...]
# }

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .errors import ParamsParseError
from .types import DroneParams, Point


_FLOAT_FIELDS = (
    "battery_voltage",
    "speed_horizontal",
    "speed_up",
    "speed_down",
    "power_horizontal",
    "power_up",
    "power_down",
    "power_hover",
)


def _number(data: Dict[str, Any], key: str) -> float:
    if key not in data:
        raise ParamsParseError(f"Cannot parse config file: missing field '{key}'")
    v = data[key]
    # bool is an int subclass; reject it explicitly
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ParamsParseError(f"Cannot parse config file: field '{key}' must be a number, got {v!r}")
    return float(v)


def params_from_dict(data: Any) -> DroneParams:
    """Convert an already decoded JSON object into DroneParams."""
    if not isinstance(data, dict):
        raise ParamsParseError("Cannot parse config file: top level must be an object")

    values = {k: _number(data, k) for k in _FLOAT_FIELDS}

    hover = _number(data, "hover_time")
    if hover != int(hover):
        raise ParamsParseError(f"Cannot parse config file: hover_time must be an integer, got {hover}")

    raw_coords = data.get("coords")
    if not isinstance(raw_coords, list):
        raise ParamsParseError("Cannot parse config file: missing field 'coords'")
    coords = []
    for k, c in enumerate(raw_coords):
        if not isinstance(c, dict):
            raise ParamsParseError(f"Cannot parse config file: coords[{k}] must be an object")
        coords.append(Point(x=_number(c, "x"), y=_number(c, "y"), z=_number(c, "z")))

    try:
        return DroneParams(hover_time=int(hover), coords=tuple(coords), **values)
    except ValueError as e:
        raise ParamsParseError(f"Cannot parse config file: {e}") from e


def parse_params(text: str) -> DroneParams:
    """Parse drone parameters from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParamsParseError(f"Cannot parse config file: {e}") from e
    return params_from_dict(data)


def load_params(path: str | Path) -> DroneParams:
    """Load drone parameters from a JSON file."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise ParamsParseError(f"Cannot open config file: {e}") from e
    return parse_params(text)


def params_to_dict(params: DroneParams) -> Dict[str, Any]:
    """Inverse of params_from_dict (handy for writing sample files)."""
    out: Dict[str, Any] = {k: getattr(params, k) for k in _FLOAT_FIELDS}
    out["hover_time"] = params.hover_time
    out["coords"] = [{"x": p.x, "y": p.y, "z": p.z} for p in params.coords]
    return out


def save_params(params: DroneParams, path: str | Path, *, indent: int = 2) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(params_to_dict(params), f, indent=indent)
