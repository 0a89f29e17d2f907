# drone_nav/test_io_json.py
# Parameter file loading.

from __future__ import annotations

import json

import pytest

from drone_nav.errors import ParamsParseError
from drone_nav.io_json import load_params, parse_params, params_to_dict, save_params
from drone_nav.types import Point


def test_parse_params(params_dict) -> None:
    params = parse_params(json.dumps(params_dict))
    assert params.battery_voltage == 22.8
    assert params.speed_horizontal == 12.5
    assert params.speed_up == 3.1
    assert params.speed_down == 3.0
    assert params.power_horizontal == 486.2
    assert params.power_up == 899.04
    assert params.power_down == 309.17
    assert params.power_hover == 545.8
    assert params.hover_time == 0
    assert params.coords == (
        Point(0.0, 0.0, 0.0),
        Point(10.0, 200.0, 300.0),
        Point(200.0, 450.0, 12.0),
        Point(400.0, 460.0, 350.0),
        Point(350.0, 240.0, 14.0),
        Point(450.0, 100.0, 200.0),
    )


def test_load_params_from_file(params_file) -> None:
    params = load_params(params_file)
    assert params.num_points == 6


def test_save_and_load(tmp_path, params_dict) -> None:
    params = parse_params(json.dumps(params_dict))
    path = tmp_path / "sub" / "copy.json"
    save_params(params, path)
    assert load_params(path) == params
    assert params_to_dict(params)["coords"][1] == {"x": 10.0, "y": 200.0, "z": 300.0}


def test_unknown_shape_is_rejected() -> None:
    with pytest.raises(ParamsParseError):
        parse_params('{ "foo": "bar" }')


def test_invalid_json_is_rejected() -> None:
    with pytest.raises(ParamsParseError, match="Cannot parse config file"):
        parse_params("{ not json")


def test_missing_file_is_reported(tmp_path) -> None:
    with pytest.raises(ParamsParseError, match="Cannot open config file"):
        load_params(tmp_path / "nope.json")


@pytest.mark.parametrize(
    "key, value",
    [
        ("speed_up", 0),
        ("battery_voltage", -1),
        ("power_down", -5),
        ("hover_time", 1.5),
        ("speed_horizontal", "fast"),
        ("coords", []),
        ("coords", [{"x": 1, "y": 2}]),
    ],
)
def test_out_of_range_values_are_rejected(params_dict, key, value) -> None:
    params_dict[key] = value
    with pytest.raises(ParamsParseError):
        parse_params(json.dumps(params_dict))


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_params("[]")
