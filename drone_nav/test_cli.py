# drone_nav/test_cli.py
# End-to-end: parameters file -> run pipeline -> text / JSON / CSV report and CLI.

from __future__ import annotations

import csv
import json

import pytest

from drone_nav.cli import build_argparser, main
from drone_nav.errors import UnableToFindPathError
from drone_nav.formatter import format_json, format_text, result_to_dict
from drone_nav.io_csv import export_all
from drone_nav.io_json import params_from_dict
from drone_nav.logger import Logger
from drone_nav.run import run_from_file, run_navigation
from drone_nav.sample_data import RandomWaypointsConfig, generate_random_params


# ----------------------------
# Run pipeline
# ----------------------------

def test_run_energy(params_file) -> None:
    res = run_from_file(params_file, "energy")
    assert res.optimize == "energy"
    assert res.result.cost == pytest.approx(213.615, abs=0.005)
    assert res.energy_cost == pytest.approx(res.result.cost)
    assert len(res.points) == 7
    assert res.indices[0] == 0 and res.indices[-1] == 0
    assert sorted(res.indices[:-1]) == list(range(6))


def test_run_totals_follow_the_chosen_path(params_file) -> None:
    res = run_from_file(params_file, "time")
    assert res.time_cost == pytest.approx(res.result.cost)
    assert res.time_cost == pytest.approx(300.997, abs=0.005)
    # energy along the time-optimal tour can only be >= the energy optimum
    assert res.energy_cost >= 213.615 - 0.005


def test_run_intuitive_minimizes_distance(params_file) -> None:
    res = run_from_file(params_file, "i")
    assert res.optimize == "intuitive"
    assert res.result.cost == pytest.approx(res.metrics.distance)


def test_cpsat_solver_agrees_with_bnb(params_file) -> None:
    a = run_from_file(params_file, "battery", solver="bnb")
    b = run_from_file(params_file, "battery", solver="cpsat")
    # CP-SAT optimizes costs rounded to 1e-3 per edge
    assert a.result.cost <= b.result.cost + 1e-9
    assert b.result.cost - a.result.cost < 6 * 1e-3


def test_unknown_solver_is_rejected(params_file) -> None:
    with pytest.raises(ValueError):
        run_from_file(params_file, "energy", solver="greedy")


def test_random_missions_plan_valid_tours() -> None:
    for seed in range(3):
        params = generate_random_params(RandomWaypointsConfig(seed=seed, n_points=7))
        res = run_navigation(params, "energy")
        assert len(res.result.path) == 7
        assert res.capacity_cost > 0


def test_unable_to_find_path_message() -> None:
    assert str(UnableToFindPathError()) == "Unable to find path"


# ----------------------------
# Report
# ----------------------------

def test_text_report(params_dict) -> None:
    res = run_navigation(params_from_dict(params_dict), "energy")
    text = format_text(res)
    assert text.startswith("Row - departure point, column - destination point")
    for header in ("Energy:", "Capacity:", "Time:", "Path:"):
        assert header in text
    assert "inf" in text
    assert "1: (0.000, 0.000, 0.000)" in text
    assert text.rstrip().endswith(" s")
    assert f"Energy: {res.energy_cost:.3f} kJ" in text


def test_json_report(params_dict) -> None:
    res = run_navigation(params_from_dict(params_dict), "energy")
    data = json.loads(format_json(res))
    assert set(data) == {"energy", "time", "capacity", "path", "energy_cost", "time_cost", "capacity_cost"}
    assert data["energy"][0][0] is None
    assert data["energy"][0][1] == pytest.approx(94.793, abs=0.001)
    assert len(data["path"]) == 7
    assert data["path"][0] == {"x": 0.0, "y": 0.0, "z": 0.0}
    assert data["path"][-1] == data["path"][0]
    assert data == result_to_dict(res)


def test_csv_export(tmp_path, params_dict) -> None:
    res = run_navigation(params_from_dict(params_dict), "time")
    export_all(res, tmp_path, prefix="t")

    with (tmp_path / "t_path.csv").open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 7
    assert rows[0]["point_index"] == "1"
    assert rows[-1]["point_index"] == "1"

    with (tmp_path / "t_energy.csv").open(newline="", encoding="utf-8") as f:
        grid = list(csv.reader(f))
    assert grid[0] == ["from/to", "1", "2", "3", "4", "5", "6"]
    assert grid[1][1] == "inf"
    for name in ("time", "capacity", "distance"):
        assert (tmp_path / f"t_{name}.csv").exists()


# ----------------------------
# CLI
# ----------------------------

def test_parse_args() -> None:
    args = build_argparser().parse_args(["params.json", "--out", "result.json", "--json", "-e"])
    assert args.params_file == "params.json"
    assert args.out == "result.json"
    assert args.json
    assert args.optimize == "energy"
    assert args.solver == "bnb"


def test_optimize_flag_is_required() -> None:
    with pytest.raises(SystemExit):
        build_argparser().parse_args(["params.json"])


def test_optimize_flags_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        build_argparser().parse_args(["params.json", "-e", "-t"])


def test_main_writes_json_file(tmp_path, params_file) -> None:
    out = tmp_path / "result.json"
    main([str(params_file), "--json", "--out", str(out), "-b", "--quiet"])
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["capacity_cost"] == pytest.approx(2.603, abs=0.005)


def test_main_prints_text_to_stdout(capsys, params_file) -> None:
    main([str(params_file), "-t"])
    captured = capsys.readouterr()
    assert captured.out.startswith("Row - departure point")
    assert "Time:" in captured.out
    assert "[NAV]" in captured.err


def test_main_reports_bad_params_file(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.json"), "-e"])
    assert exc.value.code == 1
    assert "Cannot open config file" in capsys.readouterr().err


def test_main_saves_png(tmp_path, params_file) -> None:
    png = tmp_path / "route.png"
    main([str(params_file), "-e", "--png", str(png), "--quiet", "--out", str(tmp_path / "r.txt")])
    assert png.exists() and png.stat().st_size > 0


def test_main_without_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    out = capsys.readouterr().out
    assert out.startswith("usage:")
    assert "--energy" in out


def test_search_summary_goes_to_stderr(capsys) -> None:
    log = Logger(prefix="[T]")
    log.search("Branch and bound", 6, "cost=1.000", 0.25)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[T] Branch and bound [n=6] cost=1.000 (0.250 s)\n"

    Logger(enabled=False).search("CP-SAT circuit", 6, "cost=1.000", 0.25)
    assert capsys.readouterr().err == ""
