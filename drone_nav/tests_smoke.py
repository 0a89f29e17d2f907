# drone_nav/tests_smoke.py
# Very small smoke tests you can run with:
#   python -m drone_nav.tests_smoke
#
# These are not full unit tests, but they quickly tell you if
# costing, both solvers and validation are wired correctly.

from __future__ import annotations

from drone_nav.run import run_navigation
from drone_nav.sample_data import RandomWaypointsConfig, generate_random_params, reference_params
from drone_nav.validate import raise_on_errors, validate_tour
from drone_nav.config import matrix_for


def test_reference_mission() -> None:
    res = run_navigation(reference_params(), "energy")
    assert abs(res.result.cost - 213.615) < 0.005
    assert res.indices[0] == 0 and res.indices[-1] == 0


def test_solvers_agree_on_random_mission() -> None:
    params = generate_random_params(RandomWaypointsConfig(seed=42, n_points=8))
    a = run_navigation(params, "time", solver="bnb")
    b = run_navigation(params, "time", solver="cpsat")

    raise_on_errors(validate_tour(matrix_for(a.matrices, "time"), a.result))
    # CP-SAT rounds each edge to 1e-3, so its tour may be up to n * 1e-3 worse
    assert a.result.cost <= b.result.cost + 1e-9
    assert b.result.cost - a.result.cost < 8 * 1e-3 + 1e-9


def main() -> None:
    print("Running smoke tests...")
    test_reference_mission()
    test_solvers_agree_on_random_mission()
    print("OK")


if __name__ == "__main__":
    main()
