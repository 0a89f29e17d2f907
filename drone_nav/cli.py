# drone_nav/cli.py
# Command line entrypoint:
# - reads drone parameters JSON
# - plans the optimal closed tour for the selected cost
# - prints a text or JSON report (stdout or --out file)
# - optional CSV export folder and 3-D matplotlib figure
#
# Run:
#   python -m drone_nav params.json -e
#   python -m drone_nav params.json --time --json --out result.json
#   python -m drone_nav params.json -b --solver cpsat --csv out/ --png route.png

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULTS, SOLVERS
from .errors import NavigationError
from .formatter import write_report
from .logger import get_logger, set_enabled
from .run import run_from_file


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="drone_nav",
        description="Plan the optimal closed drone tour over 3-D waypoints (exact TSP).",
    )
    p.add_argument("params_file", type=str, help="Drone parameters file (JSON)")
    p.add_argument("--out", type=str, default="", metavar="filename", help="Write result to the specified file")
    p.add_argument("--json", action="store_true", help="Output result as JSON")

    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("-i", "--intuitive", dest="optimize", action="store_const", const="intuitive",
                   help="Optimize by intuitive flight (m)")
    g.add_argument("-t", "--time", dest="optimize", action="store_const", const="time",
                   help="Optimize by flying time (s)")
    g.add_argument("-b", "--battery", dest="optimize", action="store_const", const="battery",
                   help="Optimization of battery capacity usage (Ah)")
    g.add_argument("-e", "--energy", dest="optimize", action="store_const", const="energy",
                   help="Optimize by energy consumption (kJ)")

    p.add_argument("--solver", type=str, default=DEFAULTS.default_solver, choices=list(SOLVERS),
                   help="Exact solver: branch and bound (bnb) or OR-Tools CP-SAT circuit (cpsat)")
    p.add_argument("--time-limit", type=float, default=None, metavar="S", help="Give up after S seconds of search")

    p.add_argument("--csv", type=str, default="", metavar="DIR", help="Export path + matrices as CSV into DIR")
    p.add_argument("--prefix", type=str, default=DEFAULTS.export_prefix, help="CSV filename prefix")
    p.add_argument("--png", type=str, default="", help="Save 3-D route plot as PNG file")
    p.add_argument("--plot", action="store_true", help="Show 3-D route plot")
    p.add_argument("-q", "--quiet", action="store_true", help="Do not print progress to stderr")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_argparser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        parser.print_help()
        raise SystemExit(2)
    args = parser.parse_args(argv)
    set_enabled(not args.quiet)
    log = get_logger()

    try:
        res = run_from_file(
            Path(args.params_file),
            args.optimize,
            solver=args.solver,
            time_limit_s=args.time_limit,
        )
    except NavigationError as e:
        log.error(str(e))
        raise SystemExit(1)

    out = args.out.strip() or None
    write_report(res, out, as_json=bool(args.json))
    if out is not None:
        log.info(f"Result written to: {out}")

    if args.csv.strip():
        from .io_csv import export_all
        export_all(res, args.csv.strip(), prefix=args.prefix)
        log.info(f"Exported CSV to: {args.csv.strip()}")

    if args.png.strip():
        from .plotting import save_tour_png
        save_tour_png(res, args.png.strip())
        log.info(f"Route plot saved to: {args.png.strip()}")

    if args.plot:
        from .plotting import show_tour
        show_tour(res)


if __name__ == "__main__":
    main()
