#!/usr/bin/env python3
"""
Command-line front end for the raster visualizer.

Reads the same fields as the original form (algorithm, x0, y0, x1, y1, r),
optionally takes the two points from simulated canvas clicks, rasterizes,
and prints the ASCII grid, the step trace and the status line.

Usage:
    python -m raster_app --algo bresenham --x0 0 --y0 0 --x1 5 --y1 3
    python -m raster_app --algo circle --x0 0 --y0 0 --r 5 --no-trace
    python -m raster_app --algo circle --click 400 300 --click 500 240
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from raster_core.errors import IncompleteSelectionError, RasterError

from .canvas import GridCanvas, to_grid_coord
from .config import COLORS, load_config
from .driver import ALGORITHMS, build_input, run
from .picker import PointPicker
from .utils import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raster-universe",
        description="Rasterize a line or circle and show the chosen pixels step by step",
    )
    parser.add_argument(
        "--algo",
        type=str,
        default="bresenham",
        choices=list(ALGORITHMS),
        help="Algorithm to run (default: bresenham)",
    )
    parser.add_argument("--x0", type=int, default=0, help="Start x / circle center x")
    parser.add_argument("--y0", type=int, default=0, help="Start y / circle center y")
    parser.add_argument("--x1", type=int, default=0, help="End x / point on circle x")
    parser.add_argument("--y1", type=int, default=0, help="End y / point on circle y")
    parser.add_argument("--r", type=int, default=0, help="Circle radius (default: 0)")
    parser.add_argument(
        "--derive-radius",
        action="store_true",
        help="Circle only: radius = distance from (x0, y0) to (x1, y1)",
    )
    parser.add_argument(
        "--click",
        type=float,
        nargs=2,
        action="append",
        metavar=("PX", "PY"),
        help="Simulated canvas click in pixel coordinates (give twice to pick both points)",
    )
    parser.add_argument("--config", type=str, default=None, help="JSON canvas config file")
    parser.add_argument(
        "--color",
        type=str,
        default="black",
        choices=list(COLORS),
        help="Color of the rasterized cells in the grid (default: black)",
    )
    parser.add_argument("--no-grid", action="store_true", help="Do not print the ASCII grid")
    parser.add_argument("--no-trace", action="store_true", help="Do not print the step trace")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logger("raster_app", args.log_file, level=getattr(logging, args.log_level))
    logger = logging.getLogger("raster_app.cli")

    try:
        config = load_config(args.config)
        x0, y0, x1, y1 = args.x0, args.y0, args.x1, args.y1
        derive_radius = args.derive_radius

        if args.click:
            picker = PointPicker()
            for px, py in args.click:
                gx, gy = to_grid_coord(px, py, config)
                event = picker.click(gx, gy, args.algo)
                logger.info(event.message)
                print(event.message)
            if not picker.has_pair:
                raise IncompleteSelectionError("Two clicks are needed to pick both points")
            (x0, y0), (x1, y1) = picker.p1, picker.p2
            derive_radius = True

        spec = build_input(args.algo, x0, y0, x1, y1, args.r, derive_radius=derive_radius)
        logger.info(f"Rasterizing {spec} with {args.algo}")
        report = run(args.algo, spec)
    except RasterError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not args.no_grid:
        canvas = GridCanvas(config)
        painted = canvas.render(report.result.points, COLORS[args.color])
        if painted < len(report.result):
            logger.warning(
                f"{len(report.result) - painted} of {len(report.result)} points fall outside the canvas"
            )
        print(canvas.to_text())
        print()

    if not args.no_trace:
        print(report.result.log_text())
        print()

    print(report.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
