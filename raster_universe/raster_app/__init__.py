"""
raster_app: Driver and presentation layer around the rasterization core.

Provides:
- driver: Algorithm registry, input building, timed runs with status line
- picker: Two-click point selection (center/edge for circles)
- canvas: Pixel <-> grid mapping and a numpy-backed ASCII grid canvas
- config: Canvas geometry and palette, JSON overrides
- cli: argparse entry point (python -m raster_app)
"""

from .driver import ALGORITHMS, RunReport, build_input, rasterize, run

__all__ = ["ALGORITHMS", "RunReport", "build_input", "rasterize", "run"]
