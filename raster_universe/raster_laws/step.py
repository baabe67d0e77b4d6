"""
Naive incremental stepping between two points.

The segment is divided into steps = max(|dx|, |dy|) equal increments; a float
accumulator walks from the start point and every position is rounded to the
nearest cell (ties toward +infinity, see raster_core.numeric).

Endpoints may be arbitrary finite reals.
"""

import math

from raster_core.errors import InvalidInput
from raster_core.numeric import fmt_fixed, require_finite, round_half_up
from raster_core.types import GridPoint, RasterResult


def step_by_step(x0: float, y0: float, x1: float, y1: float) -> RasterResult:
    """
    Rasterize a segment by fixed-count parametric stepping.

    Args:
        x0, y0: Start point
        x1, y1: End point

    Returns:
        RasterResult with floor(steps) + 1 points and one trace line each.
        Coincident endpoints yield exactly one point.

    Raises:
        InvalidInput: Any coordinate is NaN, infinite or not a number,
            or the endpoints are so far apart that the step count overflows.

    Trace format:
        "i=2: x=1.67, y=0.67 → (2, 1)"
    """
    x0 = require_finite("x0", x0)
    y0 = require_finite("y0", y0)
    x1 = require_finite("x1", x1)
    y1 = require_finite("y1", y1)

    dx, dy = x1 - x0, y1 - y0
    steps = max(abs(dx), abs(dy))
    if not math.isfinite(steps):
        raise InvalidInput("steps", steps, f"segment length overflows: dx={dx}, dy={dy}")

    if steps == 0:
        x_step = y_step = 0.0
    else:
        x_step, y_step = dx / steps, dy / steps

    points = []
    trace = []
    x, y = x0, y0
    for i in range(math.floor(steps) + 1):
        cell = GridPoint(round_half_up(x), round_half_up(y))
        points.append(cell)
        trace.append(f"i={i}: x={fmt_fixed(x)}, y={fmt_fixed(y)} → ({cell.x}, {cell.y})")
        x += x_step
        y += y_step

    return RasterResult(points=tuple(points), trace=tuple(trace), algorithm="step")


__all__ = ["step_by_step"]
