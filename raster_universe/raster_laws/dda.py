"""
Digital Differential Analyzer (DDA) line rasterization.

Steps one cell at a time along the dominant axis and accumulates the slope on
the other axis in a float, rounding it (ties toward +infinity) for each
emitted cell.

Endpoints must be integer-valued: the stepped coordinate walks the integers
from start to end inclusive.
"""

from raster_core.numeric import fmt_fixed, require_integer, round_half_up
from raster_core.types import GridPoint, RasterResult


def dda(x0: int, y0: int, x1: int, y1: int) -> RasterResult:
    """
    Rasterize a segment with the DDA algorithm.

    Axis selection:
        |dx| >= |dy| -> x-major: x steps by sign(dx), y += dy/dx per step
        |dy| >  |dx| -> y-major: y steps by sign(dy), x += dx/dy per step
    sign(0) is taken as +1. Coincident endpoints fall in the x-major branch
    with a zero slope and produce exactly one point.

    Args:
        x0, y0: Start point (integer-valued)
        x1, y1: End point (integer-valued)

    Returns:
        RasterResult with max(|dx|, |dy|) + 1 points, one trace line each.

    Raises:
        InvalidInput: Non-finite or non-integer coordinate.

    Trace format:
        x-major: "x=3, y=1.80 → (3, 2)"
        y-major: "x=1.80, y=3 → (2, 3)"
    """
    x0 = require_integer("x0", x0)
    y0 = require_integer("y0", y0)
    x1 = require_integer("x1", x1)
    y1 = require_integer("y1", y1)

    dx, dy = x1 - x0, y1 - y0
    points = []
    trace = []

    if abs(dx) >= abs(dy):
        sx = 1 if dx >= 0 else -1
        slope = dy / dx if dx != 0 else 0.0
        y = float(y0)
        for x in range(x0, x1 + sx, sx):
            ry = round_half_up(y)
            points.append(GridPoint(x, ry))
            trace.append(f"x={x}, y={fmt_fixed(y)} → ({x}, {ry})")
            y += slope * sx
    else:
        sy = 1 if dy > 0 else -1
        slope = dx / dy
        x = float(x0)
        for y in range(y0, y1 + sy, sy):
            rx = round_half_up(x)
            points.append(GridPoint(rx, y))
            trace.append(f"x={fmt_fixed(x)}, y={y} → ({rx}, {y})")
            x += slope * sy

    return RasterResult(points=tuple(points), trace=tuple(trace), algorithm="dda")


__all__ = ["dda"]
