"""
Bresenham line rasterization (integer error term).

Uses the e2 = 2*err variant: a single loop handles all octants, and a step
may move on both axes at once (diagonal move).

Direction rule: sx = 1 if x0 < x1 else -1 (same for y). Equal coordinates
give -1, never 0; the corresponding axis is then never stepped because its
delta is 0.
"""

from raster_core.numeric import require_integer
from raster_core.types import GridPoint, RasterResult


def bresenham(x0: int, y0: int, x1: int, y1: int) -> RasterResult:
    """
    Walk from (x0, y0) to (x1, y1), emitting every cell including both ends.

    Loop:
        emit (x, y); stop if (x, y) == (x1, y1)
        e2 = 2*err
        e2 > -dy -> err -= dy, x += sx
        e2 <  dx -> err += dx, y += sy

    Args:
        x0, y0: Start point (integer-valued)
        x1, y1: End point (integer-valued)

    Returns:
        RasterResult with max(|dx|, |dy|) + 1 points, one trace line each.
        The trace records err as it was when the cell was emitted.

    Raises:
        InvalidInput: Non-finite or non-integer coordinate.

    Trace format:
        "step=1: (1, 1), err=0"
    """
    x = require_integer("x0", x0)
    y = require_integer("y0", y0)
    x_end = require_integer("x1", x1)
    y_end = require_integer("y1", y1)

    dx = abs(x_end - x)
    dy = abs(y_end - y)
    sx = 1 if x < x_end else -1
    sy = 1 if y < y_end else -1
    err = dx - dy

    points = []
    trace = []
    step = 0
    while True:
        points.append(GridPoint(x, y))
        trace.append(f"step={step}: ({x}, {y}), err={err}")
        step += 1

        if x == x_end and y == y_end:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy

    return RasterResult(points=tuple(points), trace=tuple(trace), algorithm="bresenham")


__all__ = ["bresenham"]
