"""
Bresenham (midpoint) circle rasterization with 8-way octant symmetry.

Only the octant from (0, r) toward the diagonal is generated; x <= y holds for
every generated (x, y) and the loop ends once x > y. Each generated offset is
mirrored into all eight octants.
"""

from raster_core.numeric import require_integer, require_radius
from raster_core.types import GridPoint, RasterResult


def _octant_points(xc: int, yc: int, x: int, y: int) -> tuple[GridPoint, ...]:
    """
    The eight reflections of offset (x, y) around (xc, yc).

    Order is fixed and duplicates (on the axes and diagonals) are kept.
    """
    return (
        GridPoint(xc + x, yc + y), GridPoint(xc - x, yc + y),
        GridPoint(xc + x, yc - y), GridPoint(xc - x, yc - y),
        GridPoint(xc + y, yc + x), GridPoint(xc - y, yc + x),
        GridPoint(xc + y, yc - x), GridPoint(xc - y, yc - x),
    )


def bresenham_circle(xc: int, yc: int, r: int) -> RasterResult:
    """
    Rasterize a circle of radius r centred at (xc, yc).

    Decision term:
        d starts at 3 - 2r
        d <  0 -> d += 4x + 6
        d >= 0 -> d += 4(x - y) + 10, y -= 1
        then x += 1

    Args:
        xc, yc: Center (integer-valued)
        r: Radius (non-negative integer)

    Returns:
        RasterResult with 8 points per outer iteration and one trace line
        per outer iteration. r == 0 emits the center 8 times, one trace line.

    Raises:
        InvalidInput: Non-integer center, negative or non-integer radius.

    Trace format:
        "step=0: x=0, y=5, d=-7"
    """
    xc = require_integer("xc", xc)
    yc = require_integer("yc", yc)
    r = require_radius(r)

    x, y = 0, r
    d = 3 - 2 * r

    points = []
    trace = []
    step = 0
    while x <= y:
        points.extend(_octant_points(xc, yc, x, y))
        trace.append(f"step={step}: x={x}, y={y}, d={d}")
        step += 1

        if d < 0:
            d += 4 * x + 6
        else:
            d += 4 * (x - y) + 10
            y -= 1
        x += 1

    return RasterResult(points=tuple(points), trace=tuple(trace), algorithm="circle")


__all__ = ["bresenham_circle"]
