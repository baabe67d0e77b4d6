"""
Two-click point selection for the interactive UI.

This is the only stateful piece of the application and lives outside the
core: picked points are handed to the algorithms as plain parameters.

Click cycle:
    1st click -> p1 (line start, or circle center)
    2nd click -> p2 (line end, or point on the circle; radius derived)
    3rd click -> state reset, treated as a new 1st click
"""

from dataclasses import dataclass
from typing import Optional

from raster_core.errors import IncompleteSelectionError
from raster_core.types import CircleSpec, GridPoint, LineSpec

from .driver import CIRCLE_ALGORITHMS, radius_from_points


@dataclass(frozen=True)
class PickEvent:
    """Outcome of one click, with the message shown in the info bar."""
    index: int  # 1 or 2
    point: GridPoint
    message: str
    radius: Optional[int] = None  # Circle second click only


class PointPicker:
    """Collects a start/end (or center/edge) pair from successive clicks."""

    def __init__(self):
        self._p1: Optional[GridPoint] = None
        self._p2: Optional[GridPoint] = None

    @property
    def p1(self) -> Optional[GridPoint]:
        return self._p1

    @property
    def p2(self) -> Optional[GridPoint]:
        return self._p2

    @property
    def has_pair(self) -> bool:
        return self._p1 is not None and self._p2 is not None

    def reset(self) -> None:
        self._p1 = None
        self._p2 = None

    def click(self, x: int, y: int, algorithm: str = "bresenham") -> PickEvent:
        """Register a click on grid cell (x, y)."""
        if self.has_pair:
            self.reset()

        point = GridPoint(x, y)
        is_circle = algorithm in CIRCLE_ALGORITHMS

        if self._p1 is None:
            self._p1 = point
            if is_circle:
                message = f"Selected circle center ({x}, {y})"
            else:
                message = f"Selected first point ({x}, {y})"
            return PickEvent(index=1, point=point, message=message)

        self._p2 = point
        if is_circle:
            r = radius_from_points(tuple(self._p1), (x, y))
            return PickEvent(
                index=2,
                point=point,
                message=f"Selected point on circle ({x}, {y}), radius = {r}",
                radius=r,
            )
        return PickEvent(index=2, point=point, message=f"Selected second point ({x}, {y})")

    def as_line_spec(self) -> LineSpec:
        if not self.has_pair:
            raise IncompleteSelectionError("Two points must be picked before building a line")
        return LineSpec(self._p1.x, self._p1.y, self._p2.x, self._p2.y)

    def as_circle_spec(self) -> CircleSpec:
        if not self.has_pair:
            raise IncompleteSelectionError("Center and edge must be picked before building a circle")
        r = radius_from_points(tuple(self._p1), tuple(self._p2))
        return CircleSpec(self._p1.x, self._p1.y, r)


__all__ = ["PickEvent", "PointPicker"]
