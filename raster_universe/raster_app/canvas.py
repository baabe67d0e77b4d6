"""
Grid canvas and coordinate mapping.

The drawing surface is a width x height pixel area divided into square cells
of `scale` pixels. Logical grid coordinates have x to the right and y upward,
with cell (0, 0) just above and to the right of the surface center.

Provides:
- to_canvas / to_grid_coord: Pixel <-> logical grid conversion
- GridCanvas: numpy cell buffer that paints RasterResult points and renders
  an ASCII view with axes
"""

import math
from typing import Iterable, Optional

import numpy as np

from raster_core.errors import InvalidInput
from raster_core.types import GridPoint

from .config import BLACK, EMPTY, GLYPHS, CanvasConfig


# =============================================================================
# Coordinate Mapping
# =============================================================================


def to_canvas(x: int, y: int, config: CanvasConfig) -> tuple[int, int]:
    """
    Pixel position of the lower-left corner of logical cell (x, y).

    Pixel y grows downward, so logical y is negated.
    """
    px = config.width // 2 + x * config.scale
    py = config.height // 2 - y * config.scale
    return px, py


def to_grid_coord(px: float, py: float, config: CanvasConfig) -> tuple[int, int]:
    """Logical cell containing pixel (px, py), as picked by a click."""
    x = math.floor((px - config.width / 2) / config.scale)
    y = math.floor((config.height / 2 - py) / config.scale)
    return x, y


# =============================================================================
# Grid Canvas
# =============================================================================


class GridCanvas:
    """
    Cell buffer for painting rasterized points.

    cells[row, col] holds a palette value (0 = empty). Row 0 is the top of
    the surface. Points outside the surface are clipped.
    """

    def __init__(self, config: Optional[CanvasConfig] = None):
        self.config = config or CanvasConfig()
        self.origin_col = (self.config.width // 2) // self.config.scale
        self.origin_row = (self.config.height // 2) // self.config.scale
        self.cells = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Visible logical range as (x_min, x_max, y_min, y_max), inclusive."""
        x_min = -self.origin_col
        x_max = self.config.cols - 1 - self.origin_col
        y_max = self.origin_row - 1
        y_min = self.origin_row - self.config.rows
        return x_min, x_max, y_min, y_max

    def _index(self, x: int, y: int) -> Optional[tuple[int, int]]:
        row = self.origin_row - 1 - y
        col = self.origin_col + x
        if 0 <= row < self.config.rows and 0 <= col < self.config.cols:
            return row, col
        return None

    def clear(self) -> None:
        self.cells.fill(EMPTY)

    def draw_pixel(self, x: int, y: int, color: int = BLACK) -> bool:
        """Paint one cell. Returns False if the cell is off the surface."""
        if isinstance(color, bool) or color not in GLYPHS:
            raise InvalidInput("color", color, f"color must be one of {sorted(GLYPHS)}, got {color!r}")
        idx = self._index(x, y)
        if idx is None:
            return False
        self.cells[idx] = color
        return True

    def render(self, points: Iterable[GridPoint], color: int = BLACK) -> int:
        """Paint every point; returns how many landed on the surface."""
        painted = 0
        for x, y in points:
            if self.draw_pixel(x, y, color):
                painted += 1
        return painted

    def cell(self, x: int, y: int) -> int:
        idx = self._index(x, y)
        if idx is None:
            raise IndexError(f"Cell ({x}, {y}) is outside bounds {self.bounds}")
        return int(self.cells[idx])

    def painted_count(self) -> int:
        """Number of distinct non-empty cells."""
        return int(np.count_nonzero(self.cells))

    def to_text(self, axes: bool = True) -> str:
        """
        ASCII rendering, one line per row, top row first.

        Painted cells use the palette glyphs; empty cells on the x = 0 column
        and y = 0 row show '|' and '-' ('+' at the origin) when axes is True.
        """
        glyph_table = np.array([GLYPHS.get(i, "?") for i in range(max(GLYPHS) + 1)])
        chars = glyph_table[self.cells]

        if axes:
            empty = self.cells == EMPTY
            axis_row = self.origin_row - 1
            axis_col = self.origin_col
            if 0 <= axis_row < self.config.rows:
                chars[axis_row, empty[axis_row]] = "-"
            if 0 <= axis_col < self.config.cols:
                chars[empty[:, axis_col], axis_col] = "|"
            if self._index(0, 0) is not None and empty[axis_row, axis_col]:
                chars[axis_row, axis_col] = "+"

        return "\n".join("".join(row) for row in chars)


__all__ = ["GridCanvas", "to_canvas", "to_grid_coord"]
