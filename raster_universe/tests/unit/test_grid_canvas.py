"""
Unit tests for raster_app/canvas.py

Testing:
- Pixel <-> grid coordinate mapping
- Cell buffer indexing, clipping and painting
- ASCII rendering with axes
"""

import numpy as np
import pytest

from raster_app.canvas import GridCanvas, to_canvas, to_grid_coord
from raster_app.config import BLACK, BLUE, COLORS, EMPTY, RED, CanvasConfig
from raster_core.errors import InvalidInput
from raster_laws import bresenham, bresenham_circle


@pytest.fixture
def small_config():
    """5x5 cells; x in [-2, 2], y in [-3, 1]."""
    return CanvasConfig(width=100, height=100, scale=20)


# =============================================================================
# Coordinate Mapping
# =============================================================================


class TestCoordinateMapping:

    def test_origin(self):
        config = CanvasConfig()
        assert to_canvas(0, 0, config) == (400, 300)
        assert to_grid_coord(400, 300, config) == (0, 0)

    def test_to_canvas_y_is_flipped(self):
        assert to_canvas(1, 2, CanvasConfig()) == (420, 260)
        assert to_canvas(-1, -2, CanvasConfig()) == (380, 340)

    def test_click_left_of_and_below_center(self):
        assert to_grid_coord(399, 301, CanvasConfig()) == (-1, -1)

    @pytest.mark.parametrize("x, y", [(0, 0), (3, -4), (-7, 5), (19, 14), (-20, -15)])
    def test_cell_center_round_trip(self, x, y):
        """Clicking the middle of a painted cell picks that cell."""
        config = CanvasConfig()
        px, py = to_canvas(x, y, config)
        center = (px + config.scale / 2, py - config.scale / 2)
        assert to_grid_coord(*center, config) == (x, y)


# =============================================================================
# Cell Buffer
# =============================================================================


class TestGridCanvas:

    def test_default_shape_and_bounds(self):
        canvas = GridCanvas()
        assert canvas.cells.shape == (30, 40)
        assert canvas.cells.dtype == np.int8
        assert canvas.bounds == (-20, 19, -15, 14)

    def test_draw_pixel_index(self):
        canvas = GridCanvas()
        assert canvas.draw_pixel(0, 0) is True
        assert canvas.cells[14, 20] == BLACK
        assert canvas.cell(0, 0) == BLACK

    def test_draw_outside_clipped(self):
        canvas = GridCanvas()
        assert canvas.draw_pixel(20, 0) is False
        assert canvas.draw_pixel(0, -16) is False
        assert canvas.painted_count() == 0

    def test_cell_outside_raises(self):
        with pytest.raises(IndexError):
            GridCanvas().cell(100, 0)

    def test_render_counts_landed_points(self):
        canvas = GridCanvas()
        result = bresenham(15, 0, 25, 0)
        assert canvas.render(result.points) == 5  # x = 15..19

    def test_duplicates_paint_once(self):
        canvas = GridCanvas()
        assert canvas.render(bresenham_circle(0, 0, 0).points) == 8
        assert canvas.painted_count() == 1

    def test_colors_and_clear(self):
        canvas = GridCanvas()
        canvas.draw_pixel(1, 1, RED)
        canvas.draw_pixel(2, 2, BLUE)
        assert canvas.cell(1, 1) == RED
        assert canvas.cell(2, 2) == BLUE

        canvas.clear()
        assert canvas.painted_count() == 0
        assert canvas.cell(1, 1) == EMPTY

    @pytest.mark.parametrize("bad", [7, -1, True])
    def test_unknown_color_rejected(self, bad):
        canvas = GridCanvas()
        with pytest.raises(InvalidInput) as exc_info:
            canvas.draw_pixel(0, 0, bad)
        assert exc_info.value.field == "color"
        assert canvas.painted_count() == 0

    def test_render_rejects_unknown_color(self):
        with pytest.raises(InvalidInput):
            GridCanvas().render(bresenham(0, 0, 3, 0).points, 9)

    def test_cli_color_names_map_to_palette(self):
        canvas = GridCanvas()
        for x, value in enumerate(COLORS.values()):
            canvas.draw_pixel(x, 0, value)
        assert [canvas.cell(x, 0) for x in range(3)] == [BLACK, RED, BLUE]


# =============================================================================
# ASCII Rendering
# =============================================================================


class TestToText:

    def test_empty_with_axes(self, small_config):
        canvas = GridCanvas(small_config)
        assert canvas.bounds == (-2, 2, -3, 1)
        assert canvas.to_text().splitlines() == [
            "..|..",
            "--+--",
            "..|..",
            "..|..",
            "..|..",
        ]

    def test_without_axes(self, small_config):
        assert GridCanvas(small_config).to_text(axes=False) == "\n".join(["....."] * 5)

    def test_painted_cells_override_axes(self, small_config):
        canvas = GridCanvas(small_config)
        canvas.render(bresenham(-2, 0, 2, 0).points)
        canvas.draw_pixel(1, 1, RED)
        canvas.draw_pixel(0, -3, BLUE)

        assert canvas.to_text().splitlines() == [
            "..|R.",
            "#####",
            "..|..",
            "..|..",
            "..B..",
        ]
