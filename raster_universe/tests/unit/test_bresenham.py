"""
Unit tests for raster_laws/bresenham.py

Testing the integer Bresenham line:
- Canonical sequence for (0,0)->(5,3) including the err trace
- All octants, axis-aligned and degenerate segments
- sign(0) = -1 direction rule (axis never stepped when its delta is 0)
- 8-connectivity and endpoint invariants
"""

import pytest

from raster_core.errors import InvalidInput
from raster_core.types import GridPoint
from raster_laws.bresenham import bresenham


# =============================================================================
# Helper Functions
# =============================================================================


def is_8conn_step(p1, p2) -> bool:
    """Consecutive cells touch orthogonally or diagonally."""
    dx, dy = abs(p1[0] - p2[0]), abs(p1[1] - p2[1])
    return dx <= 1 and dy <= 1 and (dx + dy) > 0


# =============================================================================
# Canonical sequences
# =============================================================================


class TestBresenhamCanonical:

    def test_canonical_5_3(self):
        """BR-01: (0,0)->(5,3) reproduces the textbook sequence."""
        result = bresenham(0, 0, 5, 3)

        assert result.coords() == [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2), (5, 3)]
        assert result.algorithm == "bresenham"

    def test_canonical_trace(self):
        """err is recorded as it was when each cell was emitted."""
        result = bresenham(0, 0, 5, 3)

        assert list(result.trace) == [
            "step=0: (0, 0), err=2",
            "step=1: (1, 1), err=4",
            "step=2: (2, 1), err=1",
            "step=3: (3, 2), err=3",
            "step=4: (4, 2), err=0",
            "step=5: (5, 3), err=2",
        ]

    def test_steep(self):
        result = bresenham(0, 0, 3, 5)
        assert result.coords() == [(0, 0), (1, 1), (1, 2), (2, 3), (2, 4), (3, 5)]

    def test_reversed_canonical(self):
        result = bresenham(5, 3, 0, 0)
        assert result.coords() == [(5, 3), (4, 2), (3, 2), (2, 1), (1, 1), (0, 0)]

    def test_first_step_is_diagonal(self):
        """Both error conditions fire in the same iteration."""
        result = bresenham(0, 0, 5, 3)
        assert result.points[1] == GridPoint(1, 1)


# =============================================================================
# Axis-aligned and degenerate
# =============================================================================


class TestBresenhamAxisAligned:

    def test_horizontal(self):
        result = bresenham(0, 0, 5, 0)
        assert result.coords() == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0)]
        assert result.trace[0] == "step=0: (0, 0), err=5"

    def test_vertical_down_uses_negative_direction(self):
        """x0 == x1 -> sx = -1, but dx = 0 so x never moves."""
        result = bresenham(0, 0, 0, -3)

        assert result.coords() == [(0, 0), (0, -1), (0, -2), (0, -3)]
        assert result.trace == (
            "step=0: (0, 0), err=-3",
            "step=1: (0, -1), err=-3",
            "step=2: (0, -2), err=-3",
            "step=3: (0, -3), err=-3",
        )

    def test_vertical_up(self):
        result = bresenham(2, -1, 2, 2)
        assert result.coords() == [(2, -1), (2, 0), (2, 1), (2, 2)]

    def test_coincident_single_point(self):
        result = bresenham(7, -7, 7, -7)

        assert result.points == (GridPoint(7, -7),)
        assert result.trace == ("step=0: (7, -7), err=0",)


# =============================================================================
# Invariants over all octants
# =============================================================================


OCTANT_CASES = [
    (0, 0, 7, 2),
    (0, 0, 2, 7),
    (0, 0, -2, 7),
    (0, 0, -7, 2),
    (0, 0, -7, -2),
    (0, 0, -2, -7),
    (0, 0, 2, -7),
    (0, 0, 7, -2),
    (-5, 3, 9, -4),
    (10, 10, -10, -10),
]


class TestBresenhamInvariants:

    @pytest.mark.parametrize("x0, y0, x1, y1", OCTANT_CASES)
    def test_endpoints(self, x0, y0, x1, y1):
        coords = bresenham(x0, y0, x1, y1).coords()
        assert coords[0] == (x0, y0), f"Line should start at ({x0}, {y0}), got {coords[0]}"
        assert coords[-1] == (x1, y1), f"Line should end at ({x1}, {y1}), got {coords[-1]}"

    @pytest.mark.parametrize("x0, y0, x1, y1", OCTANT_CASES)
    def test_count_and_trace_length(self, x0, y0, x1, y1):
        result = bresenham(x0, y0, x1, y1)
        expected = max(abs(x1 - x0), abs(y1 - y0)) + 1
        assert len(result) == expected
        assert len(result.trace) == len(result)

    @pytest.mark.parametrize("x0, y0, x1, y1", OCTANT_CASES)
    def test_8_connected(self, x0, y0, x1, y1):
        coords = bresenham(x0, y0, x1, y1).coords()
        for p1, p2 in zip(coords, coords[1:]):
            assert is_8conn_step(p1, p2), f"Invalid step {p1} -> {p2}"

    def test_deterministic(self):
        assert bresenham(-5, 3, 9, -4) == bresenham(-5, 3, 9, -4)


class TestBresenhamInvalid:

    def test_fractional_rejected(self):
        """Non-integer endpoints would never satisfy the stop condition."""
        with pytest.raises(InvalidInput):
            bresenham(0, 0, 3.5, 1)

    def test_infinite_rejected(self):
        with pytest.raises(InvalidInput):
            bresenham(0, 0, float("inf"), 1)
