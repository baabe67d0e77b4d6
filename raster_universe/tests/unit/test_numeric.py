"""
Unit tests for raster_core/numeric.py and raster_core/errors.py

Covers:
- Half-up rounding (ties toward +infinity), including negative ties
- Validation of finite / integer / radius inputs
- Fixed-decimal formatting used by trace lines
"""

import math

import pytest

from raster_core.errors import InvalidInput, RasterError
from raster_core.numeric import (
    fmt_fixed,
    require_finite,
    require_integer,
    require_radius,
    round_half_up,
)


# =============================================================================
# Rounding
# =============================================================================


class TestRoundHalfUp:
    """Tie-break must be toward +infinity on both sides of zero."""

    @pytest.mark.parametrize("value, expected", [
        (0.0, 0),
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (-0.5, 0),
        (-1.5, -1),
        (-2.5, -2),
        (2.4, 2),
        (2.6, 3),
        (-2.4, -2),
        (-2.6, -3),
        (7, 7),
        (-7, -7),
    ])
    def test_values(self, value, expected):
        assert round_half_up(value) == expected, \
            f"round_half_up({value}) should be {expected}, got {round_half_up(value)}"

    def test_just_below_tie_does_not_round_up(self):
        """floor(v + 0.5) would give 1 here because of float addition."""
        below = 0.49999999999999994
        assert below < 0.5
        assert round_half_up(below) == 0

    def test_differs_from_builtin_round(self):
        """Builtin round() is banker's rounding; pixels must not use it."""
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3

    def test_returns_int(self):
        assert isinstance(round_half_up(1.7), int)


# =============================================================================
# Validation
# =============================================================================


class TestValidation:
    """Input validation raises InvalidInput before any iteration."""

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(InvalidInput) as exc_info:
            require_finite("x0", bad)
        assert exc_info.value.field == "x0"

    @pytest.mark.parametrize("bad", ["1", None, True, [1]])
    def test_non_numbers_rejected(self, bad):
        with pytest.raises(InvalidInput):
            require_finite("y1", bad)

    def test_finite_returns_float(self):
        assert require_finite("x0", 3) == 3.0
        assert isinstance(require_finite("x0", 3), float)

    def test_integer_valued_float_accepted(self):
        value = require_integer("x0", 4.0)
        assert value == 4
        assert isinstance(value, int)

    def test_fractional_rejected(self):
        with pytest.raises(InvalidInput, match="integer-valued"):
            require_integer("x1", 4.5)

    def test_radius_zero_ok(self):
        assert require_radius(0) == 0

    def test_negative_radius_rejected(self):
        with pytest.raises(InvalidInput, match="non-negative") as exc_info:
            require_radius(-1)
        assert exc_info.value.field == "r"
        assert exc_info.value.value == -1

    def test_invalid_input_is_value_error(self):
        """Callers catching ValueError also see InvalidInput."""
        with pytest.raises(ValueError):
            require_radius(-3)
        assert issubclass(InvalidInput, RasterError)


# =============================================================================
# Formatting
# =============================================================================


class TestFmtFixed:

    @pytest.mark.parametrize("value, expected", [
        (0, "0.00"),
        (0.0, "0.00"),
        (-0.0, "0.00"),
        (1.8, "1.80"),
        (1.7999999999999998, "1.80"),
        (-0.5, "-0.50"),
        (-0.001, "-0.00"),
        (12, "12.00"),
    ])
    def test_two_decimals(self, value, expected):
        assert fmt_fixed(value) == expected

    def test_custom_digits(self):
        assert fmt_fixed(1.23456, 3) == "1.235"
