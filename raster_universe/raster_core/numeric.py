"""
Numeric helpers shared by all rasterization algorithms.

Provides:
- round_half_up: The single rounding rule used for emitted pixels
- require_finite / require_integer / require_radius: Input validation
- fmt_fixed: Fixed-decimal formatting for trace lines

Rounding rule (fixed, platform independent):
    Ties round toward +infinity, i.e. floor(v + 0.5).
    2.5 -> 3, 3.5 -> 4, -2.5 -> -2, -3.5 -> -3.
Python's built-in round() uses banker's rounding and is NOT used for pixels.
"""

import math
from numbers import Real

from .errors import InvalidInput


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties toward +infinity.

    Computed as floor plus a comparison of the exact fractional part, so
    values just below a tie (e.g. 0.49999999999999994) are not pushed over
    by the float addition in floor(v + 0.5).

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
        >>> round_half_up(-2.6)
        -3
    """
    base = math.floor(value)
    if value - base >= 0.5:
        return base + 1
    return base


def require_finite(field: str, value) -> float:
    """Return value as float, raising InvalidInput for NaN/inf/non-numbers."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(field, value, f"{field} must be a real number, got {value!r}")
    as_float = float(value)
    if not math.isfinite(as_float):
        raise InvalidInput(field, value, f"{field} must be finite, got {value!r}")
    return as_float


def require_integer(field: str, value) -> int:
    """Return value as int; integer-valued floats (e.g. 3.0) are accepted."""
    as_float = require_finite(field, value)
    if isinstance(value, int):
        return value
    if not as_float.is_integer():
        raise InvalidInput(field, value, f"{field} must be integer-valued, got {value!r}")
    return int(as_float)


def require_radius(value) -> int:
    """Radius must be a non-negative integer."""
    r = require_integer("r", value)
    if r < 0:
        raise InvalidInput("r", value, f"radius must be non-negative, got {value!r}")
    return r


def fmt_fixed(value: float, digits: int = 2) -> str:
    """
    Format with a fixed number of decimals.

    Exact zero (including -0.0) prints as "0.00"; small negatives that round
    to zero keep their sign ("-0.00").
    """
    if value == 0:
        value = 0.0
    return f"{value:.{digits}f}"
