"""Sentinel float values and the predicates that recognise them."""

import math

NAN = math.nan
INFINITY = math.inf


def is_nan(x: float) -> bool:
    """Return True iff *x* is NaN.

    NaN is unequal to itself under ``==``, so this is the only reliable test.
    """
    return math.isnan(x)


def is_infinite(x: float) -> bool:
    """Return True iff *x* is positive or negative infinity."""
    return math.isinf(x)


def is_finite(x: float) -> bool:
    """Return True iff *x* is neither NaN nor an infinity."""
    return math.isfinite(x)


__all__ = ["NAN", "INFINITY", "is_nan", "is_infinite", "is_finite"]
