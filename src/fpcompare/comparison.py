"""
Tolerance-based float equality.

Relative equality compares the difference against the tolerance scaled by the
mean magnitude of the operands, so it behaves the same at every scale.
Absolute equality compares the difference against a fixed bound. Neither
relation is transitive: a chain of pairwise-close values can drift past the
tolerance.
"""

from __future__ import annotations

from .constants import APPROXIMATE_TOLERANCE
from .tolerance import Fraction, Precision

_APPROXIMATE = Fraction(APPROXIMATE_TOLERANCE)


def _require(tolerance: object, expected: type) -> None:
    if not isinstance(tolerance, expected):
        raise TypeError(
            f"tolerance must be {expected.__name__}, got {type(tolerance).__name__}"
        )


def eq_relative(tolerance: Fraction, x: float, y: float) -> bool:
    """
    Compare *x* and *y* for equality within a relative tolerance.

    Relative error is undefined against zero, so when either operand is exactly
    zero the other operand's magnitude is compared directly against the
    tolerance.

    Otherwise the bound is ``frac * abs(x / 2.0 + y / 2.0)``. This equals
    ``frac * abs(x + y) / 2.0`` for normal-range operands, but stays finite
    when ``x + y`` would overflow. Near the largest double the result can
    therefore differ from the unhalved formula: ``eq_relative(Fraction(0.01),
    1.7e308, 1.0e308)`` is False here, where an overflowed sum would give an
    infinite bound and True.

    Args:
        tolerance: Allowed difference as a fraction of the mean magnitude
        x: First operand
        y: Second operand

    Returns:
        True if the operands are equal within the tolerance

    Raises:
        TypeError: If tolerance is not a Fraction

    Examples:
        >>> eq_relative(Fraction(0.01), 133.7, 133.0)
        True
        >>> eq_relative(Fraction(0.001), 133.7, 133.0)
        False
    """
    _require(tolerance, Fraction)
    frac = tolerance.value
    if x == 0.0:
        return abs(y) <= frac
    if y == 0.0:
        return abs(x) <= frac
    # Halve before summing so the mean magnitude cannot overflow
    return abs(x - y) <= frac * abs(x / 2.0 + y / 2.0)


def eq_approximate(x: float, y: float) -> bool:
    """Relative equality within one part per million."""
    return eq_relative(_APPROXIMATE, x, y)


def neq_approximate(x: float, y: float) -> bool:
    """Negation of eq_approximate."""
    return not eq_approximate(x, y)


def eq_absolute(tolerance: Precision, x: float, y: float) -> bool:
    """
    Compare *x* and *y* for equality within an absolute tolerance.

    The same bound applies at every magnitude.

    Raises:
        TypeError: If tolerance is not a Precision

    Examples:
        >>> eq_absolute(Precision(1.0), 133.7, 133.0)
        True
        >>> eq_absolute(Precision(0.1), 133.7, 133.0)
        False
    """
    _require(tolerance, Precision)
    return abs(x - y) <= tolerance.value


__all__ = ["eq_relative", "eq_approximate", "neq_approximate", "eq_absolute"]
