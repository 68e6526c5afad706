"""
Floats that compare approximately.

``approx(x) == y`` reads as ``x ~= y``: it is eq_relative with the wrapped
tolerance (one part per million unless given). Ordering keeps float ordering
except that approximately-equal values are never strictly less or greater.

When both operands are ApproximateFloat the tighter of the two tolerances
applies, so the result does not depend on operand order. numpy scalars defer
to the wrapper on either side. Arrays defer too, but the wrapper only compares
real numbers; compare arrays with ``fpcompare.arrays``.
"""

from __future__ import annotations

from numbers import Real
from typing import Optional

from .comparison import eq_relative
from .constants import APPROXIMATE_TOLERANCE
from .tolerance import Fraction

__all__ = ["ApproximateFloat", "approx"]


class ApproximateFloat(float):
    """Float wrapper whose equality operators use relative tolerance."""

    __slots__ = ("tolerance",)

    # Makes numpy scalars return NotImplemented so the reflected method runs
    __array_ufunc__ = None

    def __new__(cls, value: float, tolerance: Optional[Fraction] = None):
        res = super().__new__(cls, value)
        res.tolerance = tolerance if tolerance is not None else Fraction(APPROXIMATE_TOLERANCE)
        return res

    def __hash__(self):
        # Approximate equality is not transitive, so no hash can agree with it
        raise TypeError(f"unhashable type: {type(self).__name__!r}")

    def _tolerance_against(self, other: Real) -> Fraction:
        if isinstance(other, ApproximateFloat):
            return min(self.tolerance, other.tolerance, key=lambda tolerance: tolerance.value)
        return self.tolerance

    def __eq__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return eq_relative(self._tolerance_against(other), float(self), float(other))

    def __ne__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return not eq_relative(self._tolerance_against(other), float(self), float(other))

    def __lt__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return float(self) < float(other) and self != other

    def __gt__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return float(self) > float(other) and self != other

    def __le__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return float(self) <= float(other) or self == other

    def __ge__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return float(self) >= float(other) or self == other

    def __repr__(self):
        return f"{type(self).__name__}({super().__repr__()}, tolerance={self.tolerance.value!r})"


def approx(value: float, tolerance: Optional[Fraction] = None) -> ApproximateFloat:
    """Wrap *value* so that ``==`` and ``!=`` compare approximately."""
    return ApproximateFloat(value, tolerance)
