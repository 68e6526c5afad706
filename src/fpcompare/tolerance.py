"""Nominal tolerance wrappers.

``Fraction`` carries a relative tolerance and ``Precision`` an absolute one.
They are distinct types so that the two tolerance-shaped floats cannot be
swapped at a call site. Plain construction performs no validation; use the
``checked`` constructors when a stricter contract is wanted.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_FRACTION, MIN_FRACTION, MIN_PRECISION
from .errors import ToleranceError
from .sentinels import is_finite


@dataclass(frozen=True)
class Fraction:
    """Relative tolerance, conventionally in [0, 1]."""

    value: float

    @classmethod
    def checked(cls, value: float) -> Fraction:
        """Build a Fraction, raising ToleranceError unless finite and in [0, 1]."""
        if not is_finite(value):
            raise ToleranceError.not_finite(cls.__name__, value)
        if value < MIN_FRACTION or value > MAX_FRACTION:
            raise ToleranceError.out_of_range(cls.__name__, value, MIN_FRACTION, MAX_FRACTION)
        return cls(float(value))


@dataclass(frozen=True)
class Precision:
    """Absolute tolerance, conventionally >= 0."""

    value: float

    @classmethod
    def checked(cls, value: float) -> Precision:
        """Build a Precision, raising ToleranceError unless finite and non-negative."""
        if not is_finite(value):
            raise ToleranceError.not_finite(cls.__name__, value)
        if value < MIN_PRECISION:
            raise ToleranceError.out_of_range(cls.__name__, value, MIN_PRECISION)
        return cls(float(value))


__all__ = ["Fraction", "Precision"]
