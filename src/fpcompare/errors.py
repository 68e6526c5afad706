"""Exception classes for fpcompare.

The comparison, parsing and sentinel helpers never raise for numeric input.
These exceptions cover the opt-in strict path of checked tolerance construction.

Exception classes support two patterns:
1. No-argument raise: raise ToleranceError()
2. Contextual attributes: err = ToleranceError(kind="Fraction", value=2.0); raise err
"""

from __future__ import annotations

from typing import Any


class FloatCompareError(Exception):
    """Base exception for all fpcompare errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Floating-point comparison error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ToleranceError(FloatCompareError, ValueError):
    """Tolerance value is outside its conventional range."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Tolerance value is outside its conventional range"
        super().__init__(message, **kwargs)

    @classmethod
    def not_finite(cls, kind: str, value: float) -> "ToleranceError":
        """Create error for a NaN or infinite tolerance."""
        return cls(f"{kind} tolerance must be finite (got {value!r})", kind=kind, value=value)

    @classmethod
    def out_of_range(
        cls, kind: str, value: float, lower: float, upper: float | None = None
    ) -> "ToleranceError":
        """Create error for a tolerance outside [lower, upper]."""
        if upper is None:
            bounds = f">= {lower}"
        else:
            bounds = f"in [{lower}, {upper}]"
        return cls(f"{kind} tolerance {value!r} must be {bounds}", kind=kind, value=value)


__all__ = ["FloatCompareError", "ToleranceError"]
