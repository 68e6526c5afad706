"""Element-wise comparisons and predicates for numpy arrays.

Each function applies the scalar rule from ``comparison`` or ``sentinels`` to
every broadcast pair of elements and returns a boolean array.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .comparison import _APPROXIMATE, _require
from .tolerance import Fraction, Precision


def _as_float_array(values: ArrayLike) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)


def eq_relative_array(tolerance: Fraction, xs: ArrayLike, ys: ArrayLike) -> np.ndarray:
    """
    Element-wise eq_relative.

    Args:
        tolerance: Allowed difference as a fraction of the mean magnitude
        xs: First operands
        ys: Second operands, broadcast against xs

    Returns:
        Boolean array of the broadcast shape

    Raises:
        TypeError: If tolerance is not a Fraction
        ValueError: If xs and ys cannot be broadcast together
    """
    _require(tolerance, Fraction)
    frac = tolerance.value
    x = _as_float_array(xs)
    y = _as_float_array(ys)
    with np.errstate(invalid="ignore", over="ignore"):
        general = np.abs(x - y) <= frac * np.abs(x / 2.0 + y / 2.0)
        return np.where(
            x == 0.0,
            np.abs(y) <= frac,
            np.where(y == 0.0, np.abs(x) <= frac, general),
        )


def eq_approximate_array(xs: ArrayLike, ys: ArrayLike) -> np.ndarray:
    """Element-wise eq_approximate."""
    return eq_relative_array(_APPROXIMATE, xs, ys)


def neq_approximate_array(xs: ArrayLike, ys: ArrayLike) -> np.ndarray:
    """Element-wise neq_approximate."""
    return ~eq_approximate_array(xs, ys)


def eq_absolute_array(tolerance: Precision, xs: ArrayLike, ys: ArrayLike) -> np.ndarray:
    """Element-wise eq_absolute.

    Raises:
        TypeError: If tolerance is not a Precision
        ValueError: If xs and ys cannot be broadcast together
    """
    _require(tolerance, Precision)
    x = _as_float_array(xs)
    y = _as_float_array(ys)
    with np.errstate(invalid="ignore", over="ignore"):
        return np.abs(x - y) <= tolerance.value


def is_nan_array(values: ArrayLike) -> np.ndarray:
    """Element-wise is_nan."""
    return np.isnan(_as_float_array(values))


def is_infinite_array(values: ArrayLike) -> np.ndarray:
    """Element-wise is_infinite."""
    return np.isinf(_as_float_array(values))


def is_finite_array(values: ArrayLike) -> np.ndarray:
    """Element-wise is_finite."""
    return np.isfinite(_as_float_array(values))


__all__ = [
    "eq_relative_array",
    "eq_approximate_array",
    "neq_approximate_array",
    "eq_absolute_array",
    "is_nan_array",
    "is_infinite_array",
    "is_finite_array",
]
