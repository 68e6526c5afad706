"""
Floating-point comparison and parsing utilities.

Float equality is unreliable after arithmetic (``0.1 + 0.2 != 0.3``). This
package offers explicit, named alternatives: relative and absolute tolerance
equality, safe parsing of text into finite floats, and predicates for NaN and
infinity.
"""

from .approximate import ApproximateFloat, approx
from .comparison import eq_absolute, eq_approximate, eq_relative, neq_approximate
from .constants import APPROXIMATE_TOLERANCE
from .errors import FloatCompareError, ToleranceError
from .parsing import from_string
from .sentinels import INFINITY, NAN, is_finite, is_infinite, is_nan
from .tolerance import Fraction, Precision

__all__ = [
    "APPROXIMATE_TOLERANCE",
    "ApproximateFloat",
    "FloatCompareError",
    "Fraction",
    "INFINITY",
    "NAN",
    "Precision",
    "ToleranceError",
    "approx",
    "eq_absolute",
    "eq_approximate",
    "eq_relative",
    "from_string",
    "is_finite",
    "is_infinite",
    "is_nan",
    "neq_approximate",
]
