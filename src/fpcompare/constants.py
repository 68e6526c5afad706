"""Tolerance defaults and parsing constants.

These constants define the library's default notion of "practically equal"
and the literal forms recognised when scanning numbers out of text.
"""

# One part per million: the default relative tolerance for round-off noise
APPROXIMATE_TOLERANCE = 1e-6

# Conventional bounds for relative tolerances
MIN_FRACTION = 0.0
MAX_FRACTION = 1.0

# Conventional lower bound for absolute tolerances
MIN_PRECISION = 0.0

# Textual literals accepted by the prefix scanner (matched case-insensitively)
INFINITY_LITERALS = ("infinity", "inf")
NAN_LITERALS = ("nan",)

__all__ = [
    "APPROXIMATE_TOLERANCE",
    "MIN_FRACTION",
    "MAX_FRACTION",
    "MIN_PRECISION",
    "INFINITY_LITERALS",
    "NAN_LITERALS",
]
