"""Leading float-literal scanner.

Recognises the longest floating-point literal at the front of a string, in
the permissive style of C's ``strtod``: leading whitespace, an optional sign,
decimal digits with an optional fractional part and exponent, or one of the
textual infinity/NaN literals. Anything after the literal is left unconsumed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..constants import INFINITY_LITERALS, NAN_LITERALS

_SPECIAL_LITERALS = "|".join(INFINITY_LITERALS + NAN_LITERALS)

# ASCII digits only; float() would otherwise accept other Unicode decimal digits
_FLOAT_PREFIX = re.compile(
    r"""
    \s*
    (?P<literal>
        [+-]?
        (?:
            (?:[0-9]+\.?[0-9]*|\.[0-9]+)
            (?:[eE][+-]?[0-9]+)?
          | (?i:""" + _SPECIAL_LITERALS + r""")
        )
    )
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class ScanResult:
    """Value of a scanned literal and the number of characters consumed."""

    value: float
    consumed: int


def scan_float_prefix(text: str) -> Optional[ScanResult]:
    """
    Scan a floating-point literal from the front of *text*.

    Args:
        text: String to scan

    Returns:
        ScanResult with the parsed value and the count of characters consumed
        (leading whitespace included), or None if no literal is present.
        Overflowing decimal literals scan as +-infinity.

    Examples:
        >>> scan_float_prefix("  1.5kg")
        ScanResult(value=1.5, consumed=5)
        >>> scan_float_prefix("kg") is None
        True
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return ScanResult(value=float(match.group("literal")), consumed=match.end())
