"""Safe parsing of text into finite floats."""

from __future__ import annotations

import logging
from typing import Optional

from .parsing_helpers import scan_float_prefix
from .sentinels import is_finite

logger = logging.getLogger(__name__)


def from_string(text: str) -> Optional[float]:
    """
    Parse the leading numeric prefix of *text* as a finite float.

    Leading whitespace is skipped and trailing content is ignored. Never raises
    for string input; absence is the only failure signal.

    Args:
        text: String to parse

    Returns:
        The parsed float, or None if no numeric prefix exists or the parsed
        value is NaN or infinite

    Examples:
        >>> from_string("  1.2 ??")
        1.2
        >>> from_string("bad") is None
        True
        >>> from_string("Infinity") is None
        True
    """
    scanned = scan_float_prefix(text)
    if scanned is None:
        logger.debug("No numeric prefix in %r", text)
        return None
    if not is_finite(scanned.value):
        logger.debug("Rejecting non-finite value %r scanned from %r", scanned.value, text)
        return None
    return scanned.value


__all__ = ["from_string"]
