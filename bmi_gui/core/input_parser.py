"""
================================================================================
Input Parser - Free Text to Numbers
================================================================================

Turns the raw text of a height or weight field into an optional float.

An empty field is not an error, it's simply "nothing entered yet", so every
unusable input collapses to None and the caller decides what that means.
"""

import math
from typing import Optional


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Parse a user-entered number.

    A decimal comma is accepted in place of a period. Whitespace around the
    number is ignored.

    Args:
        text: Raw field text (None is treated like an empty field)

    Returns:
        The parsed value, or None for empty, non-numeric or non-finite text

    Example:
        >>> parse_number("68,5")
        68.5
        >>> parse_number("abc") is None
        True
    """
    if text is None:
        return None

    normalized = text.replace(",", ".", 1).strip()
    if not normalized:
        return None

    # float() also takes digit separators ("1_72") and non-ASCII digits
    if "_" in normalized or not normalized.isascii():
        return None

    try:
        value = float(normalized)
    except ValueError:
        return None

    # float() happily returns nan/inf for "nan", "inf" and "1e400"
    if not math.isfinite(value):
        return None

    return value
