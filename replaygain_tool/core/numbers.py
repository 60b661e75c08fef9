"""Normalization of numeric strings found in ReplayGain tags.

Tag values are written by many different taggers. Some of them prefix
positive numbers with an explicit ``+`` sign, which is accepted and
dropped here. Stacked signs such as ``++3`` or ``+-3`` are rejected.
"""

import re
from typing import Any, NamedTuple, Optional

_DECIMAL_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParseResult(NamedTuple):
    """Parsed value together with a flag telling whether parsing succeeded."""

    value: Any
    valid: bool


def strip_leading_sign(trimmed: str, sign: str) -> str:
    """Remove ``sign`` if it is the first character, trimming the remainder.

    Args:
        trimmed: String without surrounding whitespace
        sign: Single sign character, either ``+`` or ``-``

    Returns:
        The stripped and trimmed string, or ``trimmed`` unchanged
    """
    if trimmed.startswith(sign):
        return trimmed[1:].strip()
    return trimmed


def normalize_number_string(text: str) -> ParseResult:
    """Trim a numeric string and drop a single leading ``+`` sign.

    At most one leading sign is allowed. If a ``+`` was stripped and
    another ``+`` or ``-`` follows, normalization fails and the original
    input is returned untouched.

    Args:
        text: Raw tag value

    Returns:
        ParseResult with the normalized string
    """
    trimmed = text.strip()
    normalized = strip_leading_sign(trimmed, "+")
    if normalized == trimmed:
        # no leading '+'
        return ParseResult(normalized, True)
    if (normalized == strip_leading_sign(normalized, "+")
            and normalized == strip_leading_sign(normalized, "-")):
        return ParseResult(normalized, True)
    return ParseResult(text, False)


def parse_decimal(text: str) -> Optional[float]:
    """Parse a plain decimal numeral, independent of the current locale.

    Only an optional minus sign, digits, a decimal point and an exponent
    are accepted. Special values like ``inf`` or ``nan`` are rejected.

    Args:
        text: Normalized numeric string

    Returns:
        The parsed number, or None if ``text`` is not a decimal numeral
    """
    if _DECIMAL_RE.fullmatch(text) is None:
        return None
    return float(text)
