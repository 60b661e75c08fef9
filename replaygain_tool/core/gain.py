"""ReplayGain gain values: decibel tag strings and linear ratios."""

import logging
import math
from typing import Optional

from replaygain_tool.config import GAIN_SUFFIX, RATIO_MIN, RATIO_UNDEFINED
from replaygain_tool.core.numbers import ParseResult, normalize_number_string, parse_decimal
from replaygain_tool.utils.conversion import db_to_ratio, ratio_to_db

LOGGER = logging.getLogger(__name__)


def is_valid_ratio(ratio: float) -> bool:
    """Check if a ratio is a usable gain (positive and finite).

    0.0 is the undefined sentinel and therefore never valid.
    """
    return ratio > RATIO_MIN and math.isfinite(ratio)


def _strip_gain_suffix(normalized: str) -> str:
    if normalized.lower().endswith(GAIN_SUFFIX.lower()):
        return normalized[:-len(GAIN_SUFFIX)].strip()
    return normalized


def parse_gain_to_ratio(
    text: str,
    *,
    logger: Optional[logging.Logger] = None,
) -> ParseResult:
    """Parse a gain tag string (e.g. "-6.5 dB") into a linear ratio.

    The unit suffix is optional and matched case-insensitively. An
    explicit "+" sign is accepted, stacked signs are not.

    Args:
        text: Gain string as stored in a tag
        logger: Logger for diagnostics (defaults to the module logger)

    Returns:
        ParseResult with the ratio, or RATIO_UNDEFINED if invalid
    """
    log = logger or LOGGER

    normalized, valid = normalize_number_string(text)
    if not valid:
        log.debug("ReplayGain: Malformed sign in gain: %r", text)
        return ParseResult(RATIO_UNDEFINED, False)

    number = _strip_gain_suffix(normalized)
    if not number:
        return ParseResult(RATIO_UNDEFINED, False)

    gain_db = parse_decimal(number)
    if gain_db is None:
        log.debug("ReplayGain: Failed to parse gain: %r", text)
        return ParseResult(RATIO_UNDEFINED, False)

    try:
        ratio = db_to_ratio(gain_db)
    except OverflowError:
        ratio = math.inf

    if not is_valid_ratio(ratio):
        log.debug("ReplayGain: Invalid gain value: %r -> %r", text, ratio)
        return ParseResult(RATIO_UNDEFINED, False)

    return ParseResult(ratio, True)


def format_ratio_to_gain(ratio: float) -> str:
    """Format a linear ratio as a gain tag string.

    Args:
        ratio: Linear gain ratio

    Returns:
        Gain string like "-6.0206 dB", or "" if the ratio is invalid
    """
    if not is_valid_ratio(ratio):
        return ""
    return f"{ratio_to_db(ratio):g}{GAIN_SUFFIX}"


def normalize_ratio(
    ratio: float,
    *,
    logger: Optional[logging.Logger] = None,
) -> float:
    """Round a ratio to the value that survives a format/parse round trip.

    Args:
        ratio: Linear gain ratio
        logger: Logger for diagnostics (defaults to the module logger)

    Returns:
        Normalized ratio, or RATIO_UNDEFINED if the ratio is invalid
    """
    if not is_valid_ratio(ratio):
        return RATIO_UNDEFINED

    log = logger or LOGGER
    normalized = parse_gain_to_ratio(format_ratio_to_gain(ratio), logger=log).value

    # Formatting and parsing the normalized value must not alter it anymore
    renormalized = parse_gain_to_ratio(format_ratio_to_gain(normalized), logger=log).value
    if renormalized != normalized:
        log.warning(
            "ReplayGain: Unstable gain normalization: %r -> %r -> %r",
            ratio, normalized, renormalized,
        )
    return normalized
