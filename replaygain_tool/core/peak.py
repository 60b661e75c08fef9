"""ReplayGain peak values: tag strings and normalized sample amplitudes."""

import logging
from typing import Optional

from replaygain_tool.config import PEAK_CLIP, PEAK_MIN, PEAK_UNDEFINED
from replaygain_tool.core.numbers import ParseResult, normalize_number_string, parse_decimal

LOGGER = logging.getLogger(__name__)


def is_valid_peak(peak: float) -> bool:
    """Check if a peak lies within [PEAK_MIN, PEAK_CLIP]."""
    return PEAK_MIN <= peak <= PEAK_CLIP


def parse_peak(
    text: str,
    *,
    logger: Optional[logging.Logger] = None,
) -> ParseResult:
    """Parse a peak tag string (e.g. "0.988525") into a sample amplitude.

    Args:
        text: Peak string as stored in a tag
        logger: Logger for diagnostics (defaults to the module logger)

    Returns:
        ParseResult with the peak, or PEAK_UNDEFINED if invalid
    """
    log = logger or LOGGER

    normalized, valid = normalize_number_string(text)
    if not valid:
        log.debug("ReplayGain: Malformed sign in peak: %r", text)
        return ParseResult(PEAK_UNDEFINED, False)
    if not normalized:
        return ParseResult(PEAK_UNDEFINED, False)

    peak = parse_decimal(normalized)
    if peak is None:
        log.debug("ReplayGain: Failed to parse peak: %r", text)
        return ParseResult(PEAK_UNDEFINED, False)

    if not is_valid_peak(peak):
        log.debug("ReplayGain: Invalid peak value: %r -> %r", text, peak)
        return ParseResult(PEAK_UNDEFINED, False)

    return ParseResult(peak, True)


def format_peak(peak: float) -> str:
    """Format a peak as a tag string, or "" if the peak is invalid."""
    if not is_valid_peak(peak):
        return ""
    return f"{peak:g}"


def normalize_peak(
    peak: float,
    *,
    logger: Optional[logging.Logger] = None,
) -> float:
    """Round a peak to the value that survives a format/parse round trip.

    Returns PEAK_UNDEFINED for an invalid peak.
    """
    if not is_valid_peak(peak):
        return PEAK_UNDEFINED

    log = logger or LOGGER
    normalized = parse_peak(format_peak(peak), logger=log).value

    # Formatting and parsing the normalized value must not alter it anymore
    renormalized = parse_peak(format_peak(normalized), logger=log).value
    if renormalized != normalized:
        log.warning(
            "ReplayGain: Unstable peak normalization: %r -> %r -> %r",
            peak, normalized, renormalized,
        )
    return normalized
