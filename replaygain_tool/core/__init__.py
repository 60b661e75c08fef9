"""Core ReplayGain parsing and formatting modules."""

from replaygain_tool.core.numbers import ParseResult, normalize_number_string
from replaygain_tool.core.gain import (
    format_ratio_to_gain,
    is_valid_ratio,
    normalize_ratio,
    parse_gain_to_ratio,
)
from replaygain_tool.core.peak import format_peak, is_valid_peak, normalize_peak, parse_peak
from replaygain_tool.core.replay_gain import ReplayGain

__all__ = [
    "ParseResult",
    "normalize_number_string",
    "is_valid_ratio",
    "parse_gain_to_ratio",
    "format_ratio_to_gain",
    "normalize_ratio",
    "is_valid_peak",
    "parse_peak",
    "format_peak",
    "normalize_peak",
    "ReplayGain",
]
