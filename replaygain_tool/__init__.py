"""Parsing and normalization of ReplayGain gain and peak tag values."""

from replaygain_tool.config import (
    PEAK_CLIP,
    PEAK_MIN,
    PEAK_UNDEFINED,
    RATIO_0DB,
    RATIO_MIN,
    RATIO_UNDEFINED,
)
from replaygain_tool.core import (
    ParseResult,
    ReplayGain,
    format_peak,
    format_ratio_to_gain,
    is_valid_peak,
    is_valid_ratio,
    normalize_peak,
    normalize_ratio,
    parse_gain_to_ratio,
    parse_peak,
)

__version__ = "0.1.0"

__all__ = [
    "PEAK_CLIP",
    "PEAK_MIN",
    "PEAK_UNDEFINED",
    "RATIO_0DB",
    "RATIO_MIN",
    "RATIO_UNDEFINED",
    "ParseResult",
    "ReplayGain",
    "format_peak",
    "format_ratio_to_gain",
    "is_valid_peak",
    "is_valid_ratio",
    "normalize_peak",
    "normalize_ratio",
    "parse_gain_to_ratio",
    "parse_peak",
]
