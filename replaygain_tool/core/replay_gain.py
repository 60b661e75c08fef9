"""Data model for a ReplayGain value pair (gain ratio and peak)."""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from replaygain_tool.config import PEAK_UNDEFINED, RATIO_UNDEFINED, TAG_GAIN, TAG_PEAK
from replaygain_tool.core.gain import (
    format_ratio_to_gain,
    is_valid_ratio,
    normalize_ratio,
    parse_gain_to_ratio,
)
from replaygain_tool.core.peak import format_peak, is_valid_peak, normalize_peak, parse_peak


@dataclass(frozen=True)
class ReplayGain:
    """ReplayGain metadata of a track or album."""

    ratio: float = RATIO_UNDEFINED
    """Linear gain ratio (RATIO_UNDEFINED if missing)."""

    peak: float = PEAK_UNDEFINED
    """Peak sample amplitude (PEAK_UNDEFINED if missing)."""

    def __str__(self) -> str:
        gain = format_ratio_to_gain(self.ratio) or "-"
        peak = format_peak(self.peak) or "-"
        return f"{gain} / {peak}"

    @property
    def has_ratio(self) -> bool:
        """Check if a valid gain ratio is present."""
        return is_valid_ratio(self.ratio)

    @property
    def has_peak(self) -> bool:
        """Check if a valid peak is present."""
        return is_valid_peak(self.peak)

    def with_ratio(self, ratio: float) -> "ReplayGain":
        return replace(self, ratio=ratio)

    def without_ratio(self) -> "ReplayGain":
        return replace(self, ratio=RATIO_UNDEFINED)

    def with_peak(self, peak: float) -> "ReplayGain":
        return replace(self, peak=peak)

    def without_peak(self) -> "ReplayGain":
        return replace(self, peak=PEAK_UNDEFINED)

    def normalized(self, logger: Optional[logging.Logger] = None) -> "ReplayGain":
        """Return a copy with both values normalized for tag storage.

        Invalid values are replaced by their undefined sentinels.
        """
        return ReplayGain(
            ratio=normalize_ratio(self.ratio, logger=logger),
            peak=normalize_peak(self.peak, logger=logger),
        )

    @classmethod
    def from_tags(
        cls,
        gain: Optional[str] = None,
        peak: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "ReplayGain":
        """Create a ReplayGain from tag strings.

        Args:
            gain: Gain tag value (e.g. "-6.5 dB"), or None if missing
            peak: Peak tag value (e.g. "0.95"), or None if missing
            logger: Logger for parse diagnostics

        Returns:
            ReplayGain with undefined fields for missing or invalid tags
        """
        ratio = RATIO_UNDEFINED
        if gain is not None:
            ratio = parse_gain_to_ratio(gain, logger=logger).value
        peak_value = PEAK_UNDEFINED
        if peak is not None:
            peak_value = parse_peak(peak, logger=logger).value
        return cls(ratio=ratio, peak=peak_value)

    def to_tags(self) -> dict[str, str]:
        """Format both values as tag strings ("" for undefined values)."""
        return {
            TAG_GAIN: format_ratio_to_gain(self.ratio),
            TAG_PEAK: format_peak(self.peak),
        }
