"""Configuration constants for replaygain-tool."""

# Gain unit as written in ReplayGain tags, separated from the value by one space
GAIN_UNIT = "dB"
GAIN_SUFFIX = " " + GAIN_UNIT

# Linear gain ratios. 0.0 is reserved as the "no value" sentinel.
RATIO_UNDEFINED = 0.0
RATIO_MIN = 0.0
RATIO_0DB = 1.0

# Peak sample amplitudes, normalized so that full scale is 1.0
PEAK_CLIP = 1.0
PEAK_MIN = 0.0
PEAK_UNDEFINED = -PEAK_CLIP

# Tag names used when exporting a ReplayGain value pair
TAG_GAIN = "gain"
TAG_PEAK = "peak"
