"""dB and linear gain ratio conversion utilities."""

import math


def db_to_ratio(db: float) -> float:
    """Convert decibels to a linear gain ratio.

    Args:
        db: Value in decibels

    Returns:
        Linear ratio (e.g., 0 dB = 1.0, -6 dB ≈ 0.5, +6 dB ≈ 2.0)

    Raises:
        OverflowError: If the ratio is too large to be represented
    """
    return 10 ** (db / 20)


def ratio_to_db(ratio: float) -> float:
    """Convert a linear gain ratio to decibels.

    Args:
        ratio: Linear ratio (must be > 0)

    Returns:
        Value in decibels

    Raises:
        ValueError: If ratio is <= 0
    """
    if ratio <= 0:
        raise ValueError("Gain ratio must be greater than 0")
    return 20 * math.log10(ratio)
