"""Utility modules."""

from replaygain_tool.utils.conversion import db_to_ratio, ratio_to_db

__all__ = [
    "db_to_ratio",
    "ratio_to_db",
]
