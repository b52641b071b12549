"""
Models package
SQLAlchemy models for the profile and stats tables
"""

from .base import Base, now_utc
from .profile import Profile
from .stats import Stats, StatType, COUNTER_COLUMNS, ZERO_STATS

__all__ = [
    "Base",
    "now_utc",
    "Profile",
    "Stats",
    "StatType",
    "COUNTER_COLUMNS",
    "ZERO_STATS",
]
