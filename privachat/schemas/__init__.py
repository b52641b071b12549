# privachat/schemas/__init__.py
"""
Schema package
"""

from .commons_schemas import ErrorResponse, HealthResponse
from .profile_schemas import ProfileUpdateRequest, ProfileResponse
from .stats_schemas import StatsUpdateRequest, StatsResponse
