# privachat/api/dependencies.py
"""
Request-scoped access to the services created in the app lifespan
"""

from fastapi import Request

from privachat.services.profile_service import ProfileService
from privachat.services.stats_service import StatsService


def get_profile_service(request: Request) -> ProfileService:
    return request.app.state.profile_service


def get_stats_service(request: Request) -> StatsService:
    return request.app.state.stats_service
