# privachat/api/stats.py
"""
Stats API (xp / messages / calls)
"""

from fastapi import APIRouter, Depends

from privachat.api.dependencies import get_stats_service
from privachat.schemas.stats_schemas import StatsUpdateRequest, StatsResponse
from privachat.services.stats_service import StatsService
from privachat.utils.logger import logger

router = APIRouter(tags=["stats"])


@router.get("/stats/{user_id}", response_model=StatsResponse)
async def get_stats(user_id: str, service: StatsService = Depends(get_stats_service)):
    return await service.get_stats(user_id)


@router.post("/stats/{user_id}", response_model=StatsResponse)
async def update_stats(
    user_id: str,
    request: StatsUpdateRequest,
    service: StatsService = Depends(get_stats_service),
):
    logger.debug(f"Stats update request: user_id={user_id}, type={request.type}, increment={request.increment}")
    return await service.increment_stat(user_id, request.type, request.increment)
