# privachat/api/profile.py
"""
Profile API
"""

from fastapi import APIRouter, Depends

from privachat.api.dependencies import get_profile_service
from privachat.schemas.profile_schemas import ProfileUpdateRequest, ProfileResponse
from privachat.services.profile_service import ProfileService
from privachat.utils.logger import logger

router = APIRouter(tags=["profile"])


@router.get("/profile/{user_id}", response_model=ProfileResponse)
async def get_profile(user_id: str, service: ProfileService = Depends(get_profile_service)):
    return await service.get_profile(user_id)


@router.put("/profile/{user_id}", response_model=ProfileResponse)
async def update_profile(
    user_id: str,
    request: ProfileUpdateRequest,
    service: ProfileService = Depends(get_profile_service),
):
    """Create the profile or merge the supplied fields into it"""
    fields = request.model_dump(exclude_unset=True)
    logger.debug(f"Profile update request: user_id={user_id}, fields={sorted(fields)}")
    return await service.upsert_profile(user_id, fields)
