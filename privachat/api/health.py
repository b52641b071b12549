# privachat/api/health.py
from fastapi import APIRouter

from privachat.schemas.commons_schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", message="PrivaChat API is running")
