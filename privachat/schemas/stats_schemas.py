# privachat/schemas/stats_schemas.py
"""
Stats request / response schemas
"""

from pydantic import BaseModel, StrictInt
from typing import Optional

class StatsUpdateRequest(BaseModel):
    type: Optional[str] = None  # checked against StatType by the stats service
    increment: Optional[StrictInt] = None

class StatsResponse(BaseModel):
    xp: int = 0
    messages: int = 0
    calls: int = 0
