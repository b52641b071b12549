# privachat/schemas/commons_schemas.py
"""
Shared response schemas
"""

from pydantic import BaseModel
from typing import Optional

class ErrorResponse(BaseModel):
    error: str
    field: Optional[str] = None

class HealthResponse(BaseModel):
    status: str
    message: str
