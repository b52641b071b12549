# privachat/schemas/profile_schemas.py
"""
Profile request / response schemas
"""

from pydantic import BaseModel
from typing import Optional

class ProfileUpdateRequest(BaseModel):
    # Length limits are checked by the profile service so the error names the field
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None

class ProfileResponse(BaseModel):
    user_id: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    created_at: Optional[str] = None
