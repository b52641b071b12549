# privachat/models/profile.py
"""
Profile model, one row per user
"""

from sqlalchemy import Column, String, DateTime
from .base import Base, now_utc

DISPLAY_NAME_MAX = 100
AVATAR_URL_MAX = 500
BIO_MAX = 500

class Profile(Base):
    __tablename__ = "profiles"

    user_id = Column(String(255), primary_key=True)
    display_name = Column(String(DISPLAY_NAME_MAX))
    avatar_url = Column(String(AVATAR_URL_MAX))
    bio = Column(String(BIO_MAX))
    # Set on insert only; upserts never include it in the conflict update
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "display_name": self.display_name,
            "avatar_url": self.avatar_url,
            "bio": self.bio,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
