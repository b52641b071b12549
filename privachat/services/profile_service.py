# privachat/services/profile_service.py
"""
Profile service
Lookup and create-or-merge of profile rows
"""

from typing import Dict, Optional

from sqlalchemy.future import select

from privachat.exceptions import NotFound, ValidationError
from privachat.models import Profile, now_utc
from privachat.models.profile import DISPLAY_NAME_MAX, AVATAR_URL_MAX, BIO_MAX
from privachat.services.database_service import DatabaseService
from privachat.utils.logger import logger

PROFILE_FIELDS = ("display_name", "avatar_url", "bio")

# field -> (max length, error message)
FIELD_LIMITS = {
    "display_name": (DISPLAY_NAME_MAX, f"Display name too long (max {DISPLAY_NAME_MAX} characters)"),
    "avatar_url": (AVATAR_URL_MAX, f"Avatar URL too long (max {AVATAR_URL_MAX} characters)"),
    "bio": (BIO_MAX, f"Bio too long (max {BIO_MAX} characters)"),
}


def validate_profile_fields(fields: Dict[str, Optional[str]]) -> Dict[str, Optional[str]]:
    """
    Check the supplied profile fields and return only the recognised ones.

    Unknown keys are dropped. None is allowed and clears the field.
    Raises ValidationError on the first field over its length limit.
    """
    cleaned = {}
    for name in PROFILE_FIELDS:
        if name not in fields:
            continue
        value = fields[name]
        if value is not None:
            if not isinstance(value, str):
                raise ValidationError(name, f"{name} must be a string")
            limit, message = FIELD_LIMITS[name]
            if len(value) > limit:
                raise ValidationError(name, message)
        cleaned[name] = value
    return cleaned


class ProfileService:
    def __init__(self, database: DatabaseService):
        self.database = database

    async def get_profile(self, user_id: str) -> Dict:
        async with self.database.transaction("Profile lookup") as session:
            result = await session.execute(select(Profile).where(Profile.user_id == user_id))
            profile = result.scalar_one_or_none()
            if profile is None:
                raise NotFound("Profile not found")
            return profile.to_dict()

    async def upsert_profile(self, user_id: str, fields: Dict[str, Optional[str]]) -> Dict:
        """
        Create the profile or merge the supplied fields into the existing row.

        Fields missing from `fields` keep their stored value; created_at is
        only written on the first insert.
        """
        changes = validate_profile_fields(fields)

        stmt = self.database.upsert(
            Profile.__table__,
            values={"user_id": user_id, "created_at": now_utc(), **changes},
            update=lambda proposed: {name: proposed[name] for name in changes},
        )

        async with self.database.transaction("Profile upsert") as session:
            await session.execute(stmt)
            result = await session.execute(select(Profile).where(Profile.user_id == user_id))
            profile = result.scalar_one().to_dict()

        logger.info(f"Profile saved: user_id={user_id}, fields={sorted(changes)}")
        return profile
