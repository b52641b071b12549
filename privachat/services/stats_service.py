# privachat/services/stats_service.py
"""
Stats service
Counter reads and atomic increments for xp / messages / calls
"""

from typing import Dict, Optional

from sqlalchemy.future import select

from privachat.config import settings
from privachat.exceptions import ValidationError
from privachat.models import Stats, StatType, COUNTER_COLUMNS, ZERO_STATS, now_utc
from privachat.services.database_service import DatabaseService
from privachat.utils.logger import logger

# Largest single increment accepted from a caller
MAX_INCREMENT = 2**31 - 1
# Counters are 64-bit signed integers in every backend
COUNTER_MIN = -(2**63)
COUNTER_MAX = 2**63 - 1


def parse_stat_type(counter_name) -> StatType:
    """Map caller input onto the closed set of counters."""
    if isinstance(counter_name, StatType):
        return counter_name
    try:
        return StatType(counter_name)
    except ValueError:
        raise ValidationError("counter_name", "Invalid stat type")


class StatsService:
    def __init__(self, database: DatabaseService, allow_negative_increments: Optional[bool] = None):
        self.database = database
        self.allow_negative_increments = (
            settings.allow_negative_increments if allow_negative_increments is None else allow_negative_increments
        )

    async def get_stats(self, user_id: str) -> Dict[str, int]:
        """Stored counters, or zeros when the user has none yet. Never writes."""
        async with self.database.transaction("Stats lookup") as session:
            result = await session.execute(select(Stats).where(Stats.user_id == user_id))
            stats = result.scalar_one_or_none()
            return stats.to_dict() if stats else dict(ZERO_STATS)

    async def increment_stat(self, user_id: str, counter_name, delta: Optional[int] = None) -> Dict[str, int]:
        stat_type = parse_stat_type(counter_name)
        if delta is None:
            delta = 1
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError("increment", "Increment must be an integer")
        if delta < 0 and not self.allow_negative_increments:
            raise ValidationError("increment", "Increment must not be negative")
        if abs(delta) > MAX_INCREMENT:
            raise ValidationError("increment", f"Increment must be at most {MAX_INCREMENT} in magnitude")

        column = COUNTER_COLUMNS[stat_type]
        stmt = self.database.upsert(
            Stats.__table__,
            values={**ZERO_STATS, "user_id": user_id, column.name: delta, "last_updated": now_utc()},
            update=lambda proposed: {
                column.name: column + proposed[column.name],
                "last_updated": proposed["last_updated"],
            },
        )

        async with self.database.transaction("Stats increment") as session:
            await session.execute(stmt)
            result = await session.execute(select(Stats).where(Stats.user_id == user_id))
            stats = result.scalar_one().to_dict()
            # Raising here rolls the write back
            if any(_out_of_range(value) for value in stats.values()):
                raise ValidationError("increment", f"{stat_type.value} would overflow")

        logger.info(f"Stats updated: user_id={user_id}, {stat_type.value}{delta:+d}")
        return stats

    async def award_xp(self, user_id: str, amount: int) -> Dict[str, int]:
        return await self.increment_stat(user_id, StatType.XP, amount)

    async def increment_messages(self, user_id: str) -> Dict[str, int]:
        return await self.increment_stat(user_id, StatType.MESSAGES, 1)

    async def increment_calls(self, user_id: str) -> Dict[str, int]:
        return await self.increment_stat(user_id, StatType.CALLS, 1)


def _out_of_range(value) -> bool:
    # SQLite stores an overflowing INTEGER sum as REAL instead of failing
    return isinstance(value, bool) or not isinstance(value, int) or not COUNTER_MIN <= value <= COUNTER_MAX
