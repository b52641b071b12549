# privachat/models/stats.py
"""
Stats model (xp / messages / calls counters)
"""

from enum import Enum
from sqlalchemy import Column, String, BigInteger, DateTime
from .base import Base, now_utc

class StatType(str, Enum):
    XP = "xp"
    MESSAGES = "messages"
    CALLS = "calls"

class Stats(Base):
    __tablename__ = "stats"

    user_id = Column(String(255), primary_key=True)
    xp = Column(BigInteger, default=0, nullable=False)
    messages = Column(BigInteger, default=0, nullable=False)
    calls = Column(BigInteger, default=0, nullable=False)
    last_updated = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    def to_dict(self) -> dict:
        return {"xp": self.xp, "messages": self.messages, "calls": self.calls}

# Fixed counter -> column table. Caller input only ever selects a key here.
COUNTER_COLUMNS = {
    StatType.XP: Stats.__table__.c.xp,
    StatType.MESSAGES: Stats.__table__.c.messages,
    StatType.CALLS: Stats.__table__.c.calls,
}

ZERO_STATS = {"xp": 0, "messages": 0, "calls": 0}
