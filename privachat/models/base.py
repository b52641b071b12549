# privachat/models/base.py
"""
SQLAlchemy Base and shared column helpers
"""

from datetime import datetime, timezone
from sqlalchemy.orm import declarative_base

# Base model
Base = declarative_base()

def now_utc():
    return datetime.now(timezone.utc)
