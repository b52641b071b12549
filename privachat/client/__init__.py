from .api_client import PrivaChatAPI
from .activity import ActivityTracker, ChatSession

__all__ = ["PrivaChatAPI", "ActivityTracker", "ChatSession"]
