# privachat/client/activity.py
"""
Turns chat protocol events into stat updates.

The messaging SDK owns rooms, timelines and call signaling. Its event
callbacks hand the active ChatSession to the tracker explicitly; there is
no module-level client handle.
"""

from typing import Dict, Optional

from pydantic import BaseModel

from privachat.client.api_client import PrivaChatAPI
from privachat.config import settings
from privachat.utils.logger import logger


class ChatSession(BaseModel):
    user_id: str
    homeserver: str = "https://matrix.org"
    access_token: Optional[str] = None
    device_id: Optional[str] = None


class ActivityTracker:
    def __init__(
        self,
        api: PrivaChatAPI,
        message_xp: Optional[int] = None,
        call_xp: Optional[int] = None,
        enabled: bool = True,
    ):
        self.api = api
        self.message_xp = settings.message_xp_reward if message_xp is None else message_xp
        self.call_xp = settings.call_xp_reward if call_xp is None else call_xp
        self.enabled = enabled

    async def on_message_sent(self, session: ChatSession, sender: str) -> Optional[Dict[str, int]]:
        """Timeline message event. Only the session's own messages count."""
        if not self.enabled or sender != session.user_id:
            return None
        await self.api.award_xp(session.user_id, self.message_xp)
        return await self.api.increment_messages(session.user_id)

    async def on_call_placed(self, session: ChatSession) -> Optional[Dict[str, int]]:
        return await self._record_call(session, "placed")

    async def on_call_answered(self, session: ChatSession) -> Optional[Dict[str, int]]:
        return await self._record_call(session, "answered")

    async def _record_call(self, session: ChatSession, kind: str) -> Optional[Dict[str, int]]:
        if not self.enabled:
            return None
        logger.debug(f"Call {kind}: user_id={session.user_id}")
        await self.api.increment_calls(session.user_id)
        return await self.api.award_xp(session.user_id, self.call_xp)
