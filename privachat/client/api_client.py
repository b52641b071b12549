# privachat/client/api_client.py
"""
Async client for the PrivaChat REST API (profiles, XP, stats)
"""

import asyncio
from typing import Dict, Optional
from urllib.parse import quote

import aiohttp

from privachat.config import settings
from privachat.models.stats import ZERO_STATS
from privachat.utils.logger import logger


class PrivaChatAPI:
    def __init__(self, api_url: Optional[str] = None, timeout: float = 10.0):
        self.api_url = (api_url or settings.api_url).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    def _url(self, resource: str, user_id: str) -> str:
        return f"{self.api_url}/{resource}/{quote(user_id, safe='')}"

    async def get_user_profile(self, user_id: str) -> Optional[Dict]:
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(self._url("profile", user_id)) as response:
                    if response.status != 200:
                        logger.warning(f"Profile fetch failed: {response.status} user_id={user_id}")
                        return None
                    return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Profile fetch failed: {e}")
            return None

    async def update_user_profile(self, user_id: str, profile_data: Dict) -> Optional[Dict]:
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.put(self._url("profile", user_id), json=profile_data) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(f"Profile update failed: {response.status} - {error_text}")
                        return None
                    return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Profile update failed: {e}")
            return None

    async def get_user_stats(self, user_id: str) -> Dict[str, int]:
        """Server counters; zeros when the server can't be reached"""
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(self._url("stats", user_id)) as response:
                    if response.status != 200:
                        return dict(ZERO_STATS)
                    return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Stats fetch failed: {e}")
            return dict(ZERO_STATS)

    async def update_stats(self, user_id: str, stat_type: str, increment: int = 1) -> Optional[Dict[str, int]]:
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.post(
                    self._url("stats", user_id), json={"type": stat_type, "increment": increment}
                ) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(f"Stats update failed: {response.status} - {error_text}")
                        return None
                    return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Stats update failed: {e}")
            return None

    async def award_xp(self, user_id: str, amount: int) -> Optional[Dict[str, int]]:
        return await self.update_stats(user_id, "xp", amount)

    async def increment_messages(self, user_id: str) -> Optional[Dict[str, int]]:
        return await self.update_stats(user_id, "messages", 1)

    async def increment_calls(self, user_id: str) -> Optional[Dict[str, int]]:
        return await self.update_stats(user_id, "calls", 1)
