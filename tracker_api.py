import asyncio
import json
import logging
from typing import Any, Optional, Tuple

import aiohttp
from yarl import URL

from bot_config import DEFAULT_HIGHSCORES_URL, DEFAULT_LEADERBOARD_BASE_URL, PERIODS

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/142.0.0.0 Safari/537.36",
    "Accept": "application/json, text/html;q=0.9, */*;q=0.8",
}


class UpstreamError(Exception):
    """A fetch that did not produce a usable response.

    status is the HTTP status when the server answered, None for
    network errors and timeouts.
    """

    def __init__(self, status: Optional[int] = None, reason: str = ""):
        self.status = status
        self.reason = reason
        super().__init__(f"{status} {reason}".strip() if status else reason)

    def describe(self) -> str:
        if self.status is not None:
            return str(self.status)
        return self.reason or "unknown error"


class TrackerAPI:
    """Outbound calls to the leaderboard API and the SpawnPK highscores page.

    A session is opened per call; there is nothing worth sharing
    between commands.
    """

    def __init__(self, leaderboard_base_url: str = DEFAULT_LEADERBOARD_BASE_URL,
                 highscores_url: str = DEFAULT_HIGHSCORES_URL, timeout: float = 15.0):
        self.leaderboard_base_url = leaderboard_base_url.rstrip("/")
        self.highscores_url = highscores_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    def leaderboard_url(self, period: str) -> str:
        window = PERIODS.get(period, period)
        return str(URL(self.leaderboard_base_url + "/api/leaderboard").with_query(period=window))

    def highscores_page_url(self, username: str) -> str:
        return str(URL(self.highscores_url).with_query(name=username, submit="Search"))

    async def _get(self, url: str) -> str:
        try:
            async with aiohttp.ClientSession(headers=HEADERS, timeout=self.timeout) as session:
                async with session.get(url) as resp:
                    if resp.status < 200 or resp.status >= 300:
                        logger.warning(f"GET {url} returned status {resp.status}")
                        raise UpstreamError(resp.status, resp.reason or "")
                    return await resp.text()
        except asyncio.TimeoutError:
            logger.warning(f"GET {url} timed out after {self.timeout.total}s")
            raise UpstreamError(None, "request timed out")
        except aiohttp.ClientError as e:
            logger.warning(f"GET {url} failed: {e}")
            raise UpstreamError(None, "connection failed")

    async def fetch_leaderboard(self, period: str) -> Any:
        """Return the decoded JSON leaderboard for daily/weekly/monthly."""
        url = self.leaderboard_url(period)
        text = await self._get(url)
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            logger.error(f"Leaderboard response from {url} is not JSON")
            raise UpstreamError(None, "invalid JSON response")

    async def fetch_highscores_page(self, username: str) -> Tuple[str, str]:
        """Return (html, url) for a highscores search."""
        url = self.highscores_page_url(username)
        html = await self._get(url)
        return html, url
