"""Async HTTP client for the dashboard backend (locations and weather)."""

import logging
from typing import Any

import httpx

from climacr.config.defaults import DEFAULT_USER_AGENT, LOCAL_BACKEND_URL

logger = logging.getLogger(__name__)


class BackendClient:
    def __init__(
        self,
        base_url: str = "",
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/") or LOCAL_BACKEND_URL
        self.user_agent = user_agent
        self.timeout = timeout

    async def get_locations(self) -> Any:
        """Fetch the location catalog. Returns the decoded JSON body."""
        return await self._get_json("/api/locations")

    async def get_weather(self, lat: float, lon: float) -> Any:
        """Fetch the weather envelope {ok, data?} for a coordinate pair."""
        return await self._get_json("/api/weather", params={"lat": lat, "lon": lon})

    async def _get_json(self, path: str, params: dict | None = None) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                resp = await client.get(url, params=params, headers=headers)
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error("Backend error for %s: %s", url, e)
                raise
            except httpx.RequestError as e:
                logger.error("Backend request failed for %s: %s", url, e)
                raise
            return resp.json()
