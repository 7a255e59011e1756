"""Weather fetcher that re-fetches on coordinate change; latest request wins.

Each issued request carries a generation number. When a response settles,
it is applied only if its generation is still the current one, so a slow
response for old coordinates can never overwrite a newer snapshot.

There is no timeout beyond the HTTP client's own; a request that never
settles leaves `loading` true.
"""

import asyncio
import logging

import httpx

from climacr.ingest.backend_client import BackendClient
from climacr.ingest.decoders import parse_snapshot
from climacr.models.errors import (
    DashboardError,
    WeatherFetchError,
    WeatherLogicalError,
)
from climacr.models.weather import WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherFetcher:
    def __init__(self, client: BackendClient):
        self.client = client
        self.data: WeatherSnapshot | None = None
        self.loading = False
        self.error = ""
        self.coordinates: tuple[float, float] | None = None
        self._generation = 0
        self._task: asyncio.Task | None = None

    @property
    def generation(self) -> int:
        return self._generation

    def set_coordinates(self, lat: float | None, lon: float | None) -> bool:
        """Point the fetcher at a coordinate pair.

        Returns True if a new fetch was issued. Must be called from inside a
        running event loop when the pair is concrete.
        """
        if lat is None or lon is None:
            if self.coordinates is not None or self.loading:
                self._generation += 1
                self.loading = False
            self.coordinates = None
            return False

        pair = (lat, lon)
        if pair == self.coordinates:
            return False

        self.coordinates = pair
        self._generation += 1
        self.loading = True
        self._task = asyncio.create_task(self._run(self._generation, lat, lon))
        return True

    async def wait(self) -> None:
        """Wait for the latest issued fetch to settle."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    async def _run(self, generation: int, lat: float, lon: float) -> None:
        try:
            snapshot = await self._fetch(lat, lon)
        except DashboardError as e:
            if generation != self._generation:
                logger.debug("Dropping stale failure for %s,%s", lat, lon)
                return
            logger.warning("Weather for %s,%s unavailable: %s", lat, lon, e.detail)
            self.error = e.message
        else:
            if generation != self._generation:
                logger.debug("Dropping stale snapshot for %s,%s", lat, lon)
                return
            self.data = snapshot
            self.error = ""
        self.loading = False

    async def _fetch(self, lat: float, lon: float) -> WeatherSnapshot:
        try:
            envelope = await self.client.get_weather(lat, lon)
        except (httpx.HTTPError, ValueError) as e:
            raise WeatherFetchError(str(e)) from e

        if not isinstance(envelope, dict) or not envelope.get("ok"):
            raise WeatherLogicalError("backend reported ok=false")

        try:
            return parse_snapshot(envelope.get("data"))
        except (ValueError, KeyError, TypeError) as e:
            raise WeatherFetchError(str(e)) from e
