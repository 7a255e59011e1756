"""Location catalog loader: one request per process, recovered on failure."""

import logging

import httpx

from climacr.ingest.backend_client import BackendClient
from climacr.ingest.decoders import parse_locations
from climacr.models.errors import LocationLoadError
from climacr.models.location import Location

logger = logging.getLogger(__name__)


class LocationCatalog:
    def __init__(self, client: BackendClient):
        self.client = client
        self.loading = True
        self.locations: tuple[Location, ...] = ()
        self.error = ""
        self._started = False

    async def load(self) -> tuple[Location, ...]:
        """Fetch and decode the catalog. Runs at most once; no retry."""
        if self._started:
            return self.locations
        self._started = True
        self.loading = True
        try:
            self.locations = await self._fetch()
            logger.info("Loaded %d locations", len(self.locations))
        except LocationLoadError as e:
            logger.warning("Location catalog unavailable: %s", e.detail)
            self.error = e.message
        finally:
            self.loading = False
        return self.locations

    async def _fetch(self) -> tuple[Location, ...]:
        try:
            raw = await self.client.get_locations()
            return tuple(parse_locations(raw))
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise LocationLoadError(str(e)) from e

    def find(self, slug: str) -> Location | None:
        for loc in self.locations:
            if loc.slug == slug:
                return loc
        return None
