"""Dashboard coordinator: catalog -> selection -> weather -> windows."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from climacr.config.schema import DashboardConfig
from climacr.ingest.backend_client import BackendClient
from climacr.mapping.weather_codes import classify
from climacr.models.common import round_half_up
from climacr.models.dashboard import DashboardView
from climacr.models.location import Location
from climacr.projection.windows import WindowProjector
from climacr.state.catalog import LocationCatalog
from climacr.state.selection import SelectionState
from climacr.state.weather import WeatherFetcher

logger = logging.getLogger(__name__)


class Dashboard:
    """Owns the state components and keeps the weather fetch in step with
    the selected location.

    All methods run on one event loop; `select` and `start` may trigger a
    weather fetch that settles later (see `settle`).
    """

    def __init__(self, config: DashboardConfig, client: BackendClient | None = None):
        self.config = config
        self.client = client or BackendClient(
            base_url=config.backend.backend_url,
            user_agent=config.backend.user_agent,
            timeout=config.backend.timeout_seconds,
        )
        self.catalog = LocationCatalog(self.client)
        self.selection = SelectionState()
        self.weather = WeatherFetcher(self.client)
        self.projector = WindowProjector(
            tz=ZoneInfo(config.display.timezone),
            hourly_limit=config.display.hourly_limit,
            daily_limit=config.display.daily_limit,
        )

    async def start(self) -> None:
        """Load the catalog, apply the default selection, start fetching."""
        locations = await self.catalog.load()
        self.selection.apply_catalog(locations)
        self._sync_weather()

    def select(self, slug: str) -> Location:
        loc = self.selection.select(slug)
        logger.info("Selected %s", loc.slug)
        self._sync_weather()
        return loc

    async def settle(self) -> None:
        """Wait until the latest weather fetch has settled."""
        await self.weather.wait()

    def view(self, now: datetime | None = None) -> DashboardView:
        data = self.weather.data
        base = dict(
            locations=self.catalog.locations,
            selected=self.selection.selected,
            catalog_loading=self.catalog.loading,
            catalog_error=self.catalog.error,
            weather_loading=self.weather.loading,
            weather_error=self.weather.error,
        )
        if data is None:
            return DashboardView(**base)

        return DashboardView(
            **base,
            current=data.current,
            temperature=round_half_up(data.current.temperature),
            apparent_temperature=round_half_up(data.current.apparent_temperature),
            condition=classify(data.current.weather_code),
            hourly=self.projector.hourly(data.hourly, now=now),
            daily=self.projector.daily(data.daily),
        )

    def _sync_weather(self) -> None:
        lat, lon = self.selection.coordinates
        self.weather.set_coordinates(lat, lon)
