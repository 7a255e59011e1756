"""Display-ready view of the dashboard state."""

from dataclasses import dataclass

from climacr.mapping.weather_codes import WeatherCondition
from climacr.models.location import Location
from climacr.models.weather import CurrentReading, DailyEntry, HourlyEntry


@dataclass(frozen=True)
class DashboardView:
    locations: tuple[Location, ...]
    selected: Location | None
    catalog_loading: bool
    catalog_error: str
    weather_loading: bool
    weather_error: str
    current: CurrentReading | None = None
    temperature: int | None = None  # rounded for display
    apparent_temperature: int | None = None
    condition: WeatherCondition | None = None
    hourly: tuple[HourlyEntry, ...] = ()
    daily: tuple[DailyEntry, ...] = ()

    @property
    def has_weather(self) -> bool:
        return self.current is not None

    @property
    def errors(self) -> list[str]:
        return [e for e in (self.catalog_error, self.weather_error) if e]
