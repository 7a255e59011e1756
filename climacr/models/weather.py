"""Weather snapshot models: current reading, time series and window entries."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any

HOURLY_METRICS = (
    "temperature_2m",
    "precipitation_probability",
    "weather_code",
    "wind_speed_10m",
    "cloud_cover",
)

DAILY_METRICS = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_probability_max",
    "sunrise",
    "sunset",
    "wind_speed_10m_max",
)


@dataclass(frozen=True)
class CurrentReading:
    temperature: float
    apparent_temperature: float
    relative_humidity: float | None
    wind_speed: float
    precipitation: float | None
    weather_code: int | None
    observed_at: str


@dataclass(frozen=True, eq=False)
class TimeSeries:
    """Parallel, index-aligned sequences sharing one timestamp axis.

    Compared by identity: projections are cached per series object.
    """

    time: tuple[str, ...]
    metrics: Mapping[str, tuple[Any, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        n = len(self.time)
        for name, values in self.metrics.items():
            if len(values) != n:
                raise ValueError(
                    f"Metric {name!r} has {len(values)} values, expected {n}"
                )
        object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))

    def __len__(self) -> int:
        return len(self.time)

    def value(self, metric: str, index: int) -> Any:
        """Value of a metric at an index, or None if the metric is absent."""
        values = self.metrics.get(metric)
        if values is None:
            return None
        return values[index]


@dataclass(frozen=True, eq=False)
class WeatherSnapshot:
    current: CurrentReading
    hourly: TimeSeries
    daily: TimeSeries


@dataclass(frozen=True)
class HourlyEntry:
    time: datetime
    temperature: float | None
    precipitation_probability: float | None
    weather_code: int | None
    wind_speed: float | None
    cloud_cover: float | None


@dataclass(frozen=True)
class DailyEntry:
    date: date
    weather_code: int | None
    temperature_max: float | None
    temperature_min: float | None
    precipitation_probability_max: float | None
    sunrise: str | None
    sunset: str | None
    wind_speed_max: float | None
