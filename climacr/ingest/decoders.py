"""Decoders from backend JSON payloads to frozen domain models."""

import logging
from datetime import datetime
from typing import Any

from climacr.models.location import Location
from climacr.models.weather import (
    DAILY_METRICS,
    HOURLY_METRICS,
    CurrentReading,
    TimeSeries,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)


def parse_locations(raw: Any) -> list[Location]:
    """Decode the /api/locations array.

    Raises ValueError, KeyError or TypeError on malformed input.
    """
    if not isinstance(raw, list):
        raise TypeError(f"Expected a list of locations, got {type(raw).__name__}")

    locations: list[Location] = []
    seen: set[str] = set()
    for item in raw:
        item = _require_dict(item, "location")
        loc = Location(
            slug=str(item["slug"]),
            name=str(item["name"]),
            region=str(item.get("region") or ""),
            lat=float(item["lat"]),
            lon=float(item["lon"]),
        )
        if loc.slug in seen:
            raise ValueError(f"Duplicate location slug: {loc.slug}")
        seen.add(loc.slug)
        locations.append(loc)
    return locations


def parse_snapshot(raw: Any) -> WeatherSnapshot:
    """Decode the `data` object of a successful /api/weather response."""
    raw = _require_dict(raw, "weather object")

    return WeatherSnapshot(
        current=_parse_current(_require_dict(raw["current"], "current")),
        hourly=_parse_series(_require_dict(raw["hourly"], "hourly"), HOURLY_METRICS),
        daily=_parse_series(_require_dict(raw["daily"], "daily"), DAILY_METRICS),
    )


def _require_dict(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise TypeError(f"Expected {what} to be an object, got {type(value).__name__}")
    return value


def _parse_current(c: dict) -> CurrentReading:
    code = c.get("weather_code")
    return CurrentReading(
        temperature=float(c["temperature_2m"]),
        apparent_temperature=float(c["apparent_temperature"]),
        relative_humidity=_opt_float(c.get("relative_humidity_2m")),
        wind_speed=float(c["wind_speed_10m"]),
        precipitation=_opt_float(c.get("precipitation")),
        weather_code=int(code) if code is not None else None,
        observed_at=str(c.get("time", "")),
    )


def _parse_series(s: dict, metric_names: tuple[str, ...]) -> TimeSeries:
    """Build a TimeSeries from the known metrics present in the payload.

    Unknown keys are ignored; bad timestamps and length mismatches raise.
    """
    times = tuple(_check_timestamp(t) for t in s["time"])
    metrics = {}
    for name in metric_names:
        if name in s and s[name] is not None:
            metrics[name] = tuple(s[name])
    missing = [n for n in metric_names if n not in metrics]
    if missing:
        logger.debug("Series missing metrics: %s", ", ".join(missing))
    return TimeSeries(time=times, metrics=metrics)


def _check_timestamp(t: Any) -> str:
    """Accept ISO dates and datetimes; anything else is a decode error."""
    if not isinstance(t, str):
        raise TypeError(f"Timestamp must be a string, got {type(t).__name__}")
    datetime.fromisoformat(t)
    return t


def _opt_float(v: Any) -> float | None:
    return float(v) if v is not None else None
