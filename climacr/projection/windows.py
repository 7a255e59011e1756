"""Hourly and daily display windows derived from a weather TimeSeries."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from climacr.config.defaults import DEFAULT_TIMEZONE
from climacr.models.common import parse_date, parse_local_timestamp
from climacr.models.weather import DailyEntry, HourlyEntry, TimeSeries

logger = logging.getLogger(__name__)

HOURLY_LIMIT = 12
DAILY_LIMIT = 7


def hourly_window(
    series: TimeSeries,
    now: datetime | None = None,
    tz: ZoneInfo | None = None,
    limit: int = HOURLY_LIMIT,
) -> tuple[HourlyEntry, ...]:
    """Next `limit` entries whose timestamp is at or after now, in series order.

    `now` is evaluated once per call. Shorter series give shorter windows.
    """
    if tz is None:
        tz = ZoneInfo(DEFAULT_TIMEZONE)
    if now is None:
        now = datetime.now(tz)

    entries: list[HourlyEntry] = []
    for i, raw_time in enumerate(series.time):
        if len(entries) >= limit:
            break
        ts = parse_local_timestamp(raw_time, tz)
        if ts < now:
            continue
        entries.append(
            HourlyEntry(
                time=ts,
                temperature=series.value("temperature_2m", i),
                precipitation_probability=series.value("precipitation_probability", i),
                weather_code=series.value("weather_code", i),
                wind_speed=series.value("wind_speed_10m", i),
                cloud_cover=series.value("cloud_cover", i),
            )
        )
    return tuple(entries)


def daily_window(series: TimeSeries, limit: int = DAILY_LIMIT) -> tuple[DailyEntry, ...]:
    """First `limit` days of the series, unfiltered; the series starts today."""
    return tuple(
        DailyEntry(
            date=parse_date(series.time[i]),
            weather_code=series.value("weather_code", i),
            temperature_max=series.value("temperature_2m_max", i),
            temperature_min=series.value("temperature_2m_min", i),
            precipitation_probability_max=series.value("precipitation_probability_max", i),
            sunrise=series.value("sunrise", i),
            sunset=series.value("sunset", i),
            wind_speed_max=series.value("wind_speed_10m_max", i),
        )
        for i in range(min(limit, len(series)))
    )


class WindowProjector:
    """Memoizes window derivations per source TimeSeries object.

    A derivation is recomputed only when a different series object is passed
    in; the hourly window is also keyed by `now` when the caller pins it.
    """

    def __init__(
        self,
        tz: ZoneInfo | None = None,
        hourly_limit: int = HOURLY_LIMIT,
        daily_limit: int = DAILY_LIMIT,
    ):
        self.tz = tz or ZoneInfo(DEFAULT_TIMEZONE)
        self.hourly_limit = hourly_limit
        self.daily_limit = daily_limit
        self._hourly_source: TimeSeries | None = None
        self._hourly_now: datetime | None = None
        self._hourly: tuple[HourlyEntry, ...] = ()
        self._daily_source: TimeSeries | None = None
        self._daily: tuple[DailyEntry, ...] = ()
        self.hits = 0
        self.misses = 0

    def hourly(
        self, series: TimeSeries, now: datetime | None = None
    ) -> tuple[HourlyEntry, ...]:
        if series is self._hourly_source and now == self._hourly_now:
            self.hits += 1
            return self._hourly
        self.misses += 1
        self._hourly = hourly_window(series, now=now, tz=self.tz, limit=self.hourly_limit)
        self._hourly_source = series
        self._hourly_now = now
        logger.debug("Hourly window recomputed: %d entries", len(self._hourly))
        return self._hourly

    def daily(self, series: TimeSeries) -> tuple[DailyEntry, ...]:
        if series is self._daily_source:
            self.hits += 1
            return self._daily
        self.misses += 1
        self._daily = daily_window(series, limit=self.daily_limit)
        self._daily_source = series
        return self._daily
