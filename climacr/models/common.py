"""Common helpers shared across models."""

import math
from datetime import date, datetime
from zoneinfo import ZoneInfo


def parse_local_timestamp(iso_str: str, tz: ZoneInfo) -> datetime:
    """Parse an ISO timestamp; naive values are taken as local to tz."""
    dt = datetime.fromisoformat(iso_str)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    return dt


def parse_date(iso_str: str) -> date:
    return date.fromisoformat(iso_str[:10])


def round_half_up(value: float | None) -> int | None:
    """Round like a display would: 0.5 goes up, including for negatives."""
    if value is None:
        return None
    return math.floor(value + 0.5)
