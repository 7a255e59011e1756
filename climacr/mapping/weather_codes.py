"""WMO weather code classification (Open-Meteo codes, Spanish labels)."""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Any


class WeatherCategory(StrEnum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    RAIN = "rain"
    STORM = "storm"


@dataclass(frozen=True)
class WeatherCondition:
    category: WeatherCategory
    label: str


FALLBACK_CONDITION = WeatherCondition(WeatherCategory.CLOUDY, "Clima")

WEATHER_CODES: MappingProxyType[int, WeatherCondition] = MappingProxyType({
    0: WeatherCondition(WeatherCategory.CLEAR, "Despejado"),
    1: WeatherCondition(WeatherCategory.PARTLY_CLOUDY, "Mayormente despejado"),
    2: WeatherCondition(WeatherCategory.PARTLY_CLOUDY, "Parcialmente nublado"),
    3: WeatherCondition(WeatherCategory.CLOUDY, "Nublado"),
    45: WeatherCondition(WeatherCategory.CLOUDY, "Niebla"),
    48: WeatherCondition(WeatherCategory.CLOUDY, "Niebla helada"),
    51: WeatherCondition(WeatherCategory.RAIN, "Llovizna ligera"),
    53: WeatherCondition(WeatherCategory.RAIN, "Llovizna"),
    55: WeatherCondition(WeatherCategory.RAIN, "Llovizna intensa"),
    61: WeatherCondition(WeatherCategory.RAIN, "Lluvia ligera"),
    63: WeatherCondition(WeatherCategory.RAIN, "Lluvia"),
    65: WeatherCondition(WeatherCategory.RAIN, "Lluvia intensa"),
    80: WeatherCondition(WeatherCategory.RAIN, "Chubascos"),
    81: WeatherCondition(WeatherCategory.RAIN, "Chubascos fuertes"),
    82: WeatherCondition(WeatherCategory.RAIN, "Chubascos violentos"),
    95: WeatherCondition(WeatherCategory.STORM, "Tormenta"),
    96: WeatherCondition(WeatherCategory.STORM, "Tormenta fuerte"),
    99: WeatherCondition(WeatherCategory.STORM, "Tormenta severa"),
})


def classify(code: Any) -> WeatherCondition:
    """Map a weather code to its condition. Unknown input falls back to Clima."""
    if isinstance(code, bool) or not isinstance(code, int):
        return FALLBACK_CONDITION
    return WEATHER_CODES.get(code, FALLBACK_CONDITION)
