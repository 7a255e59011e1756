"""Output formatters for the dashboard view."""

import json

from climacr.mapping.weather_codes import classify
from climacr.models.common import round_half_up
from climacr.models.dashboard import DashboardView

WEEKDAYS_ES = (
    "lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo",
)


def _int(value: float | None) -> str:
    rounded = round_half_up(value)
    return "--" if rounded is None else str(rounded)


def _deg(value: float | None) -> str:
    rounded = _int(value)
    return rounded if rounded == "--" else f"{rounded}°"


def _num(value: float | None, default: float = 0) -> str:
    return f"{default if value is None else value:g}"


def format_view_text(v: DashboardView) -> str:
    """Plain text dashboard for the terminal."""
    if v.selected is None:
        title = "Cargando..."
    elif v.selected.region:
        title = f"{v.selected.name} ({v.selected.region})"
    else:
        title = v.selected.name
    lines = [f"=== Clima Costa Rica | {title} ==="]

    for err in v.errors:
        lines.append(f"Error: {err}")
    if v.weather_loading:
        lines.append("Cargando clima...")
    if not v.has_weather:
        return "\n".join(lines)

    c = v.current
    lines.append(
        f"Ahora: {v.temperature}° {v.condition.label} | "
        f"Sensación {v.apparent_temperature}°"
    )
    lines.append(
        f"Humedad {_num(c.relative_humidity)}% | "
        f"Viento {_int(c.wind_speed)} km/h | "
        f"Precip. {_num(c.precipitation)} mm"
    )

    lines.append("-- Próximas horas --")
    for h in v.hourly:
        lines.append(
            f"{h.time:%H:%M}  {_deg(h.temperature):>4}  "
            f"Lluvia {_num(h.precipitation_probability)}%  "
            f"Viento {_int(h.wind_speed)} km/h  "
            f"{classify(h.weather_code).label}"
        )

    lines.append(f"-- Pronóstico {len(v.daily)} días --")
    for d in v.daily:
        lines.append(
            f"{WEEKDAYS_ES[d.date.weekday()]:<10} "
            f"{_deg(d.temperature_max)}/{_deg(d.temperature_min)}  "
            f"Prob. lluvia: {_num(d.precipitation_probability_max)}%  "
            f"Viento máx.: {_int(d.wind_speed_max)} km/h  "
            f"{classify(d.weather_code).label}"
        )
    return "\n".join(lines)


def format_view_json(v: DashboardView) -> str:
    """JSON view for programmatic consumption."""
    data = {
        "selected": v.selected.slug if v.selected else None,
        "locations": [loc.slug for loc in v.locations],
        "loading": v.catalog_loading or v.weather_loading,
        "errors": v.errors,
        "current": None,
        "hourly": [
            {
                "time": h.time.isoformat(),
                "temperature": h.temperature,
                "precipitation_probability": h.precipitation_probability,
                "weather_code": h.weather_code,
                "wind_speed": h.wind_speed,
                "cloud_cover": h.cloud_cover,
            }
            for h in v.hourly
        ],
        "daily": [
            {
                "date": d.date.isoformat(),
                "weather_code": d.weather_code,
                "temperature_max": d.temperature_max,
                "temperature_min": d.temperature_min,
                "precipitation_probability_max": d.precipitation_probability_max,
                "sunrise": d.sunrise,
                "sunset": d.sunset,
                "wind_speed_max": d.wind_speed_max,
            }
            for d in v.daily
        ],
    }
    if v.has_weather:
        data["current"] = {
            "temperature": v.temperature,
            "apparent_temperature": v.apparent_temperature,
            "relative_humidity": v.current.relative_humidity,
            "wind_speed": v.current.wind_speed,
            "precipitation": v.current.precipitation or 0,
            "weather_code": v.current.weather_code,
            "category": v.condition.category.value,
            "label": v.condition.label,
            "observed_at": v.current.observed_at,
        }
    return json.dumps(data, indent=2, ensure_ascii=False)
