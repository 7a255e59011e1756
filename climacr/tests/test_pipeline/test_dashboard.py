"""End-to-end tests for the dashboard coordinator against a mocked backend."""

import asyncio
from datetime import datetime

import httpx
import respx

from climacr.config.schema import DashboardConfig
from climacr.dashboard import Dashboard
from climacr.mapping.weather_codes import WeatherCategory

BACKEND = "https://test-backend.example.com"
SAN_JOSE_ONLY = [
    {"slug": "sanjose", "name": "San José", "region": "Valle Central",
     "lat": 9.93, "lon": -84.08},
]


def _run(dashboard: Dashboard, select: str | None = None) -> None:
    async def scenario():
        await dashboard.start()
        if select:
            dashboard.select(select)
        await dashboard.settle()

    asyncio.run(scenario())


class TestDashboard:
    @respx.mock
    def test_default_location_weather(
        self, config: DashboardConfig, weather_payload: dict, morning: datetime
    ):
        respx.get(f"{BACKEND}/api/locations").mock(
            return_value=httpx.Response(200, json=SAN_JOSE_ONLY)
        )
        weather = respx.get(
            f"{BACKEND}/api/weather", params={"lat": "9.93", "lon": "-84.08"}
        ).mock(return_value=httpx.Response(200, json=weather_payload))

        dashboard = Dashboard(config)
        _run(dashboard)
        view = dashboard.view(now=morning)

        assert weather.call_count == 1
        assert view.selected.slug == "sanjose"
        assert view.temperature == 24  # 23.5 rounds up
        assert view.apparent_temperature == 25
        assert view.condition.category == WeatherCategory.PARTLY_CLOUDY
        assert view.condition.label == "Parcialmente nublado"
        assert len(view.hourly) == 12
        assert len(view.daily) == 7
        assert view.errors == []
        assert view.weather_loading is False
        assert view.catalog_loading is False

    @respx.mock
    def test_logical_error_shows_no_temperature(self, config: DashboardConfig):
        respx.get(f"{BACKEND}/api/locations").mock(
            return_value=httpx.Response(200, json=SAN_JOSE_ONLY)
        )
        respx.get(f"{BACKEND}/api/weather").mock(
            return_value=httpx.Response(200, json={"ok": False})
        )

        dashboard = Dashboard(config)
        _run(dashboard)
        view = dashboard.view()

        assert view.weather_error == "Error al obtener clima"
        assert view.temperature is None
        assert view.has_weather is False
        assert view.hourly == ()

    def test_catalog_failure_never_fetches_weather(self, config: DashboardConfig):
        with respx.mock(assert_all_called=False) as router:
            router.get(f"{BACKEND}/api/locations").mock(
                return_value=httpx.Response(503)
            )
            weather = router.get(f"{BACKEND}/api/weather")

            dashboard = Dashboard(config)
            _run(dashboard)
        view = dashboard.view()

        assert not weather.called
        assert view.selected is None
        assert view.catalog_error == "No se pudieron cargar ubicaciones"
        assert view.weather_loading is False

    @respx.mock
    def test_explicit_selection_wins(
        self, config: DashboardConfig, locations_payload: list, weather_payload: dict
    ):
        respx.get(f"{BACKEND}/api/locations").mock(
            return_value=httpx.Response(200, json=locations_payload)
        )
        route = respx.get(f"{BACKEND}/api/weather").mock(
            return_value=httpx.Response(200, json=weather_payload)
        )

        dashboard = Dashboard(config)
        _run(dashboard, select="limon")

        assert dashboard.view().selected.slug == "limon"
        assert dashboard.weather.coordinates == (9.99, -83.03)
        lats = [c.request.url.params["lat"] for c in route.calls]
        assert "9.99" in lats

    @respx.mock
    def test_view_reuses_windows_until_new_snapshot(
        self, config: DashboardConfig, weather_payload: dict, morning: datetime
    ):
        respx.get(f"{BACKEND}/api/locations").mock(
            return_value=httpx.Response(200, json=SAN_JOSE_ONLY)
        )
        respx.get(f"{BACKEND}/api/weather").mock(
            return_value=httpx.Response(200, json=weather_payload)
        )

        dashboard = Dashboard(config)
        _run(dashboard)
        first = dashboard.view(now=morning)
        second = dashboard.view(now=morning)

        assert first.hourly is second.hourly
        assert first.daily is second.daily
        assert dashboard.projector.misses == 2
