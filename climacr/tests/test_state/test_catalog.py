"""Tests for the location catalog loader."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import respx

from climacr.ingest.backend_client import BackendClient
from climacr.state.catalog import LocationCatalog

BACKEND = "https://test-backend.example.com"


class TestLocationCatalog:
    def test_initial_state(self):
        catalog = LocationCatalog(MagicMock(spec=BackendClient))
        assert catalog.loading is True
        assert catalog.locations == ()
        assert catalog.error == ""

    @respx.mock
    def test_load_success(self, locations_payload: list):
        respx.get(f"{BACKEND}/api/locations").mock(
            return_value=httpx.Response(200, json=locations_payload)
        )
        catalog = LocationCatalog(BackendClient(base_url=BACKEND))
        asyncio.run(catalog.load())

        assert catalog.loading is False
        assert catalog.error == ""
        assert [loc.slug for loc in catalog.locations] == ["sanjose", "liberia", "limon"]
        assert catalog.find("limon").name == "Limón"
        assert catalog.find("cartago") is None

    @respx.mock
    def test_network_failure(self):
        respx.get(f"{BACKEND}/api/locations").mock(
            side_effect=httpx.ConnectError("refused")
        )
        catalog = LocationCatalog(BackendClient(base_url=BACKEND))
        asyncio.run(catalog.load())

        assert catalog.loading is False
        assert catalog.locations == ()
        assert catalog.error == "No se pudieron cargar ubicaciones"

    @respx.mock
    def test_decode_failure(self):
        respx.get(f"{BACKEND}/api/locations").mock(
            return_value=httpx.Response(200, json={"detail": "Not Found"})
        )
        catalog = LocationCatalog(BackendClient(base_url=BACKEND))
        asyncio.run(catalog.load())

        assert catalog.locations == ()
        assert catalog.error == "No se pudieron cargar ubicaciones"

    def test_partial_bad_record_leaves_catalog_empty(self, locations_payload: list):
        client = MagicMock(spec=BackendClient)
        client.get_locations = AsyncMock(
            return_value=locations_payload + [{"slug": "broken"}]
        )
        catalog = LocationCatalog(client)
        asyncio.run(catalog.load())
        assert catalog.locations == ()
        assert catalog.error

    def test_runs_once(self, locations_payload: list):
        client = MagicMock(spec=BackendClient)
        client.get_locations = AsyncMock(side_effect=[
            httpx.ConnectError("refused"),
            locations_payload,
        ])
        catalog = LocationCatalog(client)
        asyncio.run(catalog.load())
        asyncio.run(catalog.load())

        assert client.get_locations.call_count == 1
        assert catalog.error == "No se pudieron cargar ubicaciones"
