"""Shared test fixtures."""

import json
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
import yaml

from climacr.config.schema import DashboardConfig

BACKEND = "https://test-backend.example.com"
CR_TZ = ZoneInfo("America/Costa_Rica")


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def locations_payload(fixtures_dir: Path) -> list:
    with open(fixtures_dir / "locations.json") as f:
        return json.load(f)


@pytest.fixture
def weather_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "weather_sanjose.json") as f:
        return json.load(f)


@pytest.fixture
def config() -> DashboardConfig:
    return DashboardConfig(backend={"backend_url": BACKEND})


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "backend": {"backend_url": BACKEND, "timeout_seconds": 5.0},
        "display": {"hourly_limit": 12},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def morning() -> datetime:
    """09:30 local on the fixture day."""
    return datetime(2026, 2, 10, 9, 30, tzinfo=CR_TZ)
