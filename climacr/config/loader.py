"""YAML config loader with environment override and dotted-key lookup."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from climacr.config.defaults import BACKEND_URL_ENV
from climacr.config.schema import DashboardConfig

logger = logging.getLogger(__name__)


def load_config(
    path: str | Path | None = None, env: Mapping[str, str] | None = None
) -> DashboardConfig:
    """Load and validate config from an optional YAML file.

    A non-empty CLIMACR_BACKEND_URL in the environment overrides
    backend.backend_url from the file.
    """
    if env is None:
        env = os.environ

    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    backend_url = env.get(BACKEND_URL_ENV, "").strip()
    if backend_url:
        logger.debug("Backend URL taken from %s", BACKEND_URL_ENV)
        raw.setdefault("backend", {})
        raw["backend"]["backend_url"] = backend_url

    return DashboardConfig(**raw)


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.timezone'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
