"""Pydantic v2 configuration schema with strict validation."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from climacr.config.defaults import DEFAULT_TIMEZONE, DEFAULT_USER_AGENT


class BackendConfig(BaseModel):
    model_config = {"extra": "forbid"}

    backend_url: str = ""  # empty = local same-origin backend
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("backend_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timezone: str = DEFAULT_TIMEZONE
    hourly_limit: int = Field(default=12, ge=1, le=48)
    daily_limit: int = Field(default=7, ge=1, le=16)

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v!r}") from e
        return v


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    backend: BackendConfig = BackendConfig()
    display: DisplayConfig = DisplayConfig()
