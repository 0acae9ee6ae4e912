"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from weatherboard.models.common import Quantity


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    timezone: str = "auto"


class WindowConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_limit: int = Field(default=24, ge=1, le=168)
    detail_limit: int = Field(default=9, ge=1, le=48)


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    archive_url: str = "https://archive-api.open-meteo.com/v1/archive"
    air_quality_url: str = (
        "https://air-quality-api.open-meteo.com/v1/air-quality"
    )
    timeout: float = Field(default=10.0, gt=0.0)
    forecast_days: int = Field(default=7, ge=1, le=16)
    history_days: int = Field(default=30, ge=1, le=92)


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: LogLevel = LogLevel.INFO
    log_dir: str = "logs"
    file_enabled: bool = True


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: LocationConfig | None = None
    windows: WindowConfig = WindowConfig()
    provider: ProviderConfig = ProviderConfig()
    logging: LoggingConfig = LoggingConfig()
    extra_aliases: dict[Quantity, list[str]] = {}
