"""Weather fetcher: failures surface as "no data" rather than errors."""

import logging
from datetime import date, timedelta

from weatherboard.config.defaults import DEFAULT_LOCATION
from weatherboard.config.schema import DashboardConfig, LocationConfig
from weatherboard.ingest.openmeteo_client import OpenMeteoClient
from weatherboard.models.common import ProviderResponse

logger = logging.getLogger(__name__)


class WeatherFetcher:
    def __init__(
        self,
        client: OpenMeteoClient,
        location: LocationConfig,
        forecast_days: int = 7,
        history_days: int = 30,
    ):
        self.client = client
        self.location = location
        self.forecast_days = forecast_days
        self.history_days = history_days

    def current(self) -> ProviderResponse:
        """Today's response: current block plus hourly arrays for the next day."""
        return self._safe(
            "current weather",
            self.client.get_forecast,
            self.location.latitude,
            self.location.longitude,
            self.location.timezone,
            2,
        )

    def forecast(self) -> ProviderResponse:
        return self._safe(
            "forecast",
            self.client.get_forecast,
            self.location.latitude,
            self.location.longitude,
            self.location.timezone,
            self.forecast_days,
        )

    def historical(self, today: date | None = None) -> ProviderResponse:
        """Archive for the ``history_days`` days ending yesterday."""
        today = today or date.today()
        end = today - timedelta(days=1)
        start = end - timedelta(days=self.history_days - 1)
        return self._safe(
            "historical weather",
            self.client.get_historical,
            self.location.latitude,
            self.location.longitude,
            start,
            end,
            self.location.timezone,
        )

    def air_quality(self) -> ProviderResponse:
        return self._safe(
            "air quality",
            self.client.get_air_quality,
            self.location.latitude,
            self.location.longitude,
            self.location.timezone,
        )

    def _safe(self, what: str, call, *args) -> ProviderResponse:
        try:
            data = call(*args)
        except Exception:
            logger.exception("Failed to fetch %s for %s", what, self.location.name)
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "Unexpected %s payload for %s: %s",
                what, self.location.name, type(data).__name__,
            )
            return {}
        return data


def build_fetcher(config: DashboardConfig) -> WeatherFetcher:
    """Wire a fetcher for the configured location and provider endpoints."""
    provider = config.provider
    client = OpenMeteoClient(
        forecast_url=provider.forecast_url,
        archive_url=provider.archive_url,
        air_quality_url=provider.air_quality_url,
        timeout=provider.timeout,
    )
    location = config.location or DEFAULT_LOCATION
    return WeatherFetcher(
        client,
        location,
        forecast_days=provider.forecast_days,
        history_days=provider.history_days,
    )
