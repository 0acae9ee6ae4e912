"""Open-Meteo forecast, archive and air-quality API client."""

import logging
from datetime import date

import httpx

logger = logging.getLogger(__name__)

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"
AIR_QUALITY_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"
DEFAULT_USER_AGENT = "weatherboard/0.1.0"

HOURLY_FIELDS = (
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "wind_speed_10m",
    "precipitation",
    "precipitation_probability",
    "weather_code",
)
DAILY_FIELDS = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "precipitation_probability_max",
    "wind_speed_10m_max",
    "sunrise",
    "sunset",
)
ARCHIVE_DAILY_FIELDS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "temperature_2m_mean",
    "precipitation_sum",
)
AIR_QUALITY_FIELDS = (
    "european_aqi",
    "us_aqi",
    "pm2_5",
    "pm10",
    "ozone",
    "nitrogen_dioxide",
)


class OpenMeteoClient:
    """Thin Open-Meteo client. Non-2xx responses raise; nothing is retried."""

    def __init__(
        self,
        forecast_url: str = FORECAST_URL,
        archive_url: str = ARCHIVE_URL,
        air_quality_url: str = AIR_QUALITY_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.forecast_url = forecast_url
        self.archive_url = archive_url
        self.air_quality_url = air_quality_url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(
        self, latitude: float, longitude: float, timezone: str = "auto", days: int = 7
    ) -> dict:
        """Fetch current conditions plus hourly and daily forecast arrays."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "timezone": timezone,
            "forecast_days": days,
            "current": "temperature_2m,apparent_temperature,weather_code",
            "hourly": ",".join(HOURLY_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
        }
        return self._get(self.forecast_url, params)

    def get_historical(
        self,
        latitude: float,
        longitude: float,
        start: date,
        end: date,
        timezone: str = "auto",
    ) -> dict:
        """Fetch archived daily aggregates between two dates, inclusive."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "timezone": timezone,
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "daily": ",".join(ARCHIVE_DAILY_FIELDS),
        }
        return self._get(self.archive_url, params)

    def get_air_quality(
        self, latitude: float, longitude: float, timezone: str = "auto"
    ) -> dict:
        """Fetch current air-quality readings."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "timezone": timezone,
            "current": ",".join(AIR_QUALITY_FIELDS),
        }
        return self._get(self.air_quality_url, params)

    def _get(self, url: str, params: dict) -> dict:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        logger.debug("GET %s %s", url, params)
        resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()
