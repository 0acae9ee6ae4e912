"""Weather dashboard API: FastAPI backend serving chart-ready series."""

import logging
from collections.abc import Callable
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weatherboard.config.defaults import DEFAULT_LOCATION
from weatherboard.config.loader import alias_table
from weatherboard.config.schema import DashboardConfig
from weatherboard.ingest.weather_fetcher import WeatherFetcher, build_fetcher
from weatherboard.models.common import local_now
from weatherboard.normalize.air_quality import summarize_air_quality
from weatherboard.normalize.historical import format_historical
from weatherboard.normalize.timestamps import to_location_time
from weatherboard.normalize.windower import build_forecast_window, window_daily
from weatherboard.reporting.charts import (
    daily_precipitation_chart,
    daily_temperature_chart,
    historical_chart,
    precipitation_chart,
    temperature_chart,
)
from weatherboard.reporting.formatters import (
    air_quality_to_dict,
    daily_to_dict,
    window_to_dict,
)

logger = logging.getLogger(__name__)


def create_app(
    config: DashboardConfig,
    fetcher: WeatherFetcher | None = None,
    clock: Callable[[], datetime] = local_now,
) -> FastAPI:
    """Build the API app. Fetch failures come back as empty series, never 5xx."""
    fetcher = fetcher or build_fetcher(config)
    aliases = alias_table(config)
    location_timezone = (config.location or DEFAULT_LOCATION).timezone

    app = FastAPI(title="Weather Dashboard", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/weather/current")
    def get_current():
        """Current conditions plus the next-hours window."""
        data = fetcher.current()
        now = to_location_time(clock(), data.get("timezone"))
        window = build_forecast_window(
            data, now, config.windows.hourly_limit, aliases
        )
        payload = window_to_dict(window)
        payload["current"] = data.get("current") or {}
        payload["charts"] = {
            "temperature": temperature_chart(window.hourly),
            "precipitation": precipitation_chart(window.hourly),
        }
        return payload

    @app.get("/api/weather/forecast")
    def get_forecast():
        """Daily forecast with temperature and precipitation chart series."""
        data = fetcher.forecast()
        daily = window_daily(data.get("daily"), aliases)
        logger.info("Serving %d forecast days", len(daily))
        return {
            "daily": [daily_to_dict(d) for d in daily],
            "charts": {
                "temperature": daily_temperature_chart(daily),
                "precipitation": daily_precipitation_chart(daily),
            },
        }

    @app.get("/api/weather/historical")
    def get_historical():
        today = to_location_time(clock(), location_timezone).date()
        data = fetcher.historical(today)
        return historical_chart(format_historical(data.get("daily"), aliases))

    @app.get("/api/weather/air-quality")
    def get_air_quality():
        return air_quality_to_dict(summarize_air_quality(fetcher.air_quality()))

    return app
