"""Tests for the dashboard API with a mocked fetcher."""

from datetime import UTC, date, datetime
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from weatherboard.config.schema import DashboardConfig, WindowConfig
from weatherboard.dashboard import create_app
from weatherboard.ingest.weather_fetcher import WeatherFetcher
from weatherboard.models.common import Quantity


def _clock() -> datetime:
    return datetime(2024, 1, 1, 5, 30)


@pytest.fixture
def fetcher(
    forecast_response: dict, archive_response: dict, air_quality_response: dict
) -> MagicMock:
    mock = MagicMock(spec=WeatherFetcher)
    mock.current.return_value = forecast_response
    mock.forecast.return_value = forecast_response
    mock.historical.return_value = archive_response
    mock.air_quality.return_value = air_quality_response
    return mock


@pytest.fixture
def client(default_config: DashboardConfig, fetcher: MagicMock) -> TestClient:
    return TestClient(create_app(default_config, fetcher=fetcher, clock=_clock))


class TestCurrentEndpoint:
    def test_hourly_window(self, client: TestClient):
        resp = client.get("/api/weather/current")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["hourly"]) == 24
        assert data["hourly"][0]["label"] == "6h"
        assert data["current"]["weather_code"] == 3
        assert data["charts"]["temperature"][0] == {
            "name": "6h", "temperature": 3.5, "feels_like": 1.0,
        }

    def test_configured_limit(self, default_config: DashboardConfig, fetcher: MagicMock):
        config = default_config.model_copy(update={"windows": WindowConfig(hourly_limit=6)})
        client = TestClient(create_app(config, fetcher=fetcher, clock=_clock))
        assert len(client.get("/api/weather/current").json()["hourly"]) == 6


class TestForecastEndpoint:
    def test_daily(self, client: TestClient):
        data = client.get("/api/weather/forecast").json()
        assert len(data["daily"]) == 7
        assert data["charts"]["temperature"][1] == {
            "name": "Tue", "min": 1.5, "avg": 4.0, "max": 6.5,
        }
        assert data["charts"]["precipitation"][3]["probability"] == 95


class TestHistoricalEndpoint:
    def test_series(self, client: TestClient, fetcher: MagicMock):
        data = client.get("/api/weather/historical").json()
        assert [p["temperature"] for p in data] == [1.0, 4.2, 0, 4.0]
        fetcher.historical.assert_called_once_with(_clock().date())

    def test_today_in_location_timezone(
        self, default_config: DashboardConfig, fetcher: MagicMock
    ):
        # 23:30 UTC on Jan 1 is already Jan 2 in Berlin
        def late_utc() -> datetime:
            return datetime(2024, 1, 1, 23, 30, tzinfo=UTC)

        client = TestClient(create_app(default_config, fetcher=fetcher, clock=late_utc))
        client.get("/api/weather/historical")
        fetcher.historical.assert_called_once_with(date(2024, 1, 2))

    def test_configured_aliases_match_forecast(
        self, default_config: DashboardConfig, fetcher: MagicMock
    ):
        config = default_config.model_copy(
            update={"extra_aliases": {Quantity.MIN_TEMPERATURE: ["tmin"]}}
        )
        response = {"daily": {"time": ["2024-01-01"], "tmin": [4.0]}}
        fetcher.forecast.return_value = response
        fetcher.historical.return_value = response
        client = TestClient(create_app(config, fetcher=fetcher, clock=_clock))

        forecast = client.get("/api/weather/forecast").json()
        historical = client.get("/api/weather/historical").json()
        assert forecast["daily"][0]["min_temperature"] == 4.0
        assert historical[0]["temperature"] == 4.0


class TestAirQualityEndpoint:
    def test_summary(self, client: TestClient):
        data = client.get("/api/weather/air-quality").json()
        assert data["european_aqi"] == 34
        assert data["level"] == "fair"


class TestNoData:
    def test_fetch_failures_render_empty(self, default_config: DashboardConfig):
        mock = MagicMock(spec=WeatherFetcher)
        mock.current.return_value = {}
        mock.forecast.return_value = {}
        mock.historical.return_value = {}
        mock.air_quality.return_value = {}
        client = TestClient(create_app(default_config, fetcher=mock, clock=_clock))

        assert client.get("/api/weather/current").json()["hourly"] == []
        assert client.get("/api/weather/forecast").json()["daily"] == []
        assert client.get("/api/weather/historical").json() == []
        assert client.get("/api/weather/air-quality").json()["level"] == "unknown"
