"""Tests for chart series and display labels."""

from datetime import date, datetime

from weatherboard.models.forecast import DailySample, HistoricalPoint, HourlySample
from weatherboard.reporting.charts import (
    clock_label,
    daily_precipitation_chart,
    daily_temperature_chart,
    historical_chart,
    hour_label,
    precipitation_chart,
    short_date_label,
    temperature_chart,
    weekday_label,
)


class TestLabels:
    def test_hour_label(self):
        assert hour_label(datetime(2024, 1, 1, 6)) == "6h"
        assert hour_label(datetime(2024, 1, 1, 0)) == "0h"

    def test_clock_label(self):
        assert clock_label("2024-01-01T08:17") == "08:17"
        assert clock_label(None) == "–"
        assert clock_label("sometime") == "–"

    def test_date_labels(self):
        assert weekday_label(date(2024, 1, 1)) == "Mon"
        assert short_date_label(date(2024, 1, 7)) == "Jan 7"


class TestHourlyCharts:
    def test_temperature(self):
        hourly = (HourlySample(time=datetime(2024, 1, 1, 6), temperature=3.5),)
        assert temperature_chart(hourly) == [
            {"name": "6h", "temperature": 3.5, "feels_like": None}
        ]

    def test_precipitation(self):
        hourly = (
            HourlySample(
                time=datetime(2024, 1, 1, 7),
                precipitation_amount=0.4,
                precipitation_probability=55,
            ),
        )
        assert precipitation_chart(hourly) == [
            {"name": "7h", "probability": 55, "amount": 0.4}
        ]


class TestDailyCharts:
    def test_temperature(self):
        daily = (
            DailySample(
                date=date(2024, 1, 2),
                min_temperature=10,
                max_temperature=20,
                mean_temperature=15,
            ),
        )
        assert daily_temperature_chart(daily) == [
            {"name": "Tue", "min": 10, "avg": 15, "max": 20}
        ]

    def test_precipitation(self):
        daily = (
            DailySample(
                date=date(2024, 1, 3),
                precipitation_amount=3.1,
                precipitation_probability=70,
            ),
        )
        assert daily_precipitation_chart(daily) == [
            {"name": "Wed", "amount": 3.1, "probability": 70}
        ]

    def test_empty(self):
        assert daily_temperature_chart(()) == []


class TestHistoricalChart:
    def test_points(self):
        points = (HistoricalPoint(date="2023-12-31", temperature=4.0, precipitation=0),)
        assert historical_chart(points) == [
            {"name": "2023-12-31", "temperature": 4.0, "precipitation": 0}
        ]
