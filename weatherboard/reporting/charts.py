"""Chart series and display labels for the dashboard pages."""

from datetime import date, datetime

from weatherboard.models.forecast import DailySample, HistoricalPoint, HourlySample
from weatherboard.normalize.timestamps import parse_local_time

PLACEHOLDER = "–"


def hour_label(ts: datetime) -> str:
    return f"{ts.hour}h"


def clock_label(iso: str | None) -> str:
    """Wall-clock HH:MM of an ISO timestamp, or the placeholder dash."""
    parsed = parse_local_time(iso)
    if parsed is None:
        return PLACEHOLDER
    return parsed.strftime("%H:%M")


def weekday_label(day: date) -> str:
    return day.strftime("%a")


def short_date_label(day: date) -> str:
    return f"{day.strftime('%b')} {day.day}"


def temperature_chart(hourly: tuple[HourlySample, ...]) -> list[dict]:
    return [
        {
            "name": hour_label(s.time),
            "temperature": s.temperature,
            "feels_like": s.feels_like,
        }
        for s in hourly
    ]


def precipitation_chart(hourly: tuple[HourlySample, ...]) -> list[dict]:
    return [
        {
            "name": hour_label(s.time),
            "probability": s.precipitation_probability,
            "amount": s.precipitation_amount,
        }
        for s in hourly
    ]


def daily_temperature_chart(daily: tuple[DailySample, ...]) -> list[dict]:
    return [
        {
            "name": weekday_label(s.date),
            "min": s.min_temperature,
            "avg": s.mean_temperature,
            "max": s.max_temperature,
        }
        for s in daily
    ]


def daily_precipitation_chart(daily: tuple[DailySample, ...]) -> list[dict]:
    return [
        {
            "name": weekday_label(s.date),
            "amount": s.precipitation_amount,
            "probability": s.precipitation_probability,
        }
        for s in daily
    ]


def historical_chart(points: tuple[HistoricalPoint, ...]) -> list[dict]:
    return [
        {
            "name": p.date,
            "temperature": p.temperature,
            "precipitation": p.precipitation,
        }
        for p in points
    ]
