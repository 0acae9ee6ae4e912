"""Output formatters for forecast windows."""

import json

from weatherboard.models.air_quality import AirQualitySummary
from weatherboard.models.forecast import (
    DailySample,
    ForecastWindow,
    HistoricalPoint,
    HourlySample,
)
from weatherboard.normalize.classifier import condition_info, describe
from weatherboard.reporting.charts import (
    clock_label,
    hour_label,
    short_date_label,
    weekday_label,
)


def hourly_to_dict(s: HourlySample) -> dict:
    info = condition_info(s.condition)
    return {
        "time": s.time.isoformat(),
        "label": hour_label(s.time),
        "temperature": s.temperature,
        "feels_like": s.feels_like,
        "humidity": s.humidity,
        "wind_speed": s.wind_speed,
        "precipitation_amount": s.precipitation_amount,
        "precipitation_probability": s.precipitation_probability,
        "condition": s.condition.value,
        "icon": info.icon,
        "weather_code": s.weather_code,
        "description": describe(s.weather_code),
    }


def daily_to_dict(s: DailySample) -> dict:
    info = condition_info(s.condition)
    return {
        "date": s.date.isoformat(),
        "weekday": weekday_label(s.date),
        "label": short_date_label(s.date),
        "min_temperature": s.min_temperature,
        "max_temperature": s.max_temperature,
        "mean_temperature": s.mean_temperature,
        "humidity": s.humidity,
        "wind_speed": s.wind_speed,
        "precipitation_amount": s.precipitation_amount,
        "precipitation_probability": s.precipitation_probability,
        "sunrise": s.sunrise,
        "sunset": s.sunset,
        "condition": s.condition.value,
        "icon": info.icon,
        "weather_code": s.weather_code,
        "description": describe(s.weather_code),
    }


def window_to_dict(w: ForecastWindow) -> dict:
    return {
        "hourly": [hourly_to_dict(s) for s in w.hourly],
        "daily": [daily_to_dict(s) for s in w.daily],
    }


def historical_to_list(points: tuple[HistoricalPoint, ...]) -> list[dict]:
    return [
        {"date": p.date, "temperature": p.temperature, "precipitation": p.precipitation}
        for p in points
    ]


def air_quality_to_dict(a: AirQualitySummary) -> dict:
    return {
        "european_aqi": a.european_aqi,
        "us_aqi": a.us_aqi,
        "pm2_5": a.pm2_5,
        "pm10": a.pm10,
        "ozone": a.ozone,
        "nitrogen_dioxide": a.nitrogen_dioxide,
        "level": a.level.value,
        "label": a.label,
    }


def format_window_json(w: ForecastWindow) -> str:
    """JSON window for programmatic consumption."""
    return json.dumps(window_to_dict(w), indent=2)


def format_window_text(w: ForecastWindow, detail_limit: int = 9) -> str:
    """Plain text summary: the next few hours, then every day."""
    lines = [f"=== Next hours ({len(w.hourly)} samples) ==="]
    if not w.hourly:
        lines.append("No hourly data available")
    for s in w.hourly[:detail_limit]:
        lines.append(
            f"{s.time.hour:02d}:00  {s.temperature}°  "
            f"{s.humidity}%  {s.wind_speed} km/h  "
            f"{condition_info(s.condition).label}"
        )

    lines.append(f"=== Daily ({len(w.daily)} days) ===")
    if not w.daily:
        lines.append("No forecast data available")
    for d in w.daily:
        lines.append(
            f"{weekday_label(d.date)} {short_date_label(d.date)}  "
            f"{d.min_temperature}° / {d.max_temperature}°  "
            f"{d.precipitation_probability}% | {d.precipitation_amount}mm  "
            f"{clock_label(d.sunrise)}-{clock_label(d.sunset)}  "
            f"{condition_info(d.condition).label}"
        )
    return "\n".join(lines)
