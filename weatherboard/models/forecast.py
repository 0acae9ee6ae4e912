"""Chart-ready forecast series models."""

from dataclasses import dataclass
from datetime import date, datetime

from weatherboard.models.conditions import WeatherCondition


@dataclass(frozen=True)
class HourlySample:
    time: datetime
    temperature: float = 0
    feels_like: float | None = None
    humidity: float = 0
    wind_speed: float = 0
    precipitation_amount: float = 0
    precipitation_probability: float = 0
    condition: WeatherCondition = WeatherCondition.UNKNOWN
    weather_code: int | None = None  # raw WMO code as resolved


@dataclass(frozen=True)
class DailySample:
    date: date
    min_temperature: float = 0
    max_temperature: float = 0
    mean_temperature: float = 0
    humidity: float = 0
    wind_speed: float = 0
    precipitation_amount: float = 0
    precipitation_probability: float = 0
    sunrise: str | None = None  # ISO-8601 local time
    sunset: str | None = None
    condition: WeatherCondition = WeatherCondition.UNKNOWN
    weather_code: int | None = None  # raw WMO code as resolved


@dataclass(frozen=True)
class ForecastWindow:
    hourly: tuple[HourlySample, ...] = ()
    daily: tuple[DailySample, ...] = ()


@dataclass(frozen=True)
class HistoricalPoint:
    date: str  # YYYY-MM-DD as sent by the provider
    temperature: float
    precipitation: float
