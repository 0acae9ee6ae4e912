"""Common types and helpers shared across models."""

from datetime import datetime
from enum import StrEnum
from typing import Any, TypeAlias

# Parsed provider JSON: {"hourly": {...}, "daily": {...}, "current": {...}}
ProviderResponse: TypeAlias = dict[str, Any]


class Quantity(StrEnum):
    TEMPERATURE = "temperature"
    FEELS_LIKE = "feels_like"
    HUMIDITY = "humidity"
    WIND_SPEED = "wind_speed"
    PRECIPITATION_AMOUNT = "precipitation_amount"
    PRECIPITATION_PROBABILITY = "precipitation_probability"
    WEATHER_CODE = "weather_code"
    MIN_TEMPERATURE = "min_temperature"
    MAX_TEMPERATURE = "max_temperature"
    MEAN_TEMPERATURE = "mean_temperature"
    SUNRISE = "sunrise"
    SUNSET = "sunset"


def local_now() -> datetime:
    return datetime.now().astimezone()
