"""Air quality summary from an Open-Meteo air-quality response."""

import math
from collections.abc import Mapping
from typing import Any

from weatherboard.models.air_quality import AirQualitySummary, AqiLevel

POLLUTANT_ALIASES: dict[str, tuple[str, ...]] = {
    "european_aqi": ("european_aqi", "aqi"),
    "us_aqi": ("us_aqi",),
    "pm2_5": ("pm2_5", "pm25"),
    "pm10": ("pm10",),
    "ozone": ("ozone", "o3"),
    "nitrogen_dioxide": ("nitrogen_dioxide", "no2"),
}

# European AQI bands, inclusive upper bounds
AQI_BANDS: list[tuple[float, AqiLevel]] = [
    (20, AqiLevel.GOOD),
    (40, AqiLevel.FAIR),
    (60, AqiLevel.MODERATE),
    (80, AqiLevel.POOR),
    (100, AqiLevel.VERY_POOR),
]

AQI_LABELS: dict[AqiLevel, str] = {
    AqiLevel.GOOD: "Good",
    AqiLevel.FAIR: "Fair",
    AqiLevel.MODERATE: "Moderate",
    AqiLevel.POOR: "Poor",
    AqiLevel.VERY_POOR: "Very poor",
    AqiLevel.EXTREMELY_POOR: "Extremely poor",
    AqiLevel.UNKNOWN: "Unknown",
}


def summarize_air_quality(response: Any) -> AirQualitySummary:
    """Resolve current pollutant readings and the European AQI level."""
    current = response.get("current") if isinstance(response, Mapping) else None
    if not isinstance(current, Mapping):
        current = {}

    values = {
        name: _first_number(current, aliases)
        for name, aliases in POLLUTANT_ALIASES.items()
    }
    level = aqi_level(values["european_aqi"])
    return AirQualitySummary(**values, level=level, label=AQI_LABELS[level])


def aqi_level(european_aqi: float | None) -> AqiLevel:
    if european_aqi is None or european_aqi < 0:
        return AqiLevel.UNKNOWN
    for upper, level in AQI_BANDS:
        if european_aqi <= upper:
            return level
    return AqiLevel.EXTREMELY_POOR


def _first_number(current: Mapping, aliases: tuple[str, ...]) -> float | None:
    for alias in aliases:
        value = current.get(alias)
        if (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and not math.isnan(value)
        ):
            return value
    return None
