"""Air quality summary models."""

from dataclasses import dataclass
from enum import StrEnum


class AqiLevel(StrEnum):
    GOOD = "good"
    FAIR = "fair"
    MODERATE = "moderate"
    POOR = "poor"
    VERY_POOR = "very_poor"
    EXTREMELY_POOR = "extremely_poor"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class AirQualitySummary:
    european_aqi: float | None
    us_aqi: float | None
    pm2_5: float | None
    pm10: float | None
    ozone: float | None
    nitrogen_dioxide: float | None
    level: AqiLevel
    label: str
