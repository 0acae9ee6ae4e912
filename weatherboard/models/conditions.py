"""Weather condition categories derived from WMO weather codes."""

from dataclasses import dataclass
from enum import StrEnum


class WeatherCondition(StrEnum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    SHOWERS = "showers"
    THUNDER = "thunder"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ConditionInfo:
    icon: str  # Material icon name
    label: str


CONDITION_INFO: dict[WeatherCondition, ConditionInfo] = {
    WeatherCondition.CLEAR: ConditionInfo(icon="wb_sunny", label="Clear"),
    WeatherCondition.CLOUDY: ConditionInfo(icon="cloud", label="Cloudy"),
    WeatherCondition.DRIZZLE: ConditionInfo(icon="grain", label="Drizzle"),
    WeatherCondition.RAIN: ConditionInfo(icon="rainy", label="Rain"),
    WeatherCondition.SNOW: ConditionInfo(icon="ac_unit", label="Snow"),
    WeatherCondition.SHOWERS: ConditionInfo(icon="rainy", label="Showers"),
    WeatherCondition.THUNDER: ConditionInfo(icon="thunderstorm", label="Thunder"),
    WeatherCondition.UNKNOWN: ConditionInfo(icon="help_outline", label="Unknown"),
}
