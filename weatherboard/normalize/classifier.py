"""WMO weather code classification."""

import math
from typing import Any

from weatherboard.models.conditions import (
    CONDITION_INFO,
    ConditionInfo,
    WeatherCondition,
)

# Known discrete WMO codes published by Open-Meteo
EXACT_CODES: dict[int, WeatherCondition] = {
    0: WeatherCondition.CLEAR,
    1: WeatherCondition.CLEAR,
    2: WeatherCondition.CLEAR,
    3: WeatherCondition.CLEAR,
    45: WeatherCondition.CLOUDY,
    48: WeatherCondition.CLOUDY,
    51: WeatherCondition.DRIZZLE,
    53: WeatherCondition.DRIZZLE,
    55: WeatherCondition.DRIZZLE,
    61: WeatherCondition.RAIN,
    63: WeatherCondition.RAIN,
    65: WeatherCondition.RAIN,
    71: WeatherCondition.SNOW,
    73: WeatherCondition.SNOW,
    75: WeatherCondition.SNOW,
    77: WeatherCondition.SNOW,
    80: WeatherCondition.SHOWERS,
    81: WeatherCondition.SHOWERS,
    82: WeatherCondition.SHOWERS,
    85: WeatherCondition.SNOW,
    86: WeatherCondition.SNOW,
    95: WeatherCondition.THUNDER,
    96: WeatherCondition.THUNDER,
    99: WeatherCondition.THUNDER,
}

# Inclusive upper bounds, checked in order. Anything above the last bound
# and within the WMO range is a thunderstorm.
RANGE_BOUNDS: list[tuple[int, WeatherCondition]] = [
    (3, WeatherCondition.CLEAR),
    (49, WeatherCondition.CLOUDY),
    (59, WeatherCondition.DRIZZLE),
    (69, WeatherCondition.RAIN),
    (79, WeatherCondition.SNOW),
    (82, WeatherCondition.SHOWERS),
    (86, WeatherCondition.SNOW),
]

WMO_MIN_CODE = 0
WMO_MAX_CODE = 99

DESCRIPTIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def classify(code: Any) -> WeatherCondition:
    """Map a WMO weather code to a condition category.

    Known codes use the exact table; other codes in 0..99 fall back to the
    range table. Anything else, including None, is UNKNOWN.
    """
    normalized = _normalize_code(code)
    if normalized is None:
        return WeatherCondition.UNKNOWN

    exact = EXACT_CODES.get(normalized)
    if exact is not None:
        return exact

    if not WMO_MIN_CODE <= normalized <= WMO_MAX_CODE:
        return WeatherCondition.UNKNOWN

    for upper, condition in RANGE_BOUNDS:
        if normalized <= upper:
            return condition
    return WeatherCondition.THUNDER


def condition_info(condition: WeatherCondition) -> ConditionInfo:
    return CONDITION_INFO[condition]


def describe(code: Any) -> str:
    """Detailed WMO description for known codes, category label otherwise."""
    normalized = _normalize_code(code)
    if normalized is not None and normalized in DESCRIPTIONS:
        return DESCRIPTIONS[normalized]
    return condition_info(classify(code)).label


def _normalize_code(code: Any) -> int | None:
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code
    if isinstance(code, float) and math.isfinite(code) and code.is_integer():
        return int(code)
    return None
