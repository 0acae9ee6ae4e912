"""Temporal windowing of aligned provider arrays into chart-ready samples."""

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from weatherboard.models.common import ProviderResponse, Quantity
from weatherboard.models.forecast import DailySample, ForecastWindow, HourlySample
from weatherboard.normalize.aliases import AliasTable
from weatherboard.normalize.classifier import classify
from weatherboard.normalize.resolver import resolve, series_length
from weatherboard.normalize.timestamps import (
    is_after_current_hour,
    parse_local_date,
    parse_local_time,
)

logger = logging.getLogger(__name__)

DEFAULT_HOURLY_LIMIT = 24


def window_hourly(
    hourly: Any,
    now: datetime,
    limit: int = DEFAULT_HOURLY_LIMIT,
    aliases: AliasTable | None = None,
) -> tuple[HourlySample, ...]:
    """Select up to ``limit`` hourly samples that start after the current hour.

    Args:
        hourly: The ``hourly`` section of a provider response. May be None.
        now: Reference instant in the location's local time.
        limit: Maximum number of samples to return.
        aliases: Optional alias table overriding the built-in one.

    Returns:
        Samples in input order. Empty when ``time`` is missing or empty.
    """
    if limit <= 0:
        return ()

    times = hourly.get("time") if series_length(hourly) else []
    samples: list[HourlySample] = []
    for i, raw in enumerate(times):
        ts = parse_local_time(raw)
        if ts is None:
            logger.debug("Skipping unparseable hourly timestamp %r at %d", raw, i)
            continue
        if not is_after_current_hour(ts, now):
            continue

        samples.append(_hourly_sample(hourly, i, ts, aliases))
        if len(samples) >= limit:
            break

    return tuple(samples)


def window_daily(
    daily: Any, aliases: AliasTable | None = None
) -> tuple[DailySample, ...]:
    """Build one sample per day present in ``daily["time"]``."""
    times = daily.get("time") if series_length(daily) else []
    samples: list[DailySample] = []
    for i, raw in enumerate(times):
        day = parse_local_date(raw)
        if day is None:
            logger.debug("Skipping unparseable daily date %r at %d", raw, i)
            continue
        samples.append(_daily_sample(daily, i, day, aliases))
    return tuple(samples)


def build_forecast_window(
    response: ProviderResponse | None,
    now: datetime,
    hourly_limit: int = DEFAULT_HOURLY_LIMIT,
    aliases: AliasTable | None = None,
) -> ForecastWindow:
    """Compute both windows from a single provider response."""
    response = response if isinstance(response, Mapping) else {}
    return ForecastWindow(
        hourly=window_hourly(response.get("hourly"), now, hourly_limit, aliases),
        daily=window_daily(response.get("daily"), aliases),
    )


def mean_temperature(low: float | None, high: float | None) -> float:
    if low is not None and high is not None:
        return (low + high) / 2
    if low is not None:
        return low
    if high is not None:
        return high
    return 0


def _hourly_sample(
    hourly: Any, i: int, ts: datetime, aliases: AliasTable | None
) -> HourlySample:
    code = resolve(Quantity.WEATHER_CODE, hourly, i, None, aliases)
    return HourlySample(
        time=ts,
        temperature=resolve(Quantity.TEMPERATURE, hourly, i, 0, aliases),
        feels_like=resolve(Quantity.FEELS_LIKE, hourly, i, None, aliases),
        humidity=resolve(Quantity.HUMIDITY, hourly, i, 0, aliases),
        wind_speed=resolve(Quantity.WIND_SPEED, hourly, i, 0, aliases),
        precipitation_amount=resolve(
            Quantity.PRECIPITATION_AMOUNT, hourly, i, 0, aliases
        ),
        precipitation_probability=resolve(
            Quantity.PRECIPITATION_PROBABILITY, hourly, i, 0, aliases
        ),
        condition=classify(code),
        weather_code=code,
    )


def _daily_sample(
    daily: Any, i: int, day: date, aliases: AliasTable | None
) -> DailySample:
    low = resolve(Quantity.MIN_TEMPERATURE, daily, i, None, aliases)
    high = resolve(Quantity.MAX_TEMPERATURE, daily, i, None, aliases)
    code = resolve(Quantity.WEATHER_CODE, daily, i, None, aliases)
    return DailySample(
        date=day,
        min_temperature=low if low is not None else 0,
        max_temperature=high if high is not None else 0,
        mean_temperature=mean_temperature(low, high),
        humidity=resolve(Quantity.HUMIDITY, daily, i, 0, aliases),
        wind_speed=resolve(Quantity.WIND_SPEED, daily, i, 0, aliases),
        precipitation_amount=resolve(
            Quantity.PRECIPITATION_AMOUNT, daily, i, 0, aliases
        ),
        precipitation_probability=resolve(
            Quantity.PRECIPITATION_PROBABILITY, daily, i, 0, aliases
        ),
        sunrise=resolve(Quantity.SUNRISE, daily, i, None, aliases),
        sunset=resolve(Quantity.SUNSET, daily, i, None, aliases),
        condition=classify(code),
        weather_code=code,
    )
