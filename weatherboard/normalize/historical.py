"""Historical chart series from an archive ``daily`` bundle."""

import logging
from typing import Any

from weatherboard.models.common import Quantity
from weatherboard.models.forecast import HistoricalPoint
from weatherboard.normalize.aliases import ALIASES, AliasTable
from weatherboard.normalize.resolver import resolve, series_length

logger = logging.getLogger(__name__)

# Lowest available reading wins: min, then mean, then max.
TEMPERATURE_FALLBACK = (
    Quantity.MIN_TEMPERATURE,
    Quantity.MEAN_TEMPERATURE,
    Quantity.MAX_TEMPERATURE,
)


def format_historical(
    daily: Any, aliases: AliasTable | None = None
) -> tuple[HistoricalPoint, ...]:
    """One point per archived day: a representative temperature and precipitation."""
    table = aliases if aliases is not None else ALIASES
    precipitation_table = _daily_sum_first(table)

    times = daily.get("time") if series_length(daily) else []
    points: list[HistoricalPoint] = []
    for i, raw in enumerate(times):
        if not isinstance(raw, str):
            logger.debug("Skipping non-string historical date %r at %d", raw, i)
            continue
        points.append(
            HistoricalPoint(
                date=raw,
                temperature=_historical_temperature(daily, i, table),
                precipitation=resolve(
                    Quantity.PRECIPITATION_AMOUNT, daily, i, 0, precipitation_table
                ),
            )
        )
    return tuple(points)


def _daily_sum_first(table: AliasTable) -> AliasTable:
    names = table.get(Quantity.PRECIPITATION_AMOUNT, ())
    ordered = ("precipitation_sum",) + tuple(
        n for n in names if n != "precipitation_sum"
    )
    return {**table, Quantity.PRECIPITATION_AMOUNT: ordered}


def _historical_temperature(daily: Any, i: int, table: AliasTable) -> float:
    for quantity in TEMPERATURE_FALLBACK:
        value = resolve(quantity, daily, i, None, table)
        if value is not None:
            return value
    return 0
