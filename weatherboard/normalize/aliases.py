"""Provider field aliases for each logical quantity, highest priority first."""

from collections.abc import Mapping, Sequence

from weatherboard.models.common import Quantity

AliasTable = Mapping[Quantity, tuple[str, ...]]

ALIASES: dict[Quantity, tuple[str, ...]] = {
    Quantity.TEMPERATURE: ("temperature_2m", "temperature"),
    Quantity.FEELS_LIKE: ("apparent_temperature", "apparentTemperature"),
    Quantity.HUMIDITY: (
        "relative_humidity_2m", "humidity", "relative_humidity_2m_mean",
    ),
    Quantity.WIND_SPEED: ("wind_speed_10m", "wind_speed", "wind_speed_10m_max"),
    Quantity.PRECIPITATION_AMOUNT: ("precipitation", "precipitation_sum"),
    Quantity.PRECIPITATION_PROBABILITY: (
        "precipitation_probability", "precipitation_probability_max",
    ),
    Quantity.WEATHER_CODE: ("weather_code", "weathercode"),
    Quantity.MIN_TEMPERATURE: ("temperature_2m_min", "temperature_min"),
    Quantity.MAX_TEMPERATURE: ("temperature_2m_max", "temperature_max"),
    Quantity.MEAN_TEMPERATURE: ("temperature_2m_mean", "temperature_mean"),
    Quantity.SUNRISE: ("sunrise",),
    Quantity.SUNSET: ("sunset",),
}

# Quantities whose values are ISO strings rather than numbers
TEXT_QUANTITIES = frozenset({Quantity.SUNRISE, Quantity.SUNSET})


def extend_aliases(
    extra: Mapping[Quantity, Sequence[str]], base: AliasTable = ALIASES
) -> dict[Quantity, tuple[str, ...]]:
    """Return a new alias table with extra aliases appended after the built-in ones.

    Duplicates are dropped so that priority order stays stable.
    """
    merged = {q: tuple(names) for q, names in base.items()}
    for quantity, names in extra.items():
        current = merged.get(quantity, ())
        merged[quantity] = current + tuple(n for n in names if n not in current)
    return merged
