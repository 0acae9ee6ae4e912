"""Default location used when the config file names none."""

from weatherboard.config.schema import LocationConfig

DEFAULT_LOCATION = LocationConfig(
    name="Berlin",
    latitude=52.52,
    longitude=13.41,
    timezone="Europe/Berlin",
)
