"""Process-wide logging: console plus one log file per day."""

import logging
from datetime import date
from pathlib import Path

from weatherboard.config.schema import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    config: LoggingConfig, today: date | None = None
) -> Path | None:
    """Install console and dated file handlers on the root logger.

    Replaces handlers from any earlier call. Returns the log file path, or
    None when file logging is disabled.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file: Path | None = None

    if config.file_enabled:
        today = today or date.today()
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{today.isoformat()}.log"
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=config.level.value,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    return log_file
