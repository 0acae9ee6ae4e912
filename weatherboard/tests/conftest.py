"""Shared test fixtures."""

import json
import logging
from pathlib import Path

import pytest
import yaml

from weatherboard.config.defaults import DEFAULT_LOCATION
from weatherboard.config.schema import DashboardConfig, LoggingConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def default_config(tmp_path: Path) -> DashboardConfig:
    """Return default DashboardConfig with file logging pointed at tmp_path."""
    return DashboardConfig(
        location=DEFAULT_LOCATION,
        logging=LoggingConfig(log_dir=str(tmp_path / "logs")),
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "windows": {"hourly_limit": 12},
        "logging": {"file_enabled": False},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_response() -> dict:
    return load_fixture("openmeteo_forecast.json")


@pytest.fixture
def archive_response() -> dict:
    return load_fixture("openmeteo_archive.json")


@pytest.fixture
def air_quality_response() -> dict:
    return load_fixture("openmeteo_air_quality.json")


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handlers installed by configure_logging during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
