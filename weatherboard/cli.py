"""CLI entry point for the weather dashboard core."""

import argparse
import json
import logging

from weatherboard.config.loader import (
    alias_table,
    get_config_value,
    load_config,
    set_config_value,
)
from weatherboard.ingest.weather_fetcher import build_fetcher
from weatherboard.logging_setup import configure_logging
from weatherboard.models.common import local_now
from weatherboard.normalize.air_quality import summarize_air_quality
from weatherboard.normalize.historical import format_historical
from weatherboard.normalize.timestamps import parse_local_time, to_location_time
from weatherboard.normalize.windower import build_forecast_window
from weatherboard.reporting.formatters import (
    air_quality_to_dict,
    format_window_json,
    format_window_text,
    historical_to_list,
)

DEFAULT_CONFIG = "ops/configs/dashboard.yaml"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherboard",
        description="Weather dashboard series normalizer",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # window
    window_p = sub.add_parser("window", help="Hourly and daily windows from a response")
    window_p.add_argument("--input", required=True, help="Provider JSON file")
    window_p.add_argument("--now", help="Reference local time (ISO-8601)")
    window_p.add_argument("--limit", type=int, help="Max hourly samples")
    window_p.add_argument("--format", choices=["text", "json"], default="text")

    # historical / air-quality
    hist_p = sub.add_parser("historical", help="Historical chart series")
    hist_p.add_argument("--input", required=True, help="Archive JSON file")
    aq_p = sub.add_parser("air-quality", help="Air quality summary")
    aq_p.add_argument("--input", required=True, help="Air-quality JSON file")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch a raw provider response")
    fetch_p.add_argument(
        "kind", choices=["current", "forecast", "historical", "air-quality"]
    )

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)
    configure_logging(config.logging)

    if args.command == "window":
        return _cmd_window(config, args)
    elif args.command == "historical":
        return _cmd_historical(config, args)
    elif args.command == "air-quality":
        return _cmd_air_quality(args)
    elif args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _read_json(path: str) -> dict | None:
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read {path}: {e}")
        return None
    return data if isinstance(data, dict) else {}


def _cmd_window(config, args) -> int:
    data = _read_json(args.input)
    if data is None:
        return 1

    if args.now:
        now = parse_local_time(args.now)
        if now is None:
            print(f"Error: invalid --now timestamp: {args.now}")
            return 1
    else:
        now = to_location_time(local_now(), data.get("timezone"))

    limit = args.limit if args.limit is not None else config.windows.hourly_limit
    window = build_forecast_window(data, now, limit, alias_table(config))
    logger.info(
        "Built window: %d hourly, %d daily samples",
        len(window.hourly), len(window.daily),
    )
    if args.format == "json":
        print(format_window_json(window))
    else:
        print(format_window_text(window, config.windows.detail_limit))
    return 0


def _cmd_historical(config, args) -> int:
    data = _read_json(args.input)
    if data is None:
        return 1
    points = format_historical(data.get("daily"), alias_table(config))
    print(json.dumps(historical_to_list(points), indent=2))
    return 0


def _cmd_air_quality(args) -> int:
    data = _read_json(args.input)
    if data is None:
        return 1
    print(json.dumps(air_quality_to_dict(summarize_air_quality(data)), indent=2))
    return 0


def _cmd_fetch(config, args) -> int:
    fetcher = build_fetcher(config)
    if args.kind == "current":
        data = fetcher.current()
    elif args.kind == "forecast":
        data = fetcher.forecast()
    elif args.kind == "historical":
        data = fetcher.historical()
    else:
        data = fetcher.air_quality()
    print(json.dumps(data, indent=2))
    return 0 if data else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
