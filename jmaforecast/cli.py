"""CLI entry point for the JMA forecast viewer."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from jmaforecast.config.loader import load_config
from jmaforecast.config.schema import AppConfig, OutputFormat
from jmaforecast.ingest.jma_client import JmaClient
from jmaforecast.ingest.region_directory import RegionDirectory
from jmaforecast.pipeline.forecast_pipeline import ForecastPipeline
from jmaforecast.reporting.presenter import ForecastPresenter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="jmaforecast",
        description="Print the JMA weather forecast for a Japanese prefecture",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")

    sub = parser.add_subparsers(dest="command")

    # forecast / ask
    forecast_p = sub.add_parser(
        "forecast", help="Forecast for the configured region"
    )
    ask_p = sub.add_parser("ask", help="Read a region code from stdin")
    for p in (forecast_p, ask_p):
        p.add_argument(
            "--format",
            choices=[f.value for f in OutputFormat],
            default=None,
            help="Output format (default from config)",
        )

    # regions
    sub.add_parser("regions", help="List known region codes")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"config error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "ask":
        return _cmd_ask(config, args)
    elif args.command == "regions":
        return _cmd_regions()
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _build_pipeline(config: AppConfig, args) -> ForecastPipeline:
    client = JmaClient(
        base_url=config.api.base_url,
        forecast_path=config.api.forecast_path,
        user_agent=config.api.user_agent,
        timeout=config.api.timeout_seconds,
    )
    output_format = (
        OutputFormat(args.format) if args.format else config.forecast.output_format
    )
    presenter = ForecastPresenter(
        output_format=output_format,
        date_format=config.forecast.date_format,
    )
    return ForecastPipeline(client, presenter, RegionDirectory())


def _cmd_forecast(config: AppConfig, args) -> int:
    pipeline = _build_pipeline(config, args)
    outcome = pipeline.run(config.forecast.default_region_code)
    return 0 if outcome.ok else 1


def _cmd_ask(config: AppConfig, args) -> int:
    pipeline = _build_pipeline(config, args)
    if sys.stdin.isatty():
        print("Region code: ", end="", file=sys.stderr, flush=True)
    outcome = pipeline.run_interactive(sys.stdin)
    return 0 if outcome.ok else 1


def _cmd_regions() -> int:
    for code, name in RegionDirectory().items():
        print(f"{code} {name}")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
