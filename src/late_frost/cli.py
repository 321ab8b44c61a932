"""
Command-line interface for late-frost.

This module provides the ``late-frost`` entry point.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd
import requests
from pydantic import ValidationError

from late_frost import __version__
from late_frost.adapters import day_table_from_frame, to_day_table
from late_frost.config import get_settings
from late_frost.datasources.power import DEFAULT_PARS
from late_frost.events import events_to_dicts, late_frost_events, to_records
from late_frost.exceptions import LateFrostError
from late_frost.gdd import EQUATIONS
from late_frost.schemas import FrostOptions

logger = logging.getLogger(__name__)


def _add_frost_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--base", type=float, default=None, help="GDD base temperature")
    parser.add_argument("--tfrost", type=float, default=None, help="Freezing threshold")
    parser.add_argument(
        "--equation",
        choices=EQUATIONS,
        default=None,
        help="GDD equation variant",
    )
    parser.add_argument("--json", action="store_true", help="Print events as JSON")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="late-frost",
        description="Late spring frost events from daily temperature series",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info and defaults")

    csv_parser = subparsers.add_parser("csv", help="Events from a CSV of daily temperatures")
    csv_parser.add_argument("path", type=Path, help="CSV with tmax, tmin and optional date, id")
    _add_frost_options(csv_parser)

    fetch_parser = subparsers.add_parser("fetch", help="Events for a location from NASA POWER")
    fetch_parser.add_argument("--lon", type=float, required=True, help="Longitude")
    fetch_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    fetch_parser.add_argument("--start", required=True, help="First day (YYYY-MM-DD)")
    window = fetch_parser.add_mutually_exclusive_group(required=True)
    window.add_argument("--end", default=None, help="Last day (YYYY-MM-DD)")
    window.add_argument("--span", type=int, default=None, help="Days after --start")
    fetch_parser.add_argument(
        "--pars",
        nargs=2,
        default=list(DEFAULT_PARS),
        metavar=("TMAX", "TMIN"),
        help="POWER variables for tmax and tmin (default: T2M_MAX T2M_MIN)",
    )
    _add_frost_options(fetch_parser)

    return parser


def _options(args: argparse.Namespace) -> FrostOptions:
    overrides = {"base": args.base, "tfrost": args.tfrost, "equation": args.equation}
    return FrostOptions(**{k: v for k, v in overrides.items() if v is not None})


def _print_report(report: pd.DataFrame, as_json: bool) -> None:
    if as_json:
        print(json.dumps(events_to_dicts(to_records(report)), indent=2))
    elif report.empty:
        print("No days, no events.")
    else:
        print(report.to_string())


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Defaults: base={settings.base} tfrost={settings.tfrost} equation={settings.equation}")
    return 0


def cmd_csv(args: argparse.Namespace) -> int:
    """Handle the 'csv' command: events for the series in a CSV file."""
    if not args.path.exists():
        print(f"Error: no such file: {args.path}", file=sys.stderr)
        return 1

    table = day_table_from_frame(pd.read_csv(args.path))
    report = late_frost_events(table, _options(args))
    _print_report(report, args.json)
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command: fetch one location and compute events."""
    coords = pd.DataFrame({"lon": [args.lon], "lat": [args.lat]})
    logger.info("Fetching (%s, %s) from %s", args.lon, args.lat, args.start)
    table = to_day_table(
        coords,
        day_one=args.start,
        last_day=args.end,
        span=args.span,
        pars=tuple(args.pars),
    )
    report = late_frost_events(table, _options(args))
    _print_report(report, args.json)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "csv": cmd_csv,
        "fetch": cmd_fetch,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        settings = get_settings()
        level = logging.DEBUG if args.debug or settings.debug else settings.log_level
        logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
        return handler(args)
    except (LateFrostError, ValidationError, ValueError, requests.RequestException) as err:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
