"""
Command-line interface for weather-now.

The CLI is a display surface for ``WeatherScreen``: each subcommand fires one
screen event, waits for the lookup to settle and prints the resulting state.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from weather_now import __version__
from weather_now.config import get_settings
from weather_now.datasources.weatherapi import WeatherClient
from weather_now.renderers.card import build_weather_card_html
from weather_now.schemas import ScreenStatus, Units
from weather_now.screen import StaticLocationProvider, WeatherScreen

if TYPE_CHECKING:
    from concurrent.futures import Future

    from weather_now.schemas import ScreenState

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-now",
        description="Current weather conditions by place name or coordinates",
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

    # Options shared by the lookup commands
    display = argparse.ArgumentParser(add_help=False)
    units = display.add_mutually_exclusive_group()
    units.add_argument(
        "-f",
        "--fahrenheit",
        action="store_true",
        help="Show the temperature in °F (default: configured units)",
    )
    units.add_argument(
        "-c",
        "--celsius",
        action="store_true",
        help="Show the temperature in °C (default: configured units)",
    )
    display.add_argument(
        "--html",
        type=Path,
        default=None,
        metavar="PATH",
        help="Also write the weather card as an HTML fragment",
    )

    current_parser = subparsers.add_parser(
        "current", parents=[display], help="Look up a place by name"
    )
    current_parser.add_argument("query", nargs="+", help="Place name, e.g. 'Paris' or '48.85,2.35'")

    here_parser = subparsers.add_parser(
        "here", parents=[display], help="Look up the configured (or given) coordinates"
    )
    here_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    here_parser.add_argument("--lon", type=float, default=None, help="Longitude")

    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool) -> None:
    """Send log records to stderr; DEBUG when requested, INFO otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _units(args: argparse.Namespace) -> Units:
    if args.fahrenheit:
        return Units.FAHRENHEIT
    if args.celsius:
        return Units.CELSIUS
    return get_settings().default_units


def _show(screen: WeatherScreen, outcome: Future[ScreenState] | None, html: Path | None) -> int:
    """Wait for a lookup to settle, print the screen state, return the exit code."""
    state = outcome.result() if outcome is not None else screen.state

    if state.status is ScreenStatus.ERROR:
        print(f"Error: {state.error_message}", file=sys.stderr)
        return 1
    if state.status is not ScreenStatus.READY:
        print("Error: No location available", file=sys.stderr)
        return 1

    icon = state.icon.value if state.icon else "unknown"
    print(state.location_name)
    print(f"{state.temperature_text}  {state.condition_text} [{icon}]")

    if html is not None:
        html.write_text(build_weather_card_html(state), encoding="utf-8")
        print(f"Wrote {html}")
    return 0


def cmd_current(args: argparse.Namespace) -> int:
    """Handle the 'current' command: search by place name."""
    settings = get_settings()
    with WeatherClient(settings) as client:
        screen = WeatherScreen(client, units=_units(args))
        outcome = screen.search_submitted(" ".join(args.query))
        return _show(screen, outcome, args.html)


def cmd_here(args: argparse.Namespace) -> int:
    """Handle the 'here' command: look up a coordinate fix."""
    settings = get_settings()
    lat = args.lat if args.lat is not None else settings.lat
    lon = args.lon if args.lon is not None else settings.lon

    with WeatherClient(settings) as client:
        screen = WeatherScreen(
            client,
            location_provider=StaticLocationProvider(lat, lon),
            units=_units(args),
        )
        outcome = screen.location_requested()
        return _show(screen, outcome, args.html)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Endpoint: {settings.base_url}")
    print(f"API key: {'set' if settings.api_key else 'not set'}")
    print(f"Default location: {settings.lat},{settings.lon}")
    print(f"Default units: {settings.default_units.symbol}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "current": cmd_current,
        "here": cmd_here,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
