"""CLI: look up current weather and a daily forecast by city, coordinates or suggestion."""

from __future__ import annotations

import argparse
import sys

from rich.console import Console

from .config import load_settings
from .controller import WidgetController
from .exceptions import ConfigError, GeolocationError, WeatherProviderError
from .log_setup import setup_logger
from .service import WeatherQueryService
from .state import CityInputChanged, WidgetState
from .ui.render import render_notice, render_report, render_suggestions
from .weather.openweather import OpenWeatherProvider


def parse_args() -> argparse.Namespace:
    """Parse weather lookup CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Show current weather and a 5-day forecast from OpenWeather."
    )
    parser.add_argument("city", nargs="?", default=None, help="City name to look up.")
    parser.add_argument("--lat", type=float, default=None, help="Latitude of current location.")
    parser.add_argument("--lon", type=float, default=None, help="Longitude of current location.")
    parser.add_argument(
        "--suggest",
        type=str,
        default=None,
        help="Free-text place query; prints matching suggestions.",
    )
    parser.add_argument(
        "--pick",
        type=int,
        default=None,
        help="Suggestion number to look up (0 = current location via --lat/--lon).",
    )
    return parser.parse_args()


def _validate_cli_input(args: argparse.Namespace) -> None:
    has_lat = args.lat is not None
    has_lon = args.lon is not None
    if has_lat != has_lon:
        raise WeatherProviderError("--lat and --lon must be given together.")
    if args.pick is not None and args.suggest is None:
        raise WeatherProviderError("--pick requires --suggest.")
    if args.pick is not None and args.pick < 0:
        raise WeatherProviderError("--pick must be >= 0.")
    if args.city is not None and (args.suggest is not None or has_lat):
        raise WeatherProviderError("Use either CITY, --suggest, or --lat/--lon, not several.")
    if args.suggest is not None and has_lat and args.pick != 0:
        raise WeatherProviderError("--lat/--lon with --suggest is only used with --pick 0.")


def _current_location(args: argparse.Namespace) -> tuple[float, float]:
    if args.lat is None or args.lon is None:
        raise GeolocationError("no coordinates supplied (pass --lat and --lon)")
    return args.lat, args.lon


def _run(controller: WidgetController, args: argparse.Namespace) -> WidgetState:
    if args.suggest is not None:
        state = controller.type_text(args.suggest)
        if args.pick is None:
            return state
        if args.pick == 0:
            try:
                lat, lon = _current_location(args)
            except GeolocationError as exc:
                controller.location_failed(str(exc))
                raise
            return controller.use_location(lat, lon)
        if args.pick > len(state.suggestions):
            raise WeatherProviderError(
                f"--pick {args.pick} is out of range; {len(state.suggestions)} suggestion(s)."
            )
        return controller.select(state.suggestions[args.pick - 1])

    if args.lat is not None and args.lon is not None:
        return controller.use_location(args.lat, args.lon)

    controller.dispatch(CityInputChanged(args.city or ""))
    return controller.submit()


def main() -> int:
    """Run one weather lookup and print the result."""
    args = parse_args()
    logger = setup_logger()
    console = Console()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2
    logger.setLevel(settings.log_level)
    logger.debug("Loaded settings: %s", settings.safe_summary())

    try:
        _validate_cli_input(args)
        with OpenWeatherProvider(settings=settings, logger=logger) as provider:
            service = WeatherQueryService(
                provider,
                logger,
                suggestion_limit=settings.suggestion_limit,
            )
            controller = WidgetController(service, logger)
            state = _run(controller, args)
    except WeatherProviderError as exc:
        logger.error("Weather lookup failure: %s", exc)
        return 4
    except GeolocationError:
        return 4
    except Exception as exc:  # pragma: no cover - defensive catch for CLI runtime
        logger.exception("Unexpected weather lookup failure: %s", exc)
        return 99

    if state.notice:
        console.print(render_notice(state.notice))
        return 4

    if args.suggest is not None and args.pick is None:
        if not state.suggestions:
            console.print("No matching places found.")
        else:
            console.print(render_suggestions(state))
        return 0

    if state.current is None:
        console.print("Nothing to look up.")
        return 0

    console.print(render_report(state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
