"""CLI entry point for shadow readings.

    uv run shadowcalc --height 180 --unit cm --city "New York" --date 2024-06-21 --time 12:00
"""

import argparse
import sys
from datetime import date
from pathlib import Path

import structlog
from dotenv import load_dotenv

from shadowsoul.compute import InputValidationError, run
from shadowsoul.logging_config import setup_logging
from shadowsoul.models import DIRECTIONS, FOOTWEAR, HEIGHT_UNITS, QueryInput
from shadowsoul.renderers.static import save_static_chart
from shadowsoul.weather import GeocodingError, geocode_city

log = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shadowcalc", description="Calculate your shadow and what it reveals."
    )
    parser.add_argument("--height", type=float, default=6.0)
    parser.add_argument("--unit", choices=HEIGHT_UNITS, default="ft")
    parser.add_argument("--lat", type=float, default=40.7128)
    parser.add_argument("--lon", type=float, default=-74.0060)
    parser.add_argument(
        "--city", help="Resolve latitude/longitude from a city name (first match)"
    )
    parser.add_argument("--date", default=date.today().isoformat(), help="YYYY-MM-DD")
    parser.add_argument("--time", default="12:00", help="HH:MM local clock time")
    parser.add_argument("--direction", choices=DIRECTIONS, default="North")
    parser.add_argument("--footwear", choices=FOOTWEAR, default="Nike")
    parser.add_argument("--png", type=Path, help="Also save the shadow figure here")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    lat, lon = args.lat, args.lon
    try:
        if args.city:
            matches = geocode_city(args.city)
            if not matches:
                raise GeocodingError(f"City not found: {args.city}")
            lat, lon = matches[0].lat, matches[0].lon
            print(f"Location: {matches[0].label} ({lat:.4f}, {lon:.4f})")

        reading = run(
            QueryInput(
                height=args.height,
                height_unit=args.unit,
                latitude=lat,
                longitude=lon,
                direction=args.direction,
                footwear=args.footwear,
                when=f"{args.date} {args.time}",
            )
        )
    except (InputValidationError, GeocodingError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = reading.result
    print(f"Sun altitude: {result.sun_altitude_deg:.2f}°")
    if not result.shadow_exists:
        print("No shadow: the sun is below the horizon at this time.")
        return 0

    print(f"Feet:           {result.length_feet:.2f}")
    print(f"Planck lengths: {result.planck_lengths}")
    print(f"Light-years:    {result.light_years}")
    print(f"Horses:         {result.horse_units:.2f}")
    print()
    print(reading.interpretation.title)
    print(reading.interpretation.description)
    for trait in reading.interpretation.traits:
        print(f"  - {trait.name}: {trait.description}")

    if args.png is not None:
        path = save_static_chart(reading, args.png)
        log.info("chart_saved", path=str(path))
        print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
