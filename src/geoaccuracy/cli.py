"""
Geolocation Accuracy — Interactive CLI
======================================
Thin wrapper around the geoaccuracy library.

Usage:
    geoaccuracy                               # interactive mode
    geoaccuracy 37.77493 -122.41942 City      # describe a geolocation
    geoaccuracy 0.3                           # accuracy level for a radius

Logging is configured from environment variables:
    GEOACCURACY_LOG_LEVEL   debug, info, warning (default), error, critical
    GEOACCURACY_LOG_JSON    set to 1/true for JSON log lines
"""

import os
import sys

import structlog

from geoaccuracy import AccuracyScale, Geolocation
from geoaccuracy.exceptions import GeolocationError, InvalidAccuracyCode
from geoaccuracy.log import configure_logging

logger = structlog.get_logger(__name__)

# ── Configuration ─────────────────────────────────────────────
_LOG_LEVEL = os.environ.get("GEOACCURACY_LOG_LEVEL", "warning")
_LOG_JSON = os.environ.get("GEOACCURACY_LOG_JSON", "").lower() in ("1", "true", "yes")

_BANNER = """\
╔══════════════════════════════════════╗
║     Geolocation Accuracy Lookup      ║
║  lat lon accuracy  |  radius (miles) ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""

_NAMES = {a.name.lower(): a for a in AccuracyScale}


def parse_accuracy(raw: str) -> AccuracyScale:
    """Resolve an accuracy given by name (any case) or by integer code."""
    raw = raw.strip()
    if raw.lstrip("-").isdigit():
        return AccuracyScale.with_code(int(raw))
    try:
        return _NAMES[raw.lower()]
    except KeyError:
        raise InvalidAccuracyCode(raw) from None


def render(args: list[str]) -> list[str]:
    """
    Produce output lines for one request.

    One argument is a radius in miles, three are latitude, longitude and
    accuracy. Raises GeolocationError or ValueError on bad input.
    """
    if len(args) == 1:
        miles = float(args[0])
        accuracy = AccuracyScale.classify_by_miles(miles)
        return [
            f"{'radius (miles)':>20}: {miles}",
            f"{'accuracy':>20}: {accuracy.name}",
            f"{'code':>20}: {accuracy.code}",
            f"{'range (miles)':>20}: {accuracy.range_in_miles}",
        ]
    if len(args) == 3:
        location = Geolocation(
            float(args[0]), float(args[1]), parse_accuracy(args[2])
        )
        point = location.to_spatial_point()
        return [
            f"{'geolocation':>20}: {location.describe()}",
            f"{'code':>20}: {location.accuracy.code}",
            f"{'range (miles)':>20}: {location.accuracy.range_in_miles}",
            f"{'point':>20}: ({point.x:.6f}, {point.y:.6f}, {point.z:.6f})",
        ]
    raise ValueError(
        f"expected 1 or 3 values (radius, or lat lon accuracy), got {len(args)}"
    )


def _run_interactive() -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nQuery:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            continue

        try:
            lines = render(raw.replace(",", " ").split())
        except (GeolocationError, ValueError) as exc:
            print(f"  ✗ {exc}")
            continue

        print()
        for line in lines:
            print(f"  {line}")


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    configure_logging(_LOG_LEVEL, json=_LOG_JSON)

    if len(sys.argv) > 1:
        try:
            lines = render(sys.argv[1:])
        except (GeolocationError, ValueError) as exc:
            logger.debug("cli_rejected_input", argv=sys.argv[1:])
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        for line in lines:
            print(line)
    else:
        _run_interactive()


if __name__ == "__main__":
    main()
