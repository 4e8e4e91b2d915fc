"""Command line interface for resolving journey links."""

import asyncio
import json
import sys

import aiohttp

from db_journey_links.adapters.config import AppConfig
from db_journey_links.application import (
    decode_station_id,
    decode_station_name,
    format_journey_summary,
)
from db_journey_links.bootstrap import build_assembler
from db_journey_links.domain.errors import JourneyLinkError
from db_journey_links.domain.models import ExtractionFailure
from db_journey_links.main import configure_logging


async def resolve_url(url: str, format_json: bool = False) -> int:
    """Resolve ``url`` and print the result. Returns the exit code."""
    config = AppConfig()
    async with aiohttp.ClientSession() as session:
        assembler = build_assembler(session, config)
        result = await assembler.assemble(url)

    if isinstance(result, ExtractionFailure):
        message = result.error if not result.details else f"{result.error} ({result.details})"
        print(f"Error: {message}", file=sys.stderr)
        return 1

    if format_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_journey_summary(result))
    return 0


def decode_token(token: str, format_json: bool = False) -> int:
    """Print the station id and name of a ``soid``/``zoid`` token."""
    station_id = decode_station_id(token)
    name = decode_station_name(token)
    if format_json:
        print(json.dumps({"id": station_id, "name": name}, ensure_ascii=False))
    else:
        print(f"ID: {station_id or 'N/A'}")
        print(f"Name: {name or 'Unknown'}")
    return 0 if station_id else 1


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Resolve DB booking links into journey details",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resolve a booking reference
  db-journey-links resolve "https://www.bahn.de/buchung/start?vbid=abc123"

  # Extract a deep link as JSON
  db-journey-links resolve --json "https://www.bahn.de/buchung/fahrplan/suche#soid=8000001&zoid=8000096"

  # Decode a single station token
  db-journey-links decode "A=1@O=Aachen Hbf@L=8000001@"
        """,
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a deep link or booking URL")
    resolve_parser.add_argument("url", help="bahn.de deep link or URL with a vbid parameter")
    resolve_parser.add_argument("--json", action="store_true", help="Output as JSON")

    decode_parser = subparsers.add_parser("decode", help="Decode a station token")
    decode_parser.add_argument("token", help="Station token (numeric id or location-id string)")
    decode_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level.upper())

    try:
        if args.command == "resolve":
            exit_code = await resolve_url(args.url, format_json=args.json)
        else:
            exit_code = decode_token(args.token, format_json=args.json)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except JourneyLinkError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
