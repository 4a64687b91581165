"""
Command-line interface for pydopa.

Queries the DOPA services and prints the resulting tables as CSV on stdout.
"""

from __future__ import annotations

import argparse
import sys

import pandas as pd
import requests

from pydopa import __version__
from pydopa.config import get_settings
from pydopa.datasources import dopa
from pydopa.errors import DopaError
from pydopa.log import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="pydopa",
        description="Species and protected-area statistics from the DOPA REST services",
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

    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("categories", help="List IUCN protected-area categories")

    countries_parser = subparsers.add_parser("countries", help="List all countries")
    _add_cache_flag(countries_parser)

    for name, help_text in (
        ("species-count", "Count species whose range intersects a country"),
        ("species-list", "List species whose range intersects a country"),
    ):
        species_parser = subparsers.add_parser(name, help=help_text)
        _add_country_arg(species_parser)
        species_parser.add_argument(
            "--status",
            nargs="+",
            default=None,
            help="IUCN status codes to filter on (e.g. CR EN VU)",
        )
        _add_cache_flag(species_parser)

    stats_parser = subparsers.add_parser("country-stats", help="Species statistics for a country")
    _add_country_arg(stats_parser)
    _add_cache_flag(stats_parser)

    pa_parser = subparsers.add_parser("pa-stats", help="Protected-area statistics for a country")
    _add_country_arg(pa_parser)
    _add_cache_flag(pa_parser)

    return parser


def _add_country_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("country", help="Country name or ISO 3166-1 numeric code")


def _add_cache_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-cache",
        dest="cache",
        action="store_false",
        help="Bypass the on-disk response cache",
    )


def _print_table(table: pd.DataFrame) -> None:
    table.to_csv(sys.stdout, index=False)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"API: {settings.api_base}")
    print(f"Cache: {settings.cache_dir} (ttl {settings.cache_ttl_hours}h)")
    return 0


def cmd_categories(_args: argparse.Namespace) -> int:
    """Handle the 'categories' command."""
    _print_table(dopa.pa_categories())
    return 0


def cmd_countries(args: argparse.Namespace) -> int:
    """Handle the 'countries' command."""
    _print_table(dopa.country_list(cache=args.cache))
    return 0


def cmd_species_count(args: argparse.Namespace) -> int:
    """Handle the 'species-count' command."""
    print(dopa.country_species_count(args.country, args.status, cache=args.cache))
    return 0


def cmd_species_list(args: argparse.Namespace) -> int:
    """Handle the 'species-list' command."""
    _print_table(dopa.country_species_list(args.country, args.status, cache=args.cache))
    return 0


def cmd_country_stats(args: argparse.Namespace) -> int:
    """Handle the 'country-stats' command."""
    _print_table(dopa.country_stats(args.country, cache=args.cache))
    return 0


def cmd_pa_stats(args: argparse.Namespace) -> int:
    """Handle the 'pa-stats' command."""
    _print_table(dopa.pa_country_stats(args.country, cache=args.cache))
    return 0


COMMANDS = {
    "info": cmd_info,
    "categories": cmd_categories,
    "countries": cmd_countries,
    "species-count": cmd_species_count,
    "species-list": cmd_species_list,
    "country-stats": cmd_country_stats,
    "pa-stats": cmd_pa_stats,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging("DEBUG" if args.debug else get_settings().log_level)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except (DopaError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
