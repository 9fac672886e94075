#!/usr/bin/env python3
"""
Command-line interface for the geocoding module.

Usage:
    python -m geokit.geocoding.cli --address "Gulshan 2, Dhaka"
    python -m geokit.geocoding.cli --address "Gulshan 2, Dhaka" --providers nominatim
    python -m geokit.geocoding.cli --address "Gulshan 2, Dhaka" --json
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from geokit.core import settings
from geokit.geocoding.base import GeocodeResponse
from geokit.geocoding.facade import PROVIDER_NAMES, build_resolver

logger = logging.getLogger(__name__)


def print_response(response: GeocodeResponse, verbose: bool = False) -> None:
    """Print a resolution response in human-readable form."""
    print(f"\nGeocoding: {response.query}")
    print("-" * 50)

    if not response.has_results():
        print("✗ No match found")
    else:
        for i, result in enumerate(response.results, 1):
            print(f"{i}. [{result.provider}] {result.formatted}")
            print(f"   Lat/Lng: {result.lat:.6f}, {result.lng:.6f}")
            if verbose and result.components:
                for key, value in result.components.items():
                    print(f"   {key}: {value}")

    if response.used_fallback:
        print("\nFallback provider used")
    if response.failed_providers:
        print(f"Failed providers: {', '.join(response.failed_providers)}")


async def resolve_address(
    address: str,
    providers: Optional[List[str]] = None,
    limit: int = 10,
    as_json: bool = False,
    verbose: bool = False,
) -> GeocodeResponse:
    """Resolve one address and print the outcome."""
    resolver = build_resolver(providers)
    response = await resolver.search(address, limit)

    if as_json:
        print(response.to_json(indent=2, ensure_ascii=False))
    else:
        print_response(response, verbose)

    return response


def parse_providers(value: str) -> List[str]:
    """argparse type for a comma separated provider list."""
    names = [name.strip().lower() for name in value.split(",") if name.strip()]
    unknown = [name for name in names if name not in PROVIDER_NAMES]
    if unknown:
        raise argparse.ArgumentTypeError(
            f"Unknown provider(s): {', '.join(unknown)}. Choose from: {', '.join(PROVIDER_NAMES)}"
        )
    return names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve addresses through multiple geocoding providers"
    )

    parser.add_argument(
        "--address", "-a",
        type=str,
        help="Address to geocode"
    )
    parser.add_argument(
        "--providers", "-p",
        type=parse_providers,
        help="Comma separated providers in query order (default: GEOKIT_PROVIDERS)"
    )
    parser.add_argument(
        "--limit", "-l",
        type=int,
        default=settings.GEOKIT_MAX_RESULTS,
        help="Maximum number of results"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the response as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not args.address:
        parser.print_help()
        return 2

    if args.limit < 1:
        parser.error("--limit must be a positive integer")

    response = asyncio.run(resolve_address(
        args.address,
        providers=args.providers,
        limit=args.limit,
        as_json=args.json,
        verbose=args.verbose,
    ))

    return 0 if response.has_results() else 1


if __name__ == "__main__":
    sys.exit(main())
