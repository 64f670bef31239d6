"""
Command-line restaurant search.

Usage:
    python -m bytefinder.cli --cuisine chinese --price 20
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .display import format_results, parse_optional_int
from .search.engine import InvalidArgument, RestaurantSearch
from .search.models import SearchCriteria

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find the best matched restaurants")
    parser.add_argument("--name", default="", help="Restaurant name (partial match)")
    parser.add_argument("--rating", default="", help="Minimum customer rating (1-5)")
    parser.add_argument("--distance", default="", help="Maximum distance in miles (1-10)")
    parser.add_argument("--price", default="", help="Maximum price per person (10-50)")
    parser.add_argument("--cuisine", default="", help="Cuisine name (partial match)")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_CATALOG_CONFIG.data_dir,
        help="Directory holding restaurants.csv and cuisines.csv",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        searcher = RestaurantSearch.from_config(CatalogConfig(data_dir=args.data_dir))
    except (OSError, ValueError) as exc:
        logger.error("Could not load restaurant catalog", exc_info=args.verbose)
        print(f"Error loading data: {exc}", file=sys.stderr)
        return 1

    try:
        criteria = SearchCriteria(
            name=args.name.strip(),
            rating=parse_optional_int(args.rating, "Rating"),
            distance=parse_optional_int(args.distance, "Distance"),
            price=parse_optional_int(args.price, "Price"),
            cuisine=args.cuisine.strip(),
        )
        results = searcher.search(criteria)
    except InvalidArgument as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 2

    if results:
        print("Best matched restaurants:")
    print(format_results(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
