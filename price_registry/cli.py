"""Command-line interface for the price registry."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .config import load_config
from .errors import PriceRegistryError
from .logging_setup import configure_logging
from .registry import PriceRegistry
from .services import build_registry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="price-registry",
        description="Asset price feed registry",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    price_parser = sub.add_parser("price", help="Read the price of one asset")
    price_parser.add_argument("asset", help="Asset identifier")

    sub.add_parser("prices", help="Read the price of every registered asset")
    sub.add_parser("feeds", help="List registered feeds")

    return parser


async def _print_price(registry: PriceRegistry, asset_id: str) -> bool:
    try:
        price = await registry.get_underlying_price(asset_id)
    except PriceRegistryError as e:
        logger.error("Price read failed for %s: %s", asset_id, e)
        return False
    print(f"{asset_id}\t{price}")
    return True


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command and return the exit code."""
    config = load_config(args.config)
    registry = build_registry(config)

    if args.command == "price":
        ok = await _print_price(registry, args.asset)
        return 0 if ok else 1

    if args.command == "prices":
        results = [
            await _print_price(registry, asset_id)
            for asset_id in registry.registrations()
        ]
        return 0 if all(results) else 1

    if args.command == "feeds":
        for asset_id, feed_id in sorted(registry.registrations().items()):
            print(f"{asset_id}\t{feed_id}")
        return 0

    build_parser().print_help()
    return 1


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)
    sys.exit(asyncio.run(_run(args)))
