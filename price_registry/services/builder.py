"""Registry assembly — picks the feed provider and seeds configured feeds."""
from __future__ import annotations

import logging
from typing import Callable

from ..config import AppConfig
from ..errors import ErrorCode
from ..feeds import PythPriceFeed, StaticPriceFeed
from ..interfaces.price_feed import PriceFeed
from ..registry import PriceRegistry

logger = logging.getLogger(__name__)

FeedResolver = Callable[[str], PriceFeed]


def _pyth_resolver(config: AppConfig) -> FeedResolver:
    pyth_cfg = config.price_feed.pyth
    return lambda feed_id: PythPriceFeed(feed_id, pyth_cfg)


def _static_resolver(config: AppConfig) -> FeedResolver:
    feeds = {
        feed_id: StaticPriceFeed(answer)
        for feed_id, answer in config.price_feed.static.prices.items()
    }

    def resolve(feed_id: str) -> PriceFeed:
        # KeyError propagates to the caller of the price read.
        return feeds[feed_id]

    return resolve


# Feed resolver factories keyed by provider name.
_RESOLVER_FACTORIES: dict[str, Callable[[AppConfig], FeedResolver]] = {
    "pyth": _pyth_resolver,
    "static": _static_resolver,
}


def build_registry(config: AppConfig) -> PriceRegistry:
    """Create a registry owned by the configured admin and seed its feeds."""
    provider = config.price_feed.provider
    factory = _RESOLVER_FACTORIES.get(provider)
    if factory is None:
        raise ValueError(f"Unknown price feed provider '{provider}'")

    admin = config.registry.admin
    registry = PriceRegistry(admin, factory(config))

    for asset_id, feed_id in config.registry.feeds.items():
        code = registry.add_feed(admin, asset_id, feed_id)
        if code != ErrorCode.NO_ERROR:
            logger.warning(
                "Could not register feed %s for %s: %s", feed_id, asset_id, code.name
            )

    logger.info(
        "Registry ready: admin %s, %d feed(s), provider %s",
        admin,
        len(registry.registrations()),
        provider,
    )
    return registry
