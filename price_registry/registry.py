"""Admin-guarded registry of asset → price feed mappings."""
from __future__ import annotations

import logging
from typing import Callable

from .errors import (
    ErrorCode,
    FailureInfo,
    FeedNotFoundError,
    InvalidFeedDataError,
)
from .interfaces.price_feed import PriceFeed
from .models import ZERO_ID, Failure, FeedAdded, FeedReplaced, RegistryEvent

logger = logging.getLogger(__name__)


class PriceRegistry:
    """Maps asset ids to feed ids and reads validated prices through them.

    Mutations are restricted to the administrator fixed at construction and
    report failures as an ``ErrorCode``. Price reads raise instead.

    Args:
        admin: Identity allowed to mutate the registry.
        resolve_feed: Turns a stored feed id into a queryable ``PriceFeed``.
    """

    is_price_oracle = True

    def __init__(self, admin: str, resolve_feed: Callable[[str], PriceFeed]) -> None:
        self._admin = admin
        self._resolve_feed = resolve_feed
        self._price_feeds: dict[str, str] = {}
        self._events: list[RegistryEvent] = []

    @property
    def admin(self) -> str:
        return self._admin

    @property
    def events(self) -> tuple[RegistryEvent, ...]:
        """Emitted events, oldest first."""
        return tuple(self._events)

    def price_feeds(self, asset_id: str) -> str:
        """Return the feed registered for ``asset_id`` or ZERO_ID."""
        return self._price_feeds.get(asset_id, ZERO_ID)

    def registrations(self) -> dict[str, str]:
        """Return every asset that currently has a feed."""
        return {
            asset: feed for asset, feed in self._price_feeds.items() if feed != ZERO_ID
        }

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    async def get_underlying_price(self, asset_id: str) -> int:
        """Return the latest price for ``asset_id`` in the feed's own decimals.

        Raises:
            FeedNotFoundError: No feed is registered for the asset.
            InvalidFeedDataError: The feed reported a negative price.
        """
        feed_id = self.price_feeds(asset_id)
        if feed_id == ZERO_ID:
            raise FeedNotFoundError(asset_id)

        round_data = await self._resolve_feed(feed_id).latest_round_data()
        if round_data.answer < 0:
            raise InvalidFeedDataError(feed_id, round_data.answer)

        logger.debug(
            "Price for %s from %s: %d (round %d)",
            asset_id,
            feed_id,
            round_data.answer,
            round_data.round_id,
        )
        return round_data.answer

    # ------------------------------------------------------------------
    # Admin path
    # ------------------------------------------------------------------

    def add_feed(self, caller: str, asset_id: str, feed_id: str) -> ErrorCode:
        """Register ``feed_id`` for an asset that has no feed yet."""
        if caller != self._admin:
            return self._fail(ErrorCode.UNAUTHORIZED, FailureInfo.ADD_FEED_OWNER_CHECK)

        if self.price_feeds(asset_id) != ZERO_ID:
            return self._fail(ErrorCode.INVALID_INPUT, FailureInfo.ADD_FEED_EXISTS)

        self._price_feeds[asset_id] = feed_id
        self._emit(FeedAdded(asset_id, feed_id))
        logger.info("Feed added: asset %s -> %s", asset_id, feed_id)
        return ErrorCode.NO_ERROR

    def remove_feed(self, caller: str, asset_id: str) -> ErrorCode:
        """Clear an asset's feed by replacing it with ZERO_ID."""
        return self.replace_feed(caller, asset_id, ZERO_ID)

    def replace_feed(self, caller: str, asset_id: str, new_feed_id: str) -> ErrorCode:
        """Swap an asset's existing feed for a different one."""
        if caller != self._admin:
            return self._fail(
                ErrorCode.UNAUTHORIZED, FailureInfo.REPLACE_FEED_OWNER_CHECK
            )

        old_feed_id = self.price_feeds(asset_id)
        if old_feed_id == ZERO_ID:
            return self._fail(ErrorCode.INVALID_INPUT, FailureInfo.REPLACE_FEED_MISSING)

        if new_feed_id == old_feed_id:
            return self._fail(
                ErrorCode.INVALID_INPUT, FailureInfo.REPLACE_FEED_DUPLICATE
            )

        self._price_feeds[asset_id] = new_feed_id
        self._emit(FeedReplaced(asset_id, old_feed_id, new_feed_id))
        logger.info(
            "Feed replaced: asset %s: %s -> %s", asset_id, old_feed_id, new_feed_id
        )
        return ErrorCode.NO_ERROR

    def _emit(self, event: RegistryEvent) -> None:
        self._events.append(event)

    def _fail(self, error: ErrorCode, info: FailureInfo) -> ErrorCode:
        self._emit(Failure(error, info))
        logger.warning("Registry mutation rejected: %s (%s)", error.name, info.name)
        return error
