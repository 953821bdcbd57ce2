"""Status codes for admin mutations and exceptions for price reads."""
from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Result of an admin mutation. Anything but NO_ERROR means nothing changed."""

    NO_ERROR = 0
    UNAUTHORIZED = 1
    INVALID_INPUT = 2


class FailureInfo(IntEnum):
    """Which check rejected an admin mutation."""

    ADD_FEED_OWNER_CHECK = 0
    ADD_FEED_EXISTS = 1
    REPLACE_FEED_OWNER_CHECK = 2
    REPLACE_FEED_MISSING = 3
    REPLACE_FEED_DUPLICATE = 4


class PriceRegistryError(Exception):
    """Base class for failures that abort a price read."""


class FeedNotFoundError(PriceRegistryError):
    """No feed is registered for the asset."""

    def __init__(self, asset_id: str) -> None:
        super().__init__(f"price feed doesn't exist: {asset_id}")
        self.asset_id = asset_id


class InvalidFeedDataError(PriceRegistryError):
    """The feed reported a price the registry refuses to return."""

    def __init__(self, feed_id: str, answer: int) -> None:
        super().__init__(f"price cannot be negative: feed {feed_id} reported {answer}")
        self.feed_id = feed_id
        self.answer = answer


class FeedQueryError(PriceRegistryError):
    """The external feed could not produce a reading."""
