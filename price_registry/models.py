"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import ErrorCode, FailureInfo

# Stored in place of a feed id when an asset has no feed.
ZERO_ID = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True)
class RoundData:
    """Latest reading reported by a price feed."""

    round_id: int
    answer: int
    started_at: int = 0
    updated_at: int = 0
    answered_in_round: int = 0


@dataclass(frozen=True)
class FeedAdded:
    """A feed was registered for an asset that had none."""

    asset_id: str
    feed_id: str


@dataclass(frozen=True)
class FeedReplaced:
    """An asset's feed was swapped (``new_feed_id`` is ZERO_ID on removal)."""

    asset_id: str
    old_feed_id: str
    new_feed_id: str


@dataclass(frozen=True)
class Failure:
    """An admin mutation was rejected."""

    error: ErrorCode
    info: FailureInfo


RegistryEvent = FeedAdded | FeedReplaced | Failure
