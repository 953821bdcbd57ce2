"""Admin-guarded asset → price feed registry."""
from .errors import (
    ErrorCode,
    FailureInfo,
    FeedNotFoundError,
    FeedQueryError,
    InvalidFeedDataError,
    PriceRegistryError,
)
from .models import ZERO_ID, Failure, FeedAdded, FeedReplaced, RoundData
from .registry import PriceRegistry

__all__ = [
    "ErrorCode",
    "Failure",
    "FailureInfo",
    "FeedAdded",
    "FeedNotFoundError",
    "FeedQueryError",
    "FeedReplaced",
    "InvalidFeedDataError",
    "PriceRegistry",
    "PriceRegistryError",
    "RoundData",
    "ZERO_ID",
]
