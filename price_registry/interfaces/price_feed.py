"""Price feed protocol — external price source abstraction."""
from typing import Protocol

from ..models import RoundData


class PriceFeed(Protocol):
    """Abstract interface for an external source of the latest price."""

    async def latest_round_data(self) -> RoundData: ...
