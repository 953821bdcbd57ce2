"""Pyth Network price feed backed by the Hermes HTTP API."""
import asyncio
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ..config import PythConfig
from ..errors import FeedQueryError
from ..models import RoundData

logger = logging.getLogger(__name__)


class PythPriceFeed:
    """Read the latest price of one Pyth price id from Hermes.

    Every read issues a fresh request. The raw integer price is returned as
    the round answer; Pyth's exponent is not applied.
    """

    def __init__(self, feed_id: str, config: PythConfig) -> None:
        self.feed_id = feed_id
        self.hermes_url = config.hermes_url
        self.timeout = config.timeout

    @property
    def _bare_id(self) -> str:
        # Hermes reports ids without the 0x prefix.
        return self.feed_id.lower().removeprefix("0x")

    async def latest_round_data(self) -> RoundData:
        """Fetch the current price from Hermes.

        Raises:
            FeedQueryError: The request failed or timed out, the body is not
                valid JSON, or the response has no well-formed entry for
                this feed.
        """
        url = f"{self.hermes_url}?ids[]={self.feed_id}"

        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        try:
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.get(
                    url, timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as response:
                    if response.status != 200:
                        raise FeedQueryError(
                            f"Pyth feed {self.feed_id}: HTTP {response.status}"
                        )
                    data = await response.json()
        except asyncio.TimeoutError as e:
            raise FeedQueryError(
                f"Pyth feed {self.feed_id}: timed out after {self.timeout}s"
            ) from e
        except (aiohttp.ClientError, ValueError) as e:
            raise FeedQueryError(f"Pyth feed {self.feed_id}: {e}") from e

        try:
            price_data = self._find_entry(data)["price"]
            answer = int(price_data["price"])
            publish_time = int(price_data["publish_time"])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise FeedQueryError(
                f"Pyth feed {self.feed_id}: malformed response ({e!r})"
            ) from e

        logger.debug(
            "Pyth %s: price=%d expo=%s at %d",
            self.feed_id,
            answer,
            price_data.get("expo"),
            publish_time,
        )
        return RoundData(
            round_id=publish_time,
            answer=answer,
            started_at=publish_time,
            updated_at=publish_time,
            answered_in_round=publish_time,
        )

    def _find_entry(self, data: Any) -> Any:
        for item in data["parsed"]:
            if str(item.get("id", "")).lower().removeprefix("0x") == self._bare_id:
                return item
        raise FeedQueryError(f"Pyth feed {self.feed_id}: missing from response")
