"""In-process price feed with a settable answer."""
import time

from ..models import RoundData


class StaticPriceFeed:
    """Report whatever answer was last set. Each ``set_answer`` starts a new round."""

    def __init__(self, answer: int, updated_at: int | None = None) -> None:
        self._round_id = 1
        self._answer = answer
        self._updated_at = int(time.time()) if updated_at is None else updated_at

    def set_answer(self, answer: int, updated_at: int | None = None) -> None:
        self._round_id += 1
        self._answer = answer
        self._updated_at = int(time.time()) if updated_at is None else updated_at

    async def latest_round_data(self) -> RoundData:
        return RoundData(
            round_id=self._round_id,
            answer=self._answer,
            started_at=self._updated_at,
            updated_at=self._updated_at,
            answered_in_round=self._round_id,
        )
