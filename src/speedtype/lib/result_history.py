from collections import deque
from logging import getLogger

from ..schemas.game_result import GameResult
from ..types.enums import AccuracyBucket

logger = getLogger(__name__)

HISTORY_CAPACITY = 5


class ResultHistory:
    """
    Most recent game results, newest first.
    Once full, recording a result drops the oldest one.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got: {capacity}")
        self._results: deque[GameResult] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        assert self._results.maxlen
        return self._results.maxlen

    def __len__(self) -> int:
        return len(self._results)

    def record(self, result: GameResult):
        if len(self._results) == self.capacity:
            logger.debug("history full, evicting: %s", self._results[-1])

        # a bounded deque drops from the right when adding on the left
        self._results.appendleft(result)

    def entries(self) -> list[GameResult]:
        return list(self._results)

    def bucket_counts(self) -> dict[AccuracyBucket, int]:
        """
        Returns:
            - count of results per accuracy bucket, every bucket present, in display order
        """
        counts = {bucket: 0 for bucket in AccuracyBucket}
        for result in self._results:
            counts[AccuracyBucket.from_accuracy(result.accuracy)] += 1

        return counts
