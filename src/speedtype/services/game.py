from logging import getLogger

from ..lib.evaluator import Evaluator
from ..lib.result_history import ResultHistory
from ..lib.sentence_provider import SentenceProvider
from ..schemas.game_result import GameResult
from ..types.common import ErrorContext
from ..types.enums import AccuracyBucket, ErrorCode
from ..types.errors import InvalidDuration
from .base import ServiceRet

logger = getLogger(__name__)


class GameService:
    """
    Runs the rounds of a single session and owns its result history
    """

    def __init__(
        self,
        sentence_provider: SentenceProvider,
        evaluator: Evaluator | None = None,
        history: ResultHistory | None = None,
    ) -> None:
        self._sentence_provider = sentence_provider
        self._evaluator = evaluator or Evaluator()
        self._history = history or ResultHistory()

    @property
    def history(self) -> ResultHistory:
        return self._history

    def new_round(self) -> str:
        sentence = self._sentence_provider.get_random_sentence()
        logger.debug("new round, sentence: %s", sentence)
        return sentence

    def finish_round(
        self, typed_input: str, sentence: str, elapsed_seconds: float
    ) -> ServiceRet[GameResult]:
        """
        Scores the round and records it. Nothing is recorded if scoring fails.
        """
        try:
            result = self._evaluator.evaluate(typed_input, sentence, elapsed_seconds)
        except InvalidDuration as ex:
            logger.warning("round discarded: %s", str(ex))
            return ServiceRet(
                ok=False,
                error=ErrorContext(code=ErrorCode.INVALID_DURATION, message=str(ex)),
            )

        self._history.record(result)
        logger.debug("round recorded: %s", result)
        return ServiceRet(ok=True, data=result)

    def stats(self) -> ServiceRet[list[GameResult]]:
        return ServiceRet(ok=True, data=self._history.entries())

    def chart(self) -> ServiceRet[dict[AccuracyBucket, int]]:
        return ServiceRet(ok=True, data=self._history.bucket_counts())
