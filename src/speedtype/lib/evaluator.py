from math import isfinite

from ..schemas.game_result import GameResult
from ..types.errors import InvalidDuration


class Evaluator:
    """
    Scores a finished round. Stateless, every call is independent.
    """

    def calculate_wpm(self, typed_input: str, elapsed_seconds: float) -> float:
        """
        Words are whitespace separated tokens, normalized to a one minute window.

        Raises:
            InvalidDuration: elapsed_seconds is not a positive finite number,
                or is too short to give a finite result
        """
        if not isfinite(elapsed_seconds) or elapsed_seconds <= 0:
            raise InvalidDuration(elapsed_seconds)

        words = len(typed_input.split())
        wpm = words * 60 / elapsed_seconds
        # durations too short to divide by overflow to inf
        if not isfinite(wpm):
            raise InvalidDuration(elapsed_seconds)

        return wpm

    def calculate_accuracy(self, typed_input: str, reference: str) -> int:
        """
        Percentage of reference characters reproduced at the same position,
        rounded half up. An empty reference scores 0.
        """
        if not reference:
            return 0

        matches = sum(1 for typed, ref in zip(typed_input, reference) if typed == ref)

        # integer form of floor(100 * matches / len + 0.5)
        total = len(reference)
        return (200 * matches + total) // (2 * total)

    def evaluate(
        self, typed_input: str, reference: str, elapsed_seconds: float
    ) -> GameResult:
        wpm = self.calculate_wpm(typed_input, elapsed_seconds)
        accuracy = self.calculate_accuracy(typed_input, reference)
        return GameResult(wpm=wpm, accuracy=accuracy, time_taken=elapsed_seconds)
