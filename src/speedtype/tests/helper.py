from datetime import UTC, datetime
from io import StringIO

import pytest
import time_machine

from ..lib.sentence_provider import SentenceProvider
from ..schemas.game_result import GameResult
from ..types.setting import Setting

tmp_now = datetime.now(UTC)
NOW = datetime(year=tmp_now.year, month=tmp_now.month, day=tmp_now.day, tzinfo=UTC)


def make_result(accuracy: int, wpm: float = 40.0, time_taken: float = 12.5) -> GameResult:
    return GameResult(wpm=wpm, accuracy=accuracy, time_taken=time_taken)


class TypingStream(StringIO):
    """
    Input stream that moves the frozen clock forward on every line read,
    as if the player took `seconds_per_line` to answer each prompt.
    """

    def __init__(
        self,
        lines: list[str],
        traveller: time_machine.Coordinates,
        seconds_per_line: float = 0,
    ) -> None:
        super().__init__("".join(f"{line}\n" for line in lines))
        self._traveller = traveller
        self._seconds_per_line = seconds_per_line

    def readline(self, size: int = -1) -> str:
        if self._seconds_per_line:
            self._traveller.shift(self._seconds_per_line)
        return super().readline(size)


@pytest.fixture
def setting(tmp_path) -> Setting:
    setting = Setting.from_file()
    setting.game.sentence_file = str(tmp_path / "sentences.txt")
    setting.game.clear_screen = False
    return setting


@pytest.fixture
def sentence_provider(setting: Setting) -> SentenceProvider:
    with open(setting.game.sentence_file, "w") as f:
        f.write("the quick brown fox\n")

    sentence_provider = SentenceProvider(setting)
    sentence_provider.load_sentences()
    return sentence_provider
