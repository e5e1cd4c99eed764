from logging import getLogger
from pathlib import Path
from random import choice

from ..types.setting import Setting
from .util import humanize

logger = getLogger(__name__)

DEFAULT_SENTENCES = [
    "the quick brown fox jumps over the lazy dog",
    "practice makes progress, not perfection",
    "a journey of a thousand miles begins with a single step",
    "typing fast is good, typing accurately is better",
    "every keyboard has a story to tell",
    "the early bird catches the worm but the second mouse gets the cheese",
    "simple code is easier to read than clever code",
    "she sells sea shells by the sea shore",
    "good habits formed at youth make all the difference",
    "the best way to predict the future is to invent it",
    "all that glitters is not gold",
    "time flies like an arrow and fruit flies like a banana",
]


class SentenceProvider:
    """
    Picks sentences for each round
    """

    def __init__(self, setting: Setting) -> None:
        self._setting = setting
        self._sentences: list[str] = []

    @property
    def sentences(self) -> list[str]:
        return self._sentences

    def load_sentences(self):
        sentence_file = Path(self._setting.game.sentence_file)
        if sentence_file.exists():
            with sentence_file.open("r", encoding="utf-8") as f:
                self._sentences = [line.strip() for line in f if line.strip()]
        else:
            self._sentences = []

        if not self._sentences:
            logger.warning(
                "no sentences found at: %s, using built-in sentences.", sentence_file
            )
            self._sentences = list(DEFAULT_SENTENCES)

        logger.info(
            "load sentences from: %s, sentence count: %s",
            sentence_file,
            len(self._sentences),
        )

    def get_random_sentence(self) -> str:
        if not self._sentences:
            self.load_sentences()
        return humanize(choice(self._sentences))
