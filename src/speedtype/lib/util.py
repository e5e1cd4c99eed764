from logging import getLogger
from logging.config import dictConfig

from ..types.log import TRACE
from ..types.setting import Setting

logger = getLogger(__name__)


def init_logger(setting: Setting):
    dictConfig(setting.logger)
    logger.info("logger initialized")
    logger.debug("debug level activated")
    logger.log(TRACE, "trace level activated")


def load_setting(base: str) -> Setting:
    return Setting.from_file(base)


def humanize(sentence: str) -> str:
    """
    Collapse whitespace and capitalize the first letter.
    """
    collapsed = " ".join(sentence.split())
    if not collapsed:
        return collapsed
    return collapsed[0].upper() + collapsed[1:]
