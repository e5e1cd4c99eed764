from __future__ import annotations

from logging import getLogger
from os import getenv
from pathlib import Path
from typing import Self

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVEL = getenv("LOG_LEVEL", "WARNING")

logger = getLogger(__name__)


def default_logger() -> dict:
    return {
        "disable_existing_loggers": False,
        "version": 1,
        "handlers": {
            "default": {"class": "logging.StreamHandler", "formatter": "default"}
        },
        "formatters": {
            "default": {
                "format": "%(levelname)s %(name)s:%(funcName)s:%(lineno)d :: %(message)s"
            }
        },
        "root": {"level": "WARNING", "handlers": ["default"]},
        "loggers": {"speedtype": {"level": LOG_LEVEL}},
    }


class GameSetting(BaseModel):
    """
    Attributes:
    - sentence_file: one sentence per line, built-in sentences are used if missing
    - chart_width: width of the accuracy bar chart in columns
    - clear_screen: clear the terminal between screens
    """

    sentence_file: str = "./data/sentences.txt"
    chart_width: int = Field(default=60, gt=0)
    clear_screen: bool = True


class Setting(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ST_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logger: dict = Field(default_factory=default_logger)
    game: GameSetting = Field(default_factory=GameSetting)

    @classmethod
    def from_file(cls, base: str = "setting.yaml") -> Self:
        base_file = Path(base)
        if base_file.exists():
            with base_file.open("r") as f:
                loaded = yaml.safe_load(f) or {}
                base_setting = cls.model_validate(loaded)
        else:
            logger.warning("base setting file not found at: %s, using default.", base)
            base_setting = cls()

        return base_setting


if __name__ == "__main__":
    print(yaml.safe_dump(Setting().model_dump()))
