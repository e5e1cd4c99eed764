from enum import StrEnum
from typing import Self


class ErrorCode(StrEnum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    INVALID_DURATION = "INVALID_DURATION"


class MenuChoice(StrEnum):
    START_GAME = "Start Game"
    VIEW_STATS = "View Game Stats"
    VIEW_CHART = "View Bar Chart"
    QUIT = "Quit"


class AccuracyBucket(StrEnum):
    """
    Accuracy ranges used by the bar chart, in display order.
    100% has a bucket of its own.
    """

    P0 = "0%-9%"
    P10 = "10%-19%"
    P20 = "20%-29%"
    P30 = "30%-39%"
    P40 = "40%-49%"
    P50 = "50%-59%"
    P60 = "60%-69%"
    P70 = "70%-79%"
    P80 = "80%-89%"
    P90 = "90%-99%"
    P100 = "100%"

    @classmethod
    def from_accuracy(cls, accuracy: int) -> Self:
        if not 0 <= accuracy <= 100:
            raise ValueError(f"accuracy out of range: {accuracy}")
        return list(cls)[accuracy // 10]
