from pydantic import BaseModel, ConfigDict, Field


class GameResult(BaseModel):
    """
    Outcome of a single round

    Attributes:
        wpm: Words per minute
        accuracy: Position aligned character accuracy, in percent
        time_taken: Seconds spent typing
    """

    model_config = ConfigDict(frozen=True)

    wpm: float = Field(ge=0, allow_inf_nan=False)
    accuracy: int = Field(ge=0, le=100)
    time_taken: float = Field(ge=0, allow_inf_nan=False)
