from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from ..types.common import ErrorContext

T = TypeVar("T")


class ServiceRet(BaseModel, Generic[T]):
    """
    Outcome of a game service call.

    Attributes:
        ok: False when the call failed, e.g. a round with an invalid duration
        error: What went wrong, only set when not ok
        data: The round result, history entries or bucket counts
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: bool
    error: ErrorContext | None = None
    data: T | None = None
