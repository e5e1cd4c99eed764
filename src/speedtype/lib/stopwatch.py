from collections.abc import Callable
from time import perf_counter


class Stopwatch:
    """
    Times a round. `clock` must be monotonic, seconds as float.
    """

    def __init__(self, clock: Callable[[], float] = perf_counter) -> None:
        self._clock = clock
        self._start_at: float | None = None
        self._stop_at: float | None = None

    def start(self):
        self._start_at = self._clock()
        self._stop_at = None

    def stop(self):
        if self._start_at is None:
            raise RuntimeError("stopwatch was never started")
        self._stop_at = self._clock()

    @property
    def elapsed(self) -> float:
        """
        Seconds between start and stop, or until now if still running
        """
        if self._start_at is None:
            return 0.0

        end = self._stop_at if self._stop_at is not None else self._clock()
        return end - self._start_at
