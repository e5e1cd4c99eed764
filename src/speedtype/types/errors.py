class SpeedTypeError(Exception):
    pass


class InvalidDuration(SpeedTypeError):
    """
    Elapsed time of a round is not a positive finite number
    """

    def __init__(self, elapsed_seconds: float) -> None:
        self.elapsed_seconds = elapsed_seconds
        super().__init__(f"elapsed time must be positive, got: {elapsed_seconds}")
