from typing import Optional


class PreciseTimeError(Exception):
    """
    Base class for every error raised by precisetime.
    """


class ClockReadError(PreciseTimeError):
    """
    A ClockSource could not produce a sample.
    Never replaced by a zero value; the caller decides what to do.
    """
    def __init__(self, message: str, domain: Optional[str] = None):
        super().__init__(message)
        self.domain = domain


class TimeOverflowError(PreciseTimeError, OverflowError):
    """
    The seconds field left the range allowed by the active TimeContext.
    """
    def __init__(self, seconds: int, seconds_min: int, seconds_max: int):
        super().__init__(
            f"seconds={seconds} outside representable range [{seconds_min}, {seconds_max}]"
        )
        self.seconds = seconds
        self.seconds_min = seconds_min
        self.seconds_max = seconds_max


class ResolutionMismatchError(PreciseTimeError, TypeError):
    """
    Two values of different resolutions were combined without an explicit conversion.
    """
