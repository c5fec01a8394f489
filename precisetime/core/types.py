from enum import Enum, IntEnum
from pydantic import BaseModel, ConfigDict, StrictInt
from .constants import NS_PER_SECOND, US_PER_SECOND, MS_PER_SECOND

class Resolution(str, Enum):
    """
    Sub-second unit size. The value is the unit label used in debug text.
    """
    NANOSECOND = "nsec"
    MICROSECOND = "usec"

    @property
    def units_per_second(self) -> int:
        if self is Resolution.NANOSECOND:
            return NS_PER_SECOND
        return US_PER_SECOND

    @property
    def units_per_ms(self) -> int:
        return self.units_per_second // MS_PER_SECOND

    @property
    def unit(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Resolution":
        """
        Accepts "ns"/"nsec"/"nanosecond" and "us"/"usec"/"microsecond".
        """
        key = text.strip().lower()
        if key in ("ns", "nsec", "nanosecond", "nanoseconds"):
            return cls.NANOSECOND
        if key in ("us", "usec", "microsecond", "microseconds"):
            return cls.MICROSECOND
        raise ValueError(f"Unknown resolution: {text!r}")

class Ordering(IntEnum):
    """
    Result of a three-way compare, usable like strcmp (-1, 0, 1).
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1

class ClockDomain(str, Enum):
    WALL_CLOCK = "WALL_CLOCK"
    MONOTONIC = "MONOTONIC"
    MONOTONIC_RAW = "MONOTONIC_RAW"

class ClockSample(BaseModel):
    """
    Raw reading handed over by a ClockSource.
    sub_units is in the units of `resolution` and may be un-normalized.
    """
    model_config = ConfigDict(frozen=True)

    domain: ClockDomain
    resolution: Resolution
    seconds: StrictInt
    sub_units: StrictInt
