"""
PreciseTime

Seconds + sub-second time values at nanosecond or microsecond resolution,
with normalization, arithmetic, comparison and cross-resolution conversion.
"""
from .core.constants import (
    NS_PER_SECOND,
    US_PER_SECOND,
    MS_PER_SECOND,
    NS_PER_MS,
    US_PER_MS,
    NS_PER_US,
)
from .core.context import TimeContext, TIME_CONTEXT, init_time_context, get_time_context
from .core.errors import PreciseTimeError, ClockReadError, TimeOverflowError, ResolutionMismatchError
from .core.timevalue import TimeValue, normalize, add, subtract, compare
from .core.types import Resolution, Ordering, ClockDomain, ClockSample
from .nanosecond import NanosecondTime
from .microsecond import MicrosecondTime
from .converter import (
    convert,
    to_microseconds,
    to_nanoseconds,
    nanoseconds_to_microseconds,
    microseconds_to_nanoseconds,
)
from .clock import Clock, ClockSource, SystemClockSource, ingest

__all__ = [
    "NS_PER_SECOND",
    "US_PER_SECOND",
    "MS_PER_SECOND",
    "NS_PER_MS",
    "US_PER_MS",
    "NS_PER_US",
    "TimeContext",
    "TIME_CONTEXT",
    "init_time_context",
    "get_time_context",
    "PreciseTimeError",
    "ClockReadError",
    "TimeOverflowError",
    "ResolutionMismatchError",
    "TimeValue",
    "normalize",
    "add",
    "subtract",
    "compare",
    "Resolution",
    "Ordering",
    "ClockDomain",
    "ClockSample",
    "NanosecondTime",
    "MicrosecondTime",
    "convert",
    "to_microseconds",
    "to_nanoseconds",
    "nanoseconds_to_microseconds",
    "microseconds_to_nanoseconds",
    "Clock",
    "ClockSource",
    "SystemClockSource",
    "ingest",
]
