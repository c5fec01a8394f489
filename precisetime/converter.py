"""
PreciseTime: Converter

The only place where values cross resolutions.
Microseconds -> nanoseconds is exact. Nanoseconds -> microseconds truncates
the sub-microsecond remainder; the remainder is already in [0, 1e9) after
normalization, so plain floor division is the truncation.
"""
from .core.constants import NS_PER_SECOND, US_PER_SECOND, NS_PER_US
from .core.timevalue import TimeValue, normalize
from .core.types import Resolution
from .microsecond import MicrosecondTime
from .nanosecond import NanosecondTime

def nanoseconds_to_microseconds(seconds: int, nanoseconds: int) -> MicrosecondTime:
    """
    Raw (seconds, nanoseconds), possibly un-normalized, to a MicrosecondTime.
    """
    seconds, nanoseconds = normalize(seconds, nanoseconds, NS_PER_SECOND)
    return MicrosecondTime._from_normalized(seconds, nanoseconds // NS_PER_US)

def microseconds_to_nanoseconds(seconds: int, microseconds: int) -> NanosecondTime:
    """
    Raw (seconds, microseconds), possibly un-normalized, to a NanosecondTime.
    """
    seconds, microseconds = normalize(seconds, microseconds, US_PER_SECOND)
    return NanosecondTime._from_normalized(seconds, microseconds * NS_PER_US)

def to_microseconds(value: NanosecondTime) -> MicrosecondTime:
    if not isinstance(value, NanosecondTime):
        raise TypeError(f"expected NanosecondTime, got {type(value).__name__}")
    return nanoseconds_to_microseconds(value.seconds, value.sub_units)

def to_nanoseconds(value: MicrosecondTime) -> NanosecondTime:
    if not isinstance(value, MicrosecondTime):
        raise TypeError(f"expected MicrosecondTime, got {type(value).__name__}")
    return microseconds_to_nanoseconds(value.seconds, value.sub_units)

def convert(value: TimeValue, resolution: Resolution) -> TimeValue:
    """
    Converts to an explicit target resolution.
    Returns a fresh copy when the value is already in that resolution.
    """
    if not isinstance(value, TimeValue):
        raise TypeError(f"expected a time value, got {type(value).__name__}")
    if value.resolution is resolution:
        return type(value)._from_normalized(value.seconds, value.sub_units)
    if resolution is Resolution.MICROSECOND:
        return to_microseconds(value)
    return to_nanoseconds(value)
