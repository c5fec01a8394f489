from .core.timevalue import TimeValue
from .core.types import Resolution

class NanosecondTime(TimeValue, resolution=Resolution.NANOSECOND):
    """
    Seconds + nanoseconds (1_000_000_000 units per second).
    Wraps the same data as a POSIX timespec.
    """
    __slots__ = ()

    @property
    def nanoseconds(self) -> int:
        return self._sub_units

    def to_microseconds(self):
        """Truncating conversion; sub-microsecond detail is dropped."""
        from .converter import to_microseconds
        return to_microseconds(self)
