from .core.timevalue import TimeValue
from .core.types import Resolution

class MicrosecondTime(TimeValue, resolution=Resolution.MICROSECOND):
    """
    Seconds + microseconds (1_000_000 units per second).
    Wraps the same data as a timeval.
    """
    __slots__ = ()

    @property
    def microseconds(self) -> int:
        return self._sub_units

    def to_nanoseconds(self):
        """Exact conversion."""
        from .converter import to_nanoseconds
        return to_nanoseconds(self)
