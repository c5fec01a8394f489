"""
PreciseTime: Time Value Template

A (seconds, sub_units) pair at a fixed sub-second resolution.
The template carries all normalization and arithmetic; NanosecondTime and
MicrosecondTime only bind a Resolution to it.

Invariant: 0 <= sub_units < resolution.units_per_second on every value a
caller can observe.
"""
from typing import ClassVar, Dict, Optional, Tuple, Type, TypeVar
from .constants import MS_PER_SECOND
from .context import get_time_context
from .errors import ResolutionMismatchError
from .types import Ordering, Resolution

T = TypeVar("T", bound="TimeValue")

def _require_int(name: str, value) -> None:
    # bool is an int subclass but never a meaningful time field
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")

def normalize(seconds: int, sub_units: int, units_per_second: int) -> Tuple[int, int]:
    """
    Returns the equivalent pair with 0 <= sub_units < units_per_second.

    Accepts any sub_units, however far out of range. divmod floors, so a
    negative remainder borrows whole seconds in a single step.
    Raises TimeOverflowError if the resulting seconds leave the active range.
    """
    _require_int("seconds", seconds)
    _require_int("sub_units", sub_units)
    carry, sub_units = divmod(sub_units, units_per_second)
    return get_time_context().check_seconds(seconds + carry), sub_units

class TimeValue:
    """
    Resolution-generic time value.
    Subclasses declare their resolution in the class statement:

        class NanosecondTime(TimeValue, resolution=Resolution.NANOSECOND):
            __slots__ = ()

    Values are snapshots. Only += and -= (add_assign / subtract_assign)
    mutate, and they leave the receiver normalized.
    """
    __slots__ = ("_seconds", "_sub_units")

    resolution: ClassVar[Resolution]

    # Resolution -> concrete type, filled in by __init_subclass__
    _registry: ClassVar[Dict[Resolution, Type["TimeValue"]]] = {}

    def __init_subclass__(cls, resolution: Optional[Resolution] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if resolution is not None:
            cls.resolution = resolution
            TimeValue._registry[resolution] = cls

    def __init__(self, seconds: int = 0, sub_units: int = 0):
        if getattr(type(self), "resolution", None) is None:
            raise TypeError(f"{type(self).__name__} has no resolution; use NanosecondTime or MicrosecondTime")
        self._seconds, self._sub_units = normalize(seconds, sub_units, self.resolution.units_per_second)

    @classmethod
    def _from_normalized(cls: Type[T], seconds: int, sub_units: int) -> T:
        """Skips the divmod; sub_units must already be in range."""
        value = cls.__new__(cls)
        value._seconds = get_time_context().check_seconds(seconds)
        value._sub_units = sub_units
        return value

    @staticmethod
    def for_resolution(resolution: Resolution) -> Type["TimeValue"]:
        """Concrete type bound to `resolution`."""
        try:
            return TimeValue._registry[resolution]
        except KeyError:
            raise ValueError(f"No time type registered for {resolution!r}") from None

    # --- Construction ---

    @classmethod
    def from_milliseconds(cls: Type[T], ms: int) -> T:
        """
        Whole milliseconds to a value. ms must be a non-negative int.
        """
        _require_int("ms", ms)
        if ms < 0:
            raise ValueError(f"ms must be non-negative, got {ms}")
        seconds, remainder = divmod(ms, MS_PER_SECOND)
        return cls._from_normalized(seconds, remainder * cls.resolution.units_per_ms)

    @classmethod
    def from_total(cls: Type[T], units: int) -> T:
        """Inverse of total_sub_units()."""
        _require_int("units", units)
        seconds, sub_units = divmod(units, cls.resolution.units_per_second)
        return cls._from_normalized(seconds, sub_units)

    # --- Accessors ---

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def sub_units(self) -> int:
        return self._sub_units

    def as_tuple(self) -> Tuple[int, int]:
        return (self._seconds, self._sub_units)

    def total_sub_units(self) -> int:
        """Whole value as a single count of resolution units. Lossless."""
        return self._seconds * self.resolution.units_per_second + self._sub_units

    def to_seconds(self) -> float:
        """
        Float seconds for display only.
        Lossy; never use for ordering or equality.
        """
        return self._seconds + self._sub_units / self.resolution.units_per_second

    # --- Arithmetic ---

    def _check_peer(self, other: "TimeValue") -> None:
        if not isinstance(other, TimeValue):
            raise TypeError(f"expected a time value, got {type(other).__name__}")
        if other.resolution is not self.resolution:
            raise ResolutionMismatchError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}; convert explicitly"
            )

    def _sum(self, other: "TimeValue") -> Tuple[int, int]:
        self._check_peer(other)
        ups = self.resolution.units_per_second
        seconds = self._seconds + other._seconds
        sub_units = self._sub_units + other._sub_units
        # Both addends are in [0, ups), so one carry is enough
        if sub_units >= ups:
            seconds += 1
            sub_units -= ups
        return get_time_context().check_seconds(seconds), sub_units

    def _difference(self, other: "TimeValue") -> Tuple[int, int]:
        self._check_peer(other)
        seconds = self._seconds - other._seconds
        sub_units = self._sub_units - other._sub_units
        # Range is (-ups, ups), so one borrow is enough
        if sub_units < 0:
            seconds -= 1
            sub_units += self.resolution.units_per_second
        return get_time_context().check_seconds(seconds), sub_units

    def add(self: T, other: T) -> T:
        """Returns self + other as a new value."""
        return type(self)._from_normalized(*self._sum(other))

    def subtract(self: T, other: T) -> T:
        """
        Returns self - other as a new value.
        Seconds go negative when other is later than self.
        """
        return type(self)._from_normalized(*self._difference(other))

    def add_assign(self: T, other: T) -> T:
        """Accumulates other into self."""
        self._seconds, self._sub_units = self._sum(other)
        return self

    def subtract_assign(self: T, other: T) -> T:
        self._seconds, self._sub_units = self._difference(other)
        return self

    def __add__(self, other):
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self.subtract(other)

    def __iadd__(self, other):
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self.add_assign(other)

    def __isub__(self, other):
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self.subtract_assign(other)

    # --- Comparison ---

    def compare(self, other: "TimeValue") -> Ordering:
        """
        Three-way compare: seconds first, sub_units only when seconds match.
        """
        self._check_peer(other)
        if self._seconds != other._seconds:
            return Ordering.LESS if self._seconds < other._seconds else Ordering.GREATER
        if self._sub_units != other._sub_units:
            return Ordering.LESS if self._sub_units < other._sub_units else Ordering.GREATER
        return Ordering.EQUAL

    # Different resolutions are never equal; only ordering and arithmetic raise
    def __eq__(self, other):
        if not isinstance(other, TimeValue) or other.resolution is not self.resolution:
            return NotImplemented
        return self.compare(other) is Ordering.EQUAL

    def __ne__(self, other):
        if not isinstance(other, TimeValue) or other.resolution is not self.resolution:
            return NotImplemented
        return self.compare(other) is not Ordering.EQUAL

    def __lt__(self, other):
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other):
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other):
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other):
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    # Mutable through += and -=
    __hash__ = None

    # --- Debug text ---

    def __str__(self) -> str:
        return f"({self._seconds} sec, {self._sub_units} {self.resolution.unit})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self}"

def add(a: T, b: T) -> T:
    return a.add(b)

def subtract(a: T, b: T) -> T:
    return a.subtract(b)

def compare(a: TimeValue, b: TimeValue) -> Ordering:
    return a.compare(b)
