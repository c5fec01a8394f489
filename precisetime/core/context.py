"""
PreciseTime: Global Time Context

Defines the single process-wide range check applied to every seconds field.
Normalization, addition and subtraction all consult the active context.
"""
from dataclasses import dataclass
from .constants import INT64_MIN, INT64_MAX
from .errors import TimeOverflowError

@dataclass(frozen=True)
class TimeContext:
    """
    Immutable limits for the seconds field.
    Overflow policy is fail-fast: values outside the range raise TimeOverflowError.
    """
    seconds_min: int = INT64_MIN
    seconds_max: int = INT64_MAX

    def __post_init__(self):
        if self.seconds_min > self.seconds_max:
            raise ValueError(
                f"seconds_min ({self.seconds_min}) must not exceed seconds_max ({self.seconds_max})"
            )

    @classmethod
    def from_bits(cls, bits: int) -> "TimeContext":
        """
        Signed range of a seconds field `bits` wide, e.g. 32 for a 32-bit time_t.
        """
        if bits < 2:
            raise ValueError(f"bits must be >= 2, got {bits}")
        return cls(seconds_min=-(2 ** (bits - 1)), seconds_max=2 ** (bits - 1) - 1)

    def check_seconds(self, seconds: int) -> int:
        if seconds < self.seconds_min or seconds > self.seconds_max:
            raise TimeOverflowError(seconds, self.seconds_min, self.seconds_max)
        return seconds

# --- GLOBAL TIME CONTEXT ---
TIME_CONTEXT = TimeContext()

_active_context = TIME_CONTEXT

def init_time_context(context: TimeContext = TIME_CONTEXT) -> TimeContext:
    """
    Installs the global time context. Call once at startup.
    Returns the previously active context so tests can restore it.
    """
    global _active_context
    previous = _active_context
    _active_context = context
    return previous

def get_time_context() -> TimeContext:
    return _active_context
