import time
from typing import Callable, Dict, Optional
from .source import ClockSource
from ..core.constants import NS_PER_SECOND, NS_PER_US
from ..core.errors import ClockReadError
from ..core.types import ClockDomain, ClockSample, Resolution

# POSIX clock id per domain
CLOCK_NAMES: Dict[ClockDomain, str] = {
    ClockDomain.WALL_CLOCK: "CLOCK_REALTIME",
    ClockDomain.MONOTONIC: "CLOCK_MONOTONIC",
    ClockDomain.MONOTONIC_RAW: "CLOCK_MONOTONIC_RAW",
}

# Used where clock_gettime_ns is missing (Windows). No raw monotonic there.
_FALLBACKS: Dict[ClockDomain, str] = {
    ClockDomain.WALL_CLOCK: "time_ns",
    ClockDomain.MONOTONIC: "monotonic_ns",
}

class SystemClockSource(ClockSource):
    """
    Reads the host clocks through the `time` module.
    Uses clock_gettime_ns() so the full nanosecond reading is kept as an int.
    """

    def _reader(self, domain: ClockDomain) -> Callable[[], int]:
        clock_gettime_ns = getattr(time, "clock_gettime_ns", None)
        clock_id: Optional[int] = getattr(time, CLOCK_NAMES[domain], None)
        if clock_gettime_ns is not None and clock_id is not None:
            return lambda: clock_gettime_ns(clock_id)
        fallback_name = _FALLBACKS.get(domain)
        if fallback_name is None:
            raise ClockReadError(
                f"{CLOCK_NAMES[domain]} is not available on this platform",
                domain=domain.value,
            )
        return getattr(time, fallback_name)

    def read_ns(self, domain: ClockDomain) -> int:
        """
        Returns the raw reading of `domain` as total nanoseconds.
        """
        reader = self._reader(domain)
        try:
            return reader()
        except OSError as e:
            raise ClockReadError(f"Reading {CLOCK_NAMES[domain]} failed: {e}", domain=domain.value) from e

    def sample(self, domain: ClockDomain, resolution: Resolution) -> ClockSample:
        seconds, nanoseconds = divmod(self.read_ns(domain), NS_PER_SECOND)
        # timeval style readings drop the sub-microsecond digits
        sub_units = nanoseconds if resolution is Resolution.NANOSECOND else nanoseconds // NS_PER_US
        return ClockSample(domain=domain, resolution=resolution, seconds=seconds, sub_units=sub_units)
