from typing import Optional
from .source import ClockSource
from .system import SystemClockSource
from ..core.errors import ClockReadError
from ..core.logger import get_logger
from ..core.timevalue import TimeValue
from ..core.types import ClockDomain, ClockSample, Resolution

def ingest(sample: ClockSample) -> TimeValue:
    """
    Normalizes a raw sample into the time type of its resolution.
    """
    value_type = TimeValue.for_resolution(sample.resolution)
    return value_type(sample.seconds, sample.sub_units)

class Clock:
    """
    Authoritative "now" for callers that need one.
    The ClockSource is injected; SystemClockSource is used when none is given.
    """
    def __init__(self, source: Optional[ClockSource] = None):
        self.source = source if source is not None else SystemClockSource()
        # Bound per instance; a cached module logger would ignore later configuration
        self.logger = get_logger("ClockIntake")

    def read(self, domain: ClockDomain, resolution: Resolution = Resolution.NANOSECOND) -> TimeValue:
        """
        Samples `domain` once and returns a normalized value.
        A failed read is logged and re-raised; it is never turned into zero.
        """
        try:
            sample = self.source.sample(domain, resolution)
            if sample.domain is not domain or sample.resolution is not resolution:
                raise ClockReadError(
                    f"Clock source returned {sample.domain.value}/{sample.resolution.value}, "
                    f"expected {domain.value}/{resolution.value}",
                    domain=domain.value,
                )
        except ClockReadError as e:
            self.logger.error("clock_read_failed", domain=domain.value, resolution=resolution.value, error=str(e))
            raise
        self.logger.debug("clock_sample", domain=domain.value, seconds=sample.seconds, sub_units=sample.sub_units)
        return ingest(sample)

    def now(self, resolution: Resolution = Resolution.NANOSECOND) -> TimeValue:
        """
        Wall clock time (CLOCK_REALTIME).
        Use for timestamps that must line up with other hosts, NOT for intervals.
        """
        return self.read(ClockDomain.WALL_CLOCK, resolution)

    def now_monotonic(self, resolution: Resolution = Resolution.NANOSECOND) -> TimeValue:
        """
        Monotonic time (CLOCK_MONOTONIC). Slewed by NTP but never steps backwards.
        """
        return self.read(ClockDomain.MONOTONIC, resolution)

    def now_monotonic_raw(self, resolution: Resolution = Resolution.NANOSECOND) -> TimeValue:
        """
        Raw hardware monotonic time (CLOCK_MONOTONIC_RAW), not adjusted by NTP.
        """
        return self.read(ClockDomain.MONOTONIC_RAW, resolution)

    def elapsed_since(self, start: TimeValue) -> TimeValue:
        """
        Monotonic now - start, in start's resolution.
        `start` must come from now_monotonic().
        """
        return self.now_monotonic(start.resolution) - start
