"""
PreciseTime Clock Package

Boundary to the operating system clocks. The value types never read a
clock themselves; they are handed samples through this package.
"""
from .source import ClockSource
from .system import SystemClockSource
from .intake import Clock, ingest

__all__ = [
    "ClockSource",
    "SystemClockSource",
    "Clock",
    "ingest",
]
