"""
Time sources for the clock face: counters and the wall clock.

All public symbols are re-exported here so callers can use
``from term_clock.clock import Counter, TimeMode``.
"""

from .counter import (
    DEFAULT_TIMER_DURATION,
    MAX_TIMER_DURATION,
    TEXT,
    TEXT_PAUSED,
    Counter,
    CounterKind,
    Stopwatch,
    Timer,
    TimeTriple,
    timer_duration,
)
from .mode import DEFAULT_DATE_FORMAT, ClockMode, CounterMode, TimeMode, build_mode
from .time_zone import TimeZone

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_TIMER_DURATION",
    "MAX_TIMER_DURATION",
    "TEXT",
    "TEXT_PAUSED",
    "ClockMode",
    "Counter",
    "CounterKind",
    "CounterMode",
    "Stopwatch",
    "TimeMode",
    "TimeTriple",
    "TimeZone",
    "Timer",
    "build_mode",
    "timer_duration",
]
