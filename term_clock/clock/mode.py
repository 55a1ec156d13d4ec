"""
Display modes: a counter (stopwatch/timer) or the wall clock.

``ClockMode`` is a closed union. Code that branches on the mode ends its
``isinstance`` chain with ``assert_never`` so that a new mode is caught by the
type checker at every site.
"""

from dataclasses import dataclass

from .counter import Counter, Stopwatch, Timer, TimeTriple, timer_duration
from .time_zone import TimeZone

DEFAULT_DATE_FORMAT = "%d-%m-%Y"


@dataclass
class CounterMode:
    counter: Counter

    def sample(self) -> TimeTriple:
        return self.counter.sample()

    def text(self, max_len: int) -> str:
        return self.counter.text


@dataclass
class TimeMode:
    time_zone: TimeZone = TimeZone.LOCAL
    date_format: str = DEFAULT_DATE_FORMAT

    def sample(self) -> TimeTriple:
        return self.time_zone.sample()

    def text(self, max_len: int) -> str:
        return self.time_zone.text(self.date_format, max_len)


ClockMode = CounterMode | TimeMode


def build_mode(
    mode_name: str | None,
    *,
    utc: bool = False,
    date_format: str = DEFAULT_DATE_FORMAT,
    seconds: int | None = None,
    minutes: int | None = None,
    hours: int | None = None,
    kill: bool = False,
) -> ClockMode:
    """
    Create the display mode selected on the command line.

    Args:
        mode_name: ``"clock"`` (or None), ``"timer"`` or ``"stopwatch"``.
        utc: Wall clock in UTC instead of local time.
        date_format: ``strftime`` format of the date line.
        seconds, minutes, hours: Timer duration components.
        kill: End the process when the timer reaches zero.

    Raises:
        TimerDurationTooLong: Timer duration over 99h 59m 59s.
        ValueError: Unknown mode name.
    """
    if mode_name in (None, "clock"):
        return TimeMode(TimeZone.from_utc(utc), date_format)

    if mode_name == "stopwatch":
        return CounterMode(Counter(Stopwatch()))

    if mode_name == "timer":
        duration = timer_duration(seconds=seconds, minutes=minutes, hours=hours)
        return CounterMode(Counter(Timer(duration=duration, kill=kill)))

    raise ValueError(f"Unknown mode '{mode_name}'. Available: clock, timer, stopwatch")
