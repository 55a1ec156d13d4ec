"""
Pausable, restartable counters: stopwatch and countdown timer.

Time is measured with ``time.monotonic()`` so wall-clock adjustments never
move a running counter.
"""

import logging
import time
from dataclasses import dataclass
from typing import NamedTuple

from ..errors import TimerDurationTooLong, TimerExpired

logger = logging.getLogger(__name__)

DEFAULT_TIMER_DURATION = 5 * 60
MAX_TIMER_DURATION = 99 * 3600 + 59 * 60 + 59

TEXT = "P: Toggle Pause, R: Restart"
TEXT_PAUSED = "P: Toggle Pause, R: Restart [Paused]"


class TimeTriple(NamedTuple):
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_seconds(cls, total: int) -> "TimeTriple":
        hours, remainder = divmod(total, 3600)
        minutes, seconds = divmod(remainder, 60)
        return cls(hours, minutes, seconds)


# ─── Counter Kinds ───────────────────────────────────────────────


@dataclass(frozen=True)
class Stopwatch:
    """Counts up from zero."""


@dataclass(frozen=True)
class Timer:
    """Counts down from *duration* seconds; with *kill*, expiry ends the process."""

    duration: int
    kill: bool = False


CounterKind = Stopwatch | Timer


# ─── Counter ─────────────────────────────────────────────────────


class Counter:
    """A stopwatch or timer that can be paused, resumed and restarted."""

    def __init__(self, kind: CounterKind):
        self.kind = kind
        self.text = TEXT
        self._start: float = time.monotonic()
        self._paused_at: float | None = None

    @property
    def paused(self) -> bool:
        return self._paused_at is not None

    def toggle_pause(self):
        """Pause a running counter, or resume a paused one where it left off."""
        now = time.monotonic()
        if self._paused_at is None:
            self._paused_at = now
            self.text = TEXT_PAUSED
            logger.debug("Counter paused at %.3f", now)
        else:
            # Fold the paused span into the start instant so elapsed time is continuous
            self._start += now - self._paused_at
            self._paused_at = None
            self.text = TEXT
            logger.debug("Counter resumed at %.3f", now)

    def restart(self):
        """Reset to the initial value; the counter is always running afterwards."""
        self._start = time.monotonic()
        self._paused_at = None
        self.text = TEXT
        logger.debug("Counter restarted")

    def elapsed(self) -> float:
        """Seconds counted so far, frozen while paused."""
        end = self._paused_at if self._paused_at is not None else time.monotonic()
        return max(end - self._start, 0.0)

    def sample(self) -> TimeTriple:
        """
        Current reading of the counter.

        A timer shows ``duration - (elapsed - 1s)``, so its first second is held
        for a full interval and zero is reached only once the whole duration has
        elapsed.

        Raises:
            TimerExpired: A kill-timer reached zero.
        """
        elapsed = self.elapsed()

        if isinstance(self.kind, Timer):
            remaining = max(self.kind.duration - max(elapsed - 1.0, 0.0), 0.0)
            secs = int(remaining)
            if self.kind.kill and secs == 0:
                logger.info("Kill-timer of %ds expired", self.kind.duration)
                raise TimerExpired(self.kind.duration)
        else:
            secs = int(elapsed)

        return TimeTriple.from_seconds(secs)


def timer_duration(
    seconds: int | None = None,
    minutes: int | None = None,
    hours: int | None = None,
) -> int:
    """
    Total timer duration in seconds.

    Falls back to ``DEFAULT_TIMER_DURATION`` when no component is given.

    Raises:
        TimerDurationTooLong: The total exceeds 99h 59m 59s.
    """
    if seconds is None and minutes is None and hours is None:
        return DEFAULT_TIMER_DURATION

    seconds = seconds or 0
    minutes = minutes or 0
    hours = hours or 0
    total = hours * 3600 + minutes * 60 + seconds

    if total > MAX_TIMER_DURATION:
        raise TimerDurationTooLong(hours, minutes, seconds)

    return total
