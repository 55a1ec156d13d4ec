"""Tests for term_clock.clock.counter module."""

from unittest.mock import patch

import pytest

from term_clock.clock.counter import (
    DEFAULT_TIMER_DURATION,
    MAX_TIMER_DURATION,
    TEXT,
    TEXT_PAUSED,
    Counter,
    Stopwatch,
    Timer,
    TimeTriple,
    timer_duration,
)
from term_clock.errors import TimerDurationTooLong, TimerExpired

# ─── Helpers ───────────────────────────────────────────────────────


class FakeTime:
    """Stands in for the ``time`` module with a manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def monotonic(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    fake = FakeTime()
    with patch("term_clock.clock.counter.time", fake):
        yield fake


# ─── TimeTriple ────────────────────────────────────────────────────


class TestTimeTriple:
    def test_from_seconds(self):
        assert TimeTriple.from_seconds(3725) == (1, 2, 5)

    def test_zero(self):
        assert TimeTriple.from_seconds(0) == (0, 0, 0)

    def test_hours_are_not_wrapped(self):
        assert TimeTriple.from_seconds(100 * 3600).hours == 100


# ─── Stopwatch ─────────────────────────────────────────────────────


class TestStopwatch:
    def test_counts_up(self, clock):
        counter = Counter(Stopwatch())
        assert counter.sample() == (0, 0, 0)
        clock.advance(61.25)
        assert counter.sample() == (0, 1, 1)

    def test_pause_freezes_reading(self, clock):
        counter = Counter(Stopwatch())
        clock.advance(10)
        counter.toggle_pause()
        clock.advance(50)
        assert counter.sample() == (0, 0, 10)
        assert counter.paused is True

    def test_resume_is_continuous(self, clock):
        counter = Counter(Stopwatch())
        clock.advance(10)
        counter.toggle_pause()
        clock.advance(50)
        counter.toggle_pause()
        assert counter.sample() == (0, 0, 10)
        clock.advance(5)
        assert counter.sample() == (0, 0, 15)
        assert counter.paused is False

    def test_restart_resets_and_runs(self, clock):
        counter = Counter(Stopwatch())
        clock.advance(42)
        counter.restart()
        assert counter.sample() == (0, 0, 0)
        clock.advance(3)
        assert counter.sample() == (0, 0, 3)

    def test_restart_while_paused_resumes(self, clock):
        counter = Counter(Stopwatch())
        clock.advance(42)
        counter.toggle_pause()
        counter.restart()
        assert counter.paused is False
        assert counter.text == TEXT
        clock.advance(2)
        assert counter.sample() == (0, 0, 2)

    def test_status_text_tracks_pause(self, clock):
        counter = Counter(Stopwatch())
        assert counter.text == TEXT
        counter.toggle_pause()
        assert counter.text == TEXT_PAUSED
        counter.toggle_pause()
        assert counter.text == TEXT

    def test_elapsed_never_negative(self, clock):
        counter = Counter(Stopwatch())
        clock.advance(-5)
        assert counter.elapsed() == 0.0


# ─── Timer ─────────────────────────────────────────────────────────


class TestTimer:
    def test_thirty_second_timer_starts_at_thirty(self, clock):
        counter = Counter(Timer(30))
        assert counter.sample() == (0, 0, 30)

    def test_first_second_is_held(self, clock):
        counter = Counter(Timer(30))
        clock.advance(0.75)
        assert counter.sample() == (0, 0, 30)
        clock.advance(0.5)
        assert counter.sample() == (0, 0, 29)

    def test_counts_down(self, clock):
        counter = Counter(Timer(30))
        clock.advance(11)
        assert counter.sample() == (0, 0, 20)

    def test_holds_at_zero(self, clock):
        counter = Counter(Timer(30))
        clock.advance(31)
        assert counter.sample() == (0, 0, 0)
        clock.advance(3600)
        assert counter.sample() == (0, 0, 0)

    def test_never_negative(self, clock):
        counter = Counter(Timer(5))
        for _ in range(20):
            clock.advance(1)
            assert counter.sample() >= (0, 0, 0)

    def test_pause_freezes_countdown(self, clock):
        counter = Counter(Timer(60))
        clock.advance(11)
        counter.toggle_pause()
        clock.advance(100)
        assert counter.sample() == (0, 0, 50)

    def test_restart_restores_duration(self, clock):
        counter = Counter(Timer(60))
        clock.advance(30)
        counter.restart()
        assert counter.sample() == (0, 1, 0)


class TestKillTimer:
    def test_does_not_fire_before_duration(self, clock):
        counter = Counter(Timer(30, kill=True))
        clock.advance(29.5)
        assert counter.sample() == (0, 0, 1)
        clock.advance(0.5)
        assert counter.sample() == (0, 0, 1)

    def test_does_not_fire_at_start(self, clock):
        counter = Counter(Timer(30, kill=True))
        assert counter.sample() == (0, 0, 30)

    def test_fires_once_duration_elapsed(self, clock):
        counter = Counter(Timer(30, kill=True))
        clock.advance(30)
        counter.sample()
        clock.advance(1)
        with pytest.raises(TimerExpired) as exc_info:
            counter.sample()
        assert exc_info.value.duration == 30

    def test_paused_kill_timer_does_not_fire(self, clock):
        counter = Counter(Timer(10, kill=True))
        clock.advance(5)
        counter.toggle_pause()
        clock.advance(100)
        assert counter.sample() == (0, 0, 6)

    def test_timer_without_kill_never_raises(self, clock):
        counter = Counter(Timer(1))
        clock.advance(10)
        assert counter.sample() == (0, 0, 0)


# ─── timer_duration ────────────────────────────────────────────────


class TestTimerDuration:
    def test_default_when_nothing_given(self):
        assert timer_duration() == DEFAULT_TIMER_DURATION == 300

    def test_sums_components(self):
        assert timer_duration(seconds=5, minutes=2, hours=1) == 3725

    def test_zero_components_are_not_default(self):
        assert timer_duration(seconds=0) == 0

    def test_partial_components(self):
        assert timer_duration(minutes=25) == 1500

    def test_maximum_allowed(self):
        assert timer_duration(seconds=59, minutes=59, hours=99) == MAX_TIMER_DURATION

    def test_too_long(self):
        with pytest.raises(TimerDurationTooLong, match="99h, 59m and 59s"):
            timer_duration(hours=100)

    def test_too_long_by_seconds(self):
        with pytest.raises(TimerDurationTooLong):
            timer_duration(seconds=MAX_TIMER_DURATION + 1)
