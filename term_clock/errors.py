"""
Error types for term-clock.

Every failure that should end the process with a message derives from
``ClockError``. ``TimerExpired`` is not an error: it is the terminal state of
a kill-timer and travels the same teardown path.
"""


class ClockError(Exception):
    """Base class for all reportable term-clock failures."""


class ConfigPathInvalid(ClockError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"configuration path is invalid unicode: `{path}`")


class ConfigReadFailed(ClockError):
    def __init__(self, path: str, err: str):
        self.path = path
        self.err = err
        super().__init__(f"failed to read file `{path}`: {err}")


class ConfigParseFailed(ClockError):
    def __init__(self, path: str, err: str):
        self.path = path
        self.err = err
        super().__init__(f"failed to parse configuration file `{path}`:\n{err}")


class TimerDurationTooLong(ClockError):
    def __init__(self, hours: int, minutes: int, seconds: int):
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        super().__init__(
            f"the timer duration is too long: {hours}h, {minutes}m and {seconds}s "
            "exceed the maximum duration of 99h, 59m and 59s"
        )


class DateFormatInvalid(ClockError):
    def __init__(self, fmt: str, err: str):
        self.fmt = fmt
        self.err = err
        super().__init__(f"failed to format the date string `{fmt}`: {err}")


class DateFormatTooWide(ClockError):
    def __init__(self, fmt_len: int, max_len: int):
        self.fmt_len = fmt_len
        self.max_len = max_len
        super().__init__(f"the formatted date exceeds the clock's width: {fmt_len} > {max_len}")


class TerminalIoFailure(ClockError):
    def __init__(self, err: str):
        self.err = err
        super().__init__(f"IO error: {err}")


class TimerExpired(Exception):
    """Raised by a kill-timer once its remaining time reaches zero."""

    def __init__(self, duration: int):
        self.duration = duration
        super().__init__(f"timer of {duration}s expired")
