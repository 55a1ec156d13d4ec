"""
Clock application state and event loop.

``ClockApp`` owns the clock face and drives it:
  - render a frame, then poll for input with the refresh interval as timeout
  - quit on ESC / q / Q / CTRL+C
  - pause (p/P) and restart (r/R) counters
  - recompute the layout on resize or when the text line changes length
  - reload the configuration on CTRL+R or SIGUSR1

The reload request is a single ``threading.Event``: signal handlers and the
CTRL+R key set it, the loop checks and clears it before each frame.
"""

import logging
import signal
import threading
from typing import assert_never

from .clock.counter import Timer
from .clock.mode import CounterMode, TimeMode, build_mode
from .compositor import Clock
from .config import resolve_config
from .terminal import Event, KeyEvent, ResizeEvent, Terminal

logger = logging.getLogger(__name__)

APP_NAME = "term-clock"

QUIT_KEYS = {"esc", "q", "Q"}
PAUSE_KEYS = {"p", "P"}
RESTART_KEYS = {"r", "R"}


def is_quit_key(event: KeyEvent) -> bool:
    if event.ctrl:
        return event.key == "c"
    return event.key in QUIT_KEYS


class ClockApp:
    """Runs one clock face in the terminal until the user quits."""

    def __init__(self, clock: Clock, args=None, environ: dict | None = None,
                 terminal: Terminal | None = None):
        self.clock = clock
        self.args = args
        self.environ = environ
        self.terminal = terminal or Terminal(title=_window_title(clock))
        self.reload_requested = threading.Event()
        self._previous_handlers: dict[int, object] = {}

    @classmethod
    def from_args(cls, args, environ: dict | None = None,
                  terminal: Terminal | None = None) -> "ClockApp":
        """
        Build the app from parsed command-line arguments.

        Configuration, timer and date-format errors are raised here, before the
        terminal is switched to raw mode.
        """
        config = resolve_config(args, environ)
        mode = build_mode(
            getattr(args, "mode", None),
            utc=config.date.utc,
            date_format=config.date.fmt,
            seconds=getattr(args, "seconds", None),
            minutes=getattr(args, "minutes", None),
            hours=getattr(args, "hours", None),
            kill=getattr(args, "kill", False),
        )
        app = cls(Clock(config, mode), args=args, environ=environ, terminal=terminal)
        app.clock.update_layout(*app.terminal.size())
        return app

    # ─── Main Entry Point ────────────────────────────────────────

    def run(self):
        """
        Run the event loop until the user quits.

        The terminal is restored on every exit path. Errors raised inside the
        loop (I/O failures, a failed reload, kill-timer expiry) propagate to the
        caller after the restore.
        """
        with self.terminal:
            self._setup_signals()
            try:
                self._loop()
            finally:
                self._restore_signals()

    def _loop(self):
        while True:
            if self.reload_requested.is_set():
                self.reload_requested.clear()
                self.reload_config()

            self.render()

            event = self.terminal.poll(self.clock.interval)
            if event is None:
                continue
            if not self.handle_event(event):
                return

    # ─── Events ──────────────────────────────────────────────────

    def handle_event(self, event: Event) -> bool:
        """Apply one event. Returns False when the app should exit."""
        if isinstance(event, ResizeEvent):
            self.refresh_display(event.width, event.height)
            return True
        if isinstance(event, KeyEvent):
            return self.handle_key(event)
        assert_never(event)

    def handle_key(self, event: KeyEvent) -> bool:
        if is_quit_key(event):
            logger.debug("Quit requested")
            return False

        if event.ctrl:
            if event.key == "r":
                self.reload_requested.set()
            return True

        if event.key in PAUSE_KEYS or event.key in RESTART_KEYS:
            mode = self.clock.mode
            if isinstance(mode, CounterMode):
                if event.key in PAUSE_KEYS:
                    mode.counter.toggle_pause()
                else:
                    mode.counter.restart()
                self.refresh_display(*self.terminal.size())
            elif isinstance(mode, TimeMode):
                pass
            else:
                assert_never(mode)

        return True

    # ─── Display ─────────────────────────────────────────────────

    def render(self) -> bool:
        """
        Draw the current frame. Returns False when the terminal is too small.

        The layout is recomputed first when the text line changed length since
        it was last laid out (a date format with month or day names). The time
        source is still sampled when nothing is drawn, so a kill-timer expires
        on time in a tiny terminal too.
        """
        width, height = self.terminal.size()

        if self.clock.is_too_large(width, height):
            self.clock.mode.sample()
            return False

        if self.clock.layout_is_stale():
            logger.debug("Text line length changed, recomputing layout")
            self.refresh_display(width, height)

        frame = self.clock.frame()
        self.terminal.draw(self.clock.layout.top, frame)
        return True

    def refresh_display(self, width: int, height: int):
        self.terminal.clear()
        self.clock.update_layout(width, height)

    def reload_config(self):
        """
        Re-read the configuration file and apply it to the running clock.

        Command-line options given at startup still win over the file. A
        configuration or date-format error aborts the app.
        """
        config = resolve_config(self.args, self.environ)
        self.clock.apply_config(config)
        self.refresh_display(*self.terminal.size())
        logger.info("Configuration reloaded")

    # ─── Signals ─────────────────────────────────────────────────

    def _setup_signals(self):
        if hasattr(signal, "SIGUSR1"):
            self._set_handler(signal.SIGUSR1, self._reload_signal_handler)
        for name in ("SIGTERM", "SIGHUP"):
            signum = getattr(signal, name, None)
            if signum is not None:
                self._set_handler(signum, self._exit_signal_handler)

    def _set_handler(self, signum: int, handler):
        self._previous_handlers[signum] = signal.signal(signum, handler)

    def _restore_signals(self):
        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, handler)
        self._previous_handlers.clear()

    def _reload_signal_handler(self, sig, frame):
        # NOTE: Python runs signal handlers in the main thread between
        # bytecodes; only set the flag and wake the poll here.
        self.reload_requested.set()
        self.terminal.wake()

    def _exit_signal_handler(self, sig, frame):
        logger.info("Received signal %d, exiting", sig)
        raise SystemExit(128 + sig)


def _window_title(clock: Clock) -> str:
    mode = clock.mode
    if isinstance(mode, CounterMode):
        kind = "timer" if isinstance(mode.counter.kind, Timer) else "stopwatch"
        return f"{APP_NAME}: {kind}"
    if isinstance(mode, TimeMode):
        return f"{APP_NAME}: clock"
    assert_never(mode)
