"""
Terminal session for the clock: raw input, alternate screen and input polling.

``Terminal`` is a context manager. Entering it switches stdin to raw mode,
enters the alternate screen and hides the cursor; leaving it undoes all three.
Restoration runs exactly once, on whichever exit path comes first: the end of
the ``with`` block, an exception unwinding through it, or interpreter exit.

Handles:
  - Bounded-timeout polling of stdin with ``select``
  - Decoding raw key bytes into ``KeyEvent``s
  - Resize detection (SIGWINCH wakes the poll, sizes are compared every poll)
  - A self-pipe so signal handlers can interrupt a pending poll
"""

import atexit
import contextlib
import logging
import os
import select
import signal
import sys
import termios
import tty
from collections import deque
from dataclasses import dataclass

from rich.console import Console
from rich.control import Control

from .display import console as default_console
from .display import reset_terminal_title, set_terminal_title
from .errors import TerminalIoFailure

logger = logging.getLogger(__name__)

ESC = "\x1b"
READ_CHUNK = 64


# ─── Events ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class KeyEvent:
    """A key press. *key* is the character typed, ``"esc"`` or ``"unknown"``."""

    key: str
    ctrl: bool = False


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = KeyEvent | ResizeEvent


def decode_keys(data: bytes) -> list[KeyEvent]:
    """
    Decode bytes read from a raw-mode terminal into key events.

    Control bytes 0x01–0x1a become CTRL+letter. A lone ESC is the Escape key;
    ESC followed by more bytes is an escape sequence (arrows, ALT+key, …) and
    is reported as a single ``"unknown"`` key.
    """
    text = data.decode("utf-8", errors="replace")
    events = []

    for i, ch in enumerate(text):
        code = ord(ch)
        if ch == ESC:
            if i == len(text) - 1:
                events.append(KeyEvent("esc"))
            else:
                events.append(KeyEvent("unknown"))
            break
        if 1 <= code <= 26:
            events.append(KeyEvent(chr(code + ord("a") - 1), ctrl=True))
        elif code < 32 or code == 127:
            events.append(KeyEvent("unknown"))
        else:
            events.append(KeyEvent(ch))

    return events


# ─── Terminal ────────────────────────────────────────────────────


class Terminal:
    """Raw-mode alternate-screen session on the controlling terminal."""

    def __init__(self, console: Console | None = None, title: str = ""):
        self.console = console or default_console
        self.title = title
        self._fd: int | None = None
        self._saved_attrs: list | None = None
        self._active = False
        self._pending: deque[Event] = deque()
        self._wake_r: int | None = None
        self._wake_w: int | None = None
        self._previous_winch = None
        self._size: tuple[int, int] = (0, 0)

    # ─── Session ─────────────────────────────────────────────────

    def __enter__(self) -> "Terminal":
        try:
            self._fd = sys.stdin.fileno()
            self._saved_attrs = termios.tcgetattr(self._fd)
            tty.setraw(self._fd)
            self._active = True
            atexit.register(self.restore)

            self.console.set_alt_screen(True)
            self.console.show_cursor(False)

            self._wake_r, self._wake_w = os.pipe()
            os.set_blocking(self._wake_r, False)
            os.set_blocking(self._wake_w, False)
            if hasattr(signal, "SIGWINCH"):
                self._previous_winch = signal.signal(signal.SIGWINCH, self._on_winch)
        except (OSError, termios.error) as e:
            self.restore()
            raise TerminalIoFailure(str(e)) from e

        if self.title:
            set_terminal_title(self.title, self.console)
        self._size = self.size()
        logger.debug("Entered terminal session (%dx%d)", *self._size)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False

    @property
    def active(self) -> bool:
        return self._active

    def restore(self):
        """Leave the alternate screen, show the cursor and leave raw mode. Idempotent."""
        if not self._active:
            return
        self._active = False
        atexit.unregister(self.restore)

        if self._previous_winch is not None:
            signal.signal(signal.SIGWINCH, self._previous_winch)
            self._previous_winch = None

        try:
            self.console.set_alt_screen(False)
            self.console.show_cursor(True)
        except OSError as e:
            logger.warning("Failed to leave alternate screen: %s", e)

        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
        except (OSError, termios.error) as e:
            logger.warning("Failed to disable raw mode: %s", e)

        for fd in (self._wake_r, self._wake_w):
            if fd is not None:
                with contextlib.suppress(OSError):
                    os.close(fd)
        self._wake_r = self._wake_w = None

        if self.title:
            reset_terminal_title(self.console)
        logger.debug("Left terminal session")

    # ─── Output ──────────────────────────────────────────────────

    def size(self) -> tuple[int, int]:
        dimensions = self.console.size
        return dimensions.width, dimensions.height

    def clear(self):
        try:
            self.console.clear()
        except OSError as e:
            raise TerminalIoFailure(str(e)) from e

    def draw(self, top: int, text: str):
        """Write *text* starting at column 0 of row *top*."""
        try:
            self.console.control(Control.move_to(0, top))
            self.console.file.write(text)
            self.console.file.flush()
        except OSError as e:
            raise TerminalIoFailure(str(e)) from e

    # ─── Input ───────────────────────────────────────────────────

    def wake(self):
        """Interrupt a pending ``poll``; safe to call from a signal handler."""
        if self._wake_w is None:
            return
        with contextlib.suppress(OSError):
            os.write(self._wake_w, b"\0")

    def _on_winch(self, signum, frame):
        self.wake()

    def poll(self, timeout: float) -> Event | None:
        """
        Wait up to *timeout* seconds for an event.

        Returns:
            The next key or resize event, or None when the timeout elapsed
            (or a signal woke the poll) without one.

        Raises:
            TerminalIoFailure: Polling or reading stdin failed, or stdin closed. A
                timeout too large for `select` counts as a polling failure.
        """
        if self._pending:
            return self._pending.popleft()

        fds = [fd for fd in (self._fd, self._wake_r) if fd is not None]
        try:
            ready, _, _ = select.select(fds, [], [], timeout)
            if self._wake_r is not None and self._wake_r in ready:
                self._drain_wake()
            if self._fd in ready:
                data = os.read(self._fd, READ_CHUNK)
                if not data:
                    raise TerminalIoFailure("end of input on stdin")
                self._pending.extend(decode_keys(data))
        except (OSError, OverflowError) as e:
            raise TerminalIoFailure(str(e)) from e

        size = self.size()
        if size != self._size:
            self._size = size
            logger.debug("Terminal resized to %dx%d", *size)
            self._pending.appendleft(ResizeEvent(*size))

        return self._pending.popleft() if self._pending else None

    def _drain_wake(self):
        with contextlib.suppress(BlockingIOError):
            while os.read(self._wake_r, READ_CHUNK):
                pass
