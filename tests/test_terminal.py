"""Tests for term_clock.terminal module."""

import io
import os
import termios
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from term_clock.errors import TerminalIoFailure
from term_clock.terminal import KeyEvent, ResizeEvent, Terminal, decode_keys

# ─── Helpers ───────────────────────────────────────────────────────


def _console(width: int = 80, height: int = 24) -> Console:
    return Console(file=io.StringIO(), force_terminal=True, width=width, height=height)


class BrokenFile(io.StringIO):
    def write(self, text):
        raise OSError("broken pipe")


@pytest.fixture
def piped_terminal():
    """A Terminal reading keys from a pipe instead of the controlling tty."""
    read_fd, write_fd = os.pipe()
    terminal = Terminal(console=_console())
    terminal._fd = read_fd
    terminal._size = terminal.size()
    yield terminal, write_fd
    os.close(read_fd)
    os.close(write_fd)


# ─── decode_keys ───────────────────────────────────────────────────


class TestDecodeKeys:
    def test_plain_characters(self):
        assert decode_keys(b"qP") == [KeyEvent("q"), KeyEvent("P")]

    def test_ctrl_c(self):
        assert decode_keys(b"\x03") == [KeyEvent("c", ctrl=True)]

    def test_ctrl_r(self):
        assert decode_keys(b"\x12") == [KeyEvent("r", ctrl=True)]

    def test_lone_escape(self):
        assert decode_keys(b"\x1b") == [KeyEvent("esc")]

    def test_escape_sequence_is_unknown(self):
        assert decode_keys(b"\x1b[A") == [KeyEvent("unknown")]

    def test_keys_before_escape_sequence(self):
        assert decode_keys(b"p\x1b[B") == [KeyEvent("p"), KeyEvent("unknown")]

    def test_other_control_bytes(self):
        assert decode_keys(b"\x00\x7f") == [KeyEvent("unknown"), KeyEvent("unknown")]

    def test_utf8(self):
        assert decode_keys("é".encode()) == [KeyEvent("é")]

    def test_empty(self):
        assert decode_keys(b"") == []


# ─── Output ────────────────────────────────────────────────────────


class TestTerminalOutput:
    def test_size_from_console(self):
        assert Terminal(console=_console(100, 40)).size() == (100, 40)

    def test_draw_moves_cursor_then_writes(self):
        console = _console()
        Terminal(console=console).draw(9, "frame")
        output = console.file.getvalue()
        assert output.endswith("\x1b[10;1Hframe")

    def test_draw_io_error(self):
        console = _console()
        console.file = BrokenFile()
        with pytest.raises(TerminalIoFailure, match="broken pipe"):
            Terminal(console=console).draw(0, "frame")


# ─── Session ───────────────────────────────────────────────────────


class TestTerminalSession:
    def test_enter_failure_is_terminal_io_failure(self):
        stdin = MagicMock()
        stdin.fileno.return_value = 0
        with (
            patch("term_clock.terminal.sys.stdin", stdin),
            patch("term_clock.terminal.termios.tcgetattr", side_effect=termios.error("no tty")),
        ):
            terminal = Terminal(console=_console())
            with pytest.raises(TerminalIoFailure):
                terminal.__enter__()
        assert terminal.active is False

    def test_restore_is_idempotent_when_inactive(self):
        terminal = Terminal(console=_console())
        terminal.restore()
        terminal.restore()
        assert terminal.active is False

    def test_wake_without_session_is_noop(self):
        Terminal(console=_console()).wake()


# ─── Input ─────────────────────────────────────────────────────────


class TestTerminalPoll:
    def test_timeout_returns_none(self, piped_terminal):
        terminal, _ = piped_terminal
        assert terminal.poll(0) is None

    def test_reads_key(self, piped_terminal):
        terminal, write_fd = piped_terminal
        os.write(write_fd, b"q")
        assert terminal.poll(0.5) == KeyEvent("q")

    def test_queues_multiple_keys(self, piped_terminal):
        terminal, write_fd = piped_terminal
        os.write(write_fd, b"pr")
        assert terminal.poll(0.5) == KeyEvent("p")
        assert terminal.poll(0) == KeyEvent("r")

    def test_resize_reported_first(self, piped_terminal):
        terminal, write_fd = piped_terminal
        terminal._size = (10, 10)
        os.write(write_fd, b"q")
        assert terminal.poll(0.5) == ResizeEvent(80, 24)
        assert terminal.poll(0) == KeyEvent("q")

    def test_end_of_input(self):
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        terminal = Terminal(console=_console())
        terminal._fd = read_fd
        try:
            with pytest.raises(TerminalIoFailure, match="end of input"):
                terminal.poll(0.5)
        finally:
            os.close(read_fd)

    def test_timeout_out_of_range(self, piped_terminal):
        terminal, _ = piped_terminal
        with pytest.raises(TerminalIoFailure, match="IO error"):
            terminal.poll(1e16)
