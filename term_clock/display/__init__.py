"""
Rich terminal display helpers for term-clock.

Provides the console singletons, terminal title helpers and the
error/warning/info messages printed around the clock session.

All public symbols are re-exported here so that imports like
``from term_clock.display import show_error, console`` work.
"""

from .core import (
    console,
    err_console,
    format_elapsed,
    reset_terminal_title,
    set_terminal_title,
)
from .messages import show_error, show_info, show_warning

__all__ = [
    # Core
    "console",
    "err_console",
    "format_elapsed",
    "reset_terminal_title",
    "set_terminal_title",
    # Messages
    "show_error",
    "show_info",
    "show_warning",
]
