"""
Core display components: console singletons and small terminal helpers.
"""

from rich.console import Console

from ..clock.counter import TimeTriple

# ─── Singleton Consoles ──────────────────────────────────────────

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


# ─── Terminal Title ──────────────────────────────────────────────


def set_terminal_title(text: str, target: Console | None = None) -> bool:
    """Set the window title. Returns False when the output is not a terminal."""
    return (target or console).set_window_title(text)


def reset_terminal_title(target: Console | None = None) -> bool:
    """Clear the window title; terminals fall back to their own default."""
    return (target or console).set_window_title("")


# ─── Helpers ─────────────────────────────────────────────────────


def format_elapsed(seconds: float) -> str:
    """Format a duration for messages: ``45s``, ``1m 30s``, ``2h 05m 00s``."""
    hours, minutes, secs = TimeTriple.from_seconds(int(seconds))

    if hours:
        return f"{hours}h {minutes:02d}m {secs:02d}s"
    if minutes:
        return f"{minutes}m {secs:02d}s"
    return f"{secs}s"
