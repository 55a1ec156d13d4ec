"""
term-clock — a large ASCII-art clock, timer and stopwatch for the terminal.

Renders the readout in the terminal's alternate screen, keeps it positioned
as the terminal resizes, supports pause/restart for counters and reloads its
configuration on SIGUSR1 or CTRL+R.
"""

__version__ = "1.0.0"
