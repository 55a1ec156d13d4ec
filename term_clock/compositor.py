"""
Clock face composition.

``Clock`` bundles the display settings, the active mode and the current
layout, and turns one sample of the time source into the text written to the
terminal for a frame.
"""

from typing import assert_never

from .clock.mode import ClockMode, CounterMode, TimeMode
from .clock.time_zone import TimeZone
from .color import BOLD, RESET
from .config import Config
from .layout import Layout, compute_layout, is_too_large
from .renderer import GLYPH_ROWS, block_width, render_digit, render_glyph, separator_symbol

AM_SUFFIX = " [AM]"
PM_SUFFIX = " [PM]"
SUFFIX_LEN = len(AM_SUFFIX)

FULL_WIDTH = block_width("00:00:00")
NO_SECONDS_WIDTH = block_width("00:00")

LINE_END = "\r\n"


def to_12h(hour: int) -> tuple[int, str]:
    """Convert a 0–23 hour to its 12-hour display value and suffix."""
    if hour >= 12:
        hour -= 12
        suffix = PM_SUFFIX
    else:
        suffix = AM_SUFFIX
    return (hour or 12), suffix


class Clock:
    """The clock face: settings, mode and layout for one terminal."""

    def __init__(self, config: Config, mode: ClockMode):
        self.mode = mode
        self.layout = Layout()
        self.layout_text_len = 0
        self.apply_config(config)

    def apply_config(self, config: Config):
        """Overwrite every display setting; the kind of mode never changes."""
        self.color = config.general.color
        self.interval_ms = config.general.interval
        self.blink = config.general.blink
        self.bold = config.general.bold
        self.x_pos = config.position.horizontal
        self.y_pos = config.position.vertical
        self.use_12h = config.date.use_12h
        self.hide_seconds = config.date.hide_seconds

        mode = self.mode
        if isinstance(mode, TimeMode):
            mode.time_zone = TimeZone.from_utc(config.date.utc)
            mode.date_format = config.date.fmt
        elif isinstance(mode, CounterMode):
            pass
        else:
            assert_never(mode)

    # ─── Geometry ────────────────────────────────────────────────

    @property
    def interval(self) -> float:
        """Polling interval in seconds."""
        return self.interval_ms / 1000

    @property
    def width(self) -> int:
        return NO_SECONDS_WIDTH if self.hide_seconds else FULL_WIDTH

    @property
    def shows_suffix(self) -> bool:
        return isinstance(self.mode, TimeMode) and self.use_12h

    def text_len(self) -> int:
        """Length of the text line including the AM/PM suffix when shown."""
        length = len(self.mode.text(self.width))
        if self.shows_suffix:
            length += SUFFIX_LEN
        return length

    def update_layout(self, width: int, height: int):
        """
        Recompute the layout for a terminal of *width* x *height*.

        Raises:
            DateFormatInvalid, DateFormatTooWide: The date line cannot be built.
        """
        self.layout_text_len = self.text_len()
        self.layout = compute_layout(
            width,
            height,
            self.width,
            self.layout_text_len,
            self.x_pos,
            self.y_pos,
        )

    def layout_is_stale(self) -> bool:
        """True when the text line changed length since the last layout, e.g. a new month name."""
        return self.text_len() != self.layout_text_len

    def is_too_large(self, width: int, height: int) -> bool:
        return is_too_large(width, height, self.width)

    # ─── Frame ───────────────────────────────────────────────────

    def frame(self) -> str:
        """
        Render one frame: five glyph rows, a spacer line and the text line.

        Raises:
            TimerExpired: A kill-timer reached zero.
            DateFormatInvalid, DateFormatTooWide: The date line cannot be built.
        """
        text = self.mode.text(self.width)
        hour, minute, second = self.mode.sample()

        if self.shows_suffix:
            hour, suffix = to_12h(hour)
            text += suffix

        # Counters may run past 99 hours; only two hour digits fit
        h0, h1 = divmod(hour % 100, 10)
        m0, m1 = divmod(minute, 10)
        s0, s1 = divmod(second, 10)

        color = self.color
        separator = separator_symbol(second, self.blink)
        lines = []

        for row in range(GLYPH_ROWS):
            colon = render_glyph(separator, row, color)
            parts = [
                self.layout.clock_padding,
                render_digit(h0, row, color),
                render_digit(h1, row, color),
                colon,
                render_digit(m0, row, color),
                render_digit(m1, row, color),
            ]
            if not self.hide_seconds:
                parts += [colon, render_digit(s0, row, color), render_digit(s1, row, color)]
            lines.append("".join(parts) + LINE_END)

        bold = BOLD if self.bold else ""
        lines.append(LINE_END)
        lines.append(f"{bold}{self.layout.text_padding}{color.foreground()}{text}{RESET}{LINE_END}")

        return "".join(lines)
