"""
Layout of the clock face on the terminal screen.

The clock occupies ``CLOCK_HEIGHT`` rows: five glyph rows, a spacer and the
text line. The glyph block is placed by the configured anchors; the text line
is centered under the glyph block whatever the anchors are.
"""

from dataclasses import dataclass

from .position import Anchor
from .renderer import GLYPH_ROWS

CLOCK_HEIGHT = GLYPH_ROWS + 2


@dataclass
class Layout:
    """Derived screen placement, recomputed on resize, configuration change or a new text length."""

    top: int = 0
    clock_padding: str = ""
    text_padding: str = ""


def compute_layout(
    width: int,
    height: int,
    clock_width: int,
    text_len: int,
    horizontal: Anchor = Anchor.CENTER,
    vertical: Anchor = Anchor.CENTER,
) -> Layout:
    """
    Compute the top row and left paddings for the current terminal size.

    Args:
        width, height: Terminal size in columns and rows.
        clock_width: Width of the glyph block.
        text_len: Length of the text line, AM/PM suffix included.
        horizontal, vertical: Anchors along each axis.
    """
    half_width = clock_width // 2

    column = horizontal.resolve(width, half_width)
    top = vertical.resolve(height, CLOCK_HEIGHT // 2)

    clock_padding = " " * column
    text_padding = clock_padding + " " * max(half_width - text_len // 2, 0)

    return Layout(top=top, clock_padding=clock_padding, text_padding=text_padding)


def is_too_large(width: int, height: int, clock_width: int) -> bool:
    """True when the terminal cannot hold the clock; nothing is drawn then."""
    return clock_width + 1 >= width or CLOCK_HEIGHT + 1 >= height
