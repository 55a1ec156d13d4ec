"""
Clock colors: named ANSI colors, their bright variants and ``#rrggbb`` hex codes.

Parsing and escape-code generation are delegated to ``rich.color``; this module
only fixes the accepted spellings and the error messages.
"""

from dataclasses import dataclass

from rich.color import Color as RichColor
from rich.color import ColorParseError

RESET = "\x1b[0m"
BOLD = "\x1b[1m"

# ─── Accepted Names ──────────────────────────────────────────────

NAMED_COLORS: dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "white": "white",
    "bright-black": "bright_black",
    "bright-red": "bright_red",
    "bright-green": "bright_green",
    "bright-yellow": "bright_yellow",
    "bright-blue": "bright_blue",
    "bright-magenta": "bright_magenta",
    "bright-cyan": "bright_cyan",
    "bright-white": "bright_white",
}

POSSIBLE_VALUES: tuple[str, ...] = (*NAMED_COLORS, "'#rrggbb'")

DEFAULT_COLOR = "white"


@dataclass(frozen=True)
class Color:
    """A parsed clock color."""

    name: str
    rich_color: RichColor

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Parse a color name or ``#rrggbb`` code, raising ValueError when invalid."""
        if value in NAMED_COLORS:
            return cls(value, RichColor.parse(NAMED_COLORS[value]))

        if value.startswith("#"):
            if len(value) != 7:
                raise ValueError(f"expected format `#rrggbb`, found `{value}`")
            try:
                return cls(value, RichColor.parse(value))
            except ColorParseError:
                raise ValueError(
                    f"invalid hex color `{value}`: components must be hexadecimal digits"
                ) from None

        raise ValueError(
            f"color `{value}` is neither a recognized color nor a valid hex color code.\n"
            f"  [possible values: {', '.join(POSSIBLE_VALUES)}]"
        )

    @classmethod
    def default(cls) -> "Color":
        return cls.parse(DEFAULT_COLOR)

    def foreground(self) -> str:
        """Escape sequence selecting this color as the text color."""
        return _sgr(self.rich_color.get_ansi_codes(foreground=True))

    def background(self) -> str:
        """Escape sequence selecting this color as the background color."""
        return _sgr(self.rich_color.get_ansi_codes(foreground=False))

    def __str__(self) -> str:
        return self.name


def _sgr(codes: tuple[str, ...]) -> str:
    return f"\x1b[{';'.join(codes)}m"
