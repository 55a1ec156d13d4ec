"""
Glyph rendering for the clock face.

Each glyph is a 5-row pattern:
  - ``#``: a lit cell, two columns painted in the clock color's background
  - ``.``: an unlit cell, two blank columns
  - `` ``: a single blank column

Every rendered row ends with one trailing space that separates it from the
next glyph. Digits are three cells wide, so all digits share one width and the
clock width stays exact.
"""

from collections.abc import Iterable

from .color import RESET, Color

GLYPH_ROWS = 5

SEPARATOR = ":"
BLANK = " "

GLYPHS: dict[str, tuple[str, ...]] = {
    "0": ("###", "#.#", "#.#", "#.#", "###"),
    "1": ("..#", "..#", "..#", "..#", "..#"),
    "2": ("###", "..#", "###", "#..", "###"),
    "3": ("###", "..#", "###", "..#", "###"),
    "4": ("#.#", "#.#", "###", "..#", "..#"),
    "5": ("###", "#..", "###", "..#", "###"),
    "6": ("###", "#..", "###", "#.#", "###"),
    "7": ("###", "..#", "..#", "..#", "..#"),
    "8": ("###", "#.#", "###", "#.#", "###"),
    "9": ("###", "#.#", "###", "..#", "###"),
    SEPARATOR: (" . ", " # ", " . ", " # ", " . "),
    BLANK: (" . ", " . ", " . ", " . ", " . "),
}


def glyph_width(symbol: str) -> int:
    """Rendered width of *symbol* in columns, trailing space included."""
    pattern = GLYPHS[symbol][0]
    return sum(2 if cell in "#." else 1 for cell in pattern) + 1


def block_width(symbols: Iterable[str]) -> int:
    """Width of a row of glyphs, without the last glyph's trailing space."""
    return max(sum(glyph_width(symbol) for symbol in symbols) - 1, 0)


def render_glyph(symbol: str, row: int, color: Color) -> str:
    """
    Render one row of a glyph.

    Args:
        symbol: A digit ``"0"``–``"9"``, ``SEPARATOR`` or ``BLANK``.
        row: The row index, 0 (top) to 4 (bottom).
        color: Color used for lit cells.

    Returns:
        The colorized row fragment, including its trailing space.

    Raises:
        KeyError: Unknown symbol.
        IndexError: Row outside 0–4.
    """
    if not 0 <= row < GLYPH_ROWS:
        raise IndexError(f"glyph row {row} out of range 0-{GLYPH_ROWS - 1}")

    lit = f"{color.background()}  {RESET}"
    parts = []
    for cell in GLYPHS[symbol][row]:
        if cell == "#":
            parts.append(lit)
        elif cell == ".":
            parts.append("  ")
        else:
            parts.append(" ")
    parts.append(" ")
    return "".join(parts)


def render_digit(value: int, row: int, color: Color) -> str:
    return render_glyph(str(value), row, color)


def separator_symbol(second: int, blink: bool) -> str:
    """The separator to draw this second: blank on odd seconds when blinking."""
    if blink and second % 2 == 1:
        return BLANK
    return SEPARATOR
