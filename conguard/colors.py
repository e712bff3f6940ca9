"""
Console text colors.

The values are the classic console text attribute bits: one bit per primary
(blue, green, red) plus an intensity bit. A value is therefore both a readable
name and a description of how to draw it, e.g. ``YELLOW`` is "bright red +
bright green".

Terminals that speak ANSI number their 16 standard colors differently (red is
bit 0, blue is bit 2, and the bright half starts at 8). ``ConsoleColor.ansi_number``
translates between the two, and ``ConsoleColor.style`` wraps the result in a
Rich ``Style`` so the console can emit the matching escape sequence and reset
it after every write.
"""

from enum import IntEnum

from rich.color import Color
from rich.style import Style

FOREGROUND_BLUE = 0x1
FOREGROUND_GREEN = 0x2
FOREGROUND_RED = 0x4
FOREGROUND_INTENSITY = 0x8


class ConsoleColor(IntEnum):
    """Closed set of foreground colors understood by the output guard."""

    BLACK = 0
    GRAY = FOREGROUND_RED | FOREGROUND_GREEN | FOREGROUND_BLUE
    WHITE = FOREGROUND_INTENSITY | FOREGROUND_RED | FOREGROUND_GREEN | FOREGROUND_BLUE
    RED = FOREGROUND_INTENSITY | FOREGROUND_RED
    GREEN = FOREGROUND_INTENSITY | FOREGROUND_GREEN
    BLUE = FOREGROUND_INTENSITY | FOREGROUND_BLUE
    CYAN = FOREGROUND_INTENSITY | FOREGROUND_GREEN | FOREGROUND_BLUE
    MAGENTA = FOREGROUND_INTENSITY | FOREGROUND_RED | FOREGROUND_BLUE
    YELLOW = FOREGROUND_INTENSITY | FOREGROUND_RED | FOREGROUND_GREEN
    DARK_GRAY = FOREGROUND_INTENSITY
    DARK_RED = FOREGROUND_RED
    DARK_GREEN = FOREGROUND_GREEN
    DARK_BLUE = FOREGROUND_BLUE
    DARK_CYAN = FOREGROUND_GREEN | FOREGROUND_BLUE
    DARK_MAGENTA = FOREGROUND_RED | FOREGROUND_BLUE
    DARK_YELLOW = FOREGROUND_RED | FOREGROUND_GREEN

    @property
    def is_bright(self) -> bool:
        return bool(self & FOREGROUND_INTENSITY)

    @property
    def ansi_number(self) -> int:
        """Standard ANSI color number (0-15) for this attribute value."""
        number = 0
        if self & FOREGROUND_RED:
            number |= 1
        if self & FOREGROUND_GREEN:
            number |= 2
        if self & FOREGROUND_BLUE:
            number |= 4
        if self.is_bright:
            number += 8
        return number

    @property
    def style(self) -> Style:
        return Style(color=Color.from_ansi(self.ansi_number))

    @classmethod
    def from_name(cls, name: str) -> "ConsoleColor":
        """Look up a color by name, accepting ``dark-red``, ``Dark Red`` etc."""
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown console color: {name!r}") from None


# Color every print falls back to, and the color the terminal is left in.
NEUTRAL = ConsoleColor.GRAY

# Color used by error().
ALERT = ConsoleColor.RED
