"""
Tests for console colors (conguard/colors.py).

The color values are console attribute bits; the ANSI numbers Rich draws with
use a different bit order. These tests check the translation and that every
color comes out as a standard ANSI escape followed by a reset.
"""

import pytest

from conguard import ALERT, NEUTRAL, ConsoleColor
from conguard.colors import (
    FOREGROUND_BLUE,
    FOREGROUND_GREEN,
    FOREGROUND_INTENSITY,
    FOREGROUND_RED,
)

EXPECTED_ANSI = {
    ConsoleColor.BLACK: 0,
    ConsoleColor.DARK_RED: 1,
    ConsoleColor.DARK_GREEN: 2,
    ConsoleColor.DARK_YELLOW: 3,
    ConsoleColor.DARK_BLUE: 4,
    ConsoleColor.DARK_MAGENTA: 5,
    ConsoleColor.DARK_CYAN: 6,
    ConsoleColor.GRAY: 7,
    ConsoleColor.DARK_GRAY: 8,
    ConsoleColor.RED: 9,
    ConsoleColor.GREEN: 10,
    ConsoleColor.YELLOW: 11,
    ConsoleColor.BLUE: 12,
    ConsoleColor.MAGENTA: 13,
    ConsoleColor.CYAN: 14,
    ConsoleColor.WHITE: 15,
}


class TestConsoleColor:
    """Tests for the attribute values and their ANSI translation."""

    def test_sixteen_distinct_colors(self):
        assert len(ConsoleColor) == 16
        assert len({int(color) for color in ConsoleColor}) == 16

    def test_attribute_bits(self):
        assert ConsoleColor.GRAY == FOREGROUND_RED | FOREGROUND_GREEN | FOREGROUND_BLUE
        assert ConsoleColor.YELLOW == FOREGROUND_INTENSITY | FOREGROUND_RED | FOREGROUND_GREEN
        assert ConsoleColor.DARK_GRAY == FOREGROUND_INTENSITY

    @pytest.mark.parametrize("color,number", EXPECTED_ANSI.items())
    def test_ansi_number(self, color, number):
        assert color.ansi_number == number

    def test_bright_half(self):
        bright = {color for color in ConsoleColor if color.is_bright}
        assert bright == {color for color, number in EXPECTED_ANSI.items() if number >= 8}

    def test_style_uses_ansi_number(self):
        assert ConsoleColor.MAGENTA.style.color.number == 13

    def test_neutral_and_alert(self):
        assert NEUTRAL is ConsoleColor.GRAY
        assert ALERT is ConsoleColor.RED

    @pytest.mark.parametrize("name", ["dark_cyan", "DARK-CYAN", " Dark Cyan "])
    def test_from_name(self, name):
        assert ConsoleColor.from_name(name) is ConsoleColor.DARK_CYAN

    def test_from_unknown_name(self):
        with pytest.raises(ValueError):
            ConsoleColor.from_name("orange")


class TestColoredOutput:
    """Tests for escape sequences written by a color-capable guard."""

    @pytest.mark.parametrize("color,number", EXPECTED_ANSI.items())
    def test_escape_and_reset(self, color_guard, buffer, color, number):
        code = 30 + number if number < 8 else 82 + number
        color_guard.print("x", color=color)
        assert buffer.getvalue() == f"\x1b[{code}mx\x1b[0m"

    def test_int_color_value(self, color_guard, buffer):
        color_guard.print("x", color=int(ConsoleColor.BLUE))
        assert buffer.getvalue() == "\x1b[94mx\x1b[0m"

    def test_widgets_are_not_colored(self, color_guard, buffer):
        with color_guard.progress(2) as bar:
            bar.update(1)
        assert "\x1b[" not in buffer.getvalue()
