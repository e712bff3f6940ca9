"""
Shared output guard for application code.

Most programs want exactly one guard: one lock for the terminal and one
padding level that every module agrees on. This module builds that guard once,
from the ``CONGUARD_*`` environment settings, and every import shares it.

Usage:
    from conguard import console, ConsoleColor

    console.print("Loaded {} records\\n", count, color=ConsoleColor.GREEN)
    with console.padded(2), console.progress(total) as bar:
        for done in range(total + 1):
            bar.update(done)

Tests and libraries that need isolation should construct their own
``OutputGuard`` instead of patching this one.
"""

from typing import Any, NoReturn

from .colors import NEUTRAL, ConsoleColor
from .guard import OutputGuard

# The shared guard instance. All terminal output of an application using
# conguard should flow through this object so that prints, padding and
# widgets are serialized against each other.
console = OutputGuard.from_settings()


def print_line(fmt: str, *args: Any, color: ConsoleColor | int | str = NEUTRAL, **kwargs: Any) -> int:
    """``console.print`` that always ends the output with a newline."""
    return console.print(fmt + "\n", *args, color=color, **kwargs)


def error(fmt: str, *args: Any, **kwargs: Any) -> NoReturn:
    """``console.error`` on the shared guard, with a trailing newline."""
    console.error(fmt + "\n", *args, **kwargs)
