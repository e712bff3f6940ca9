"""
Exceptions and the fatal policy.

Most misuse of the guard (bad format arguments, a padding amount that does not
fit in a byte, a progress bar with nothing to measure against) raises one of the
``ConsoleError`` subclasses below before anything is written.

Two situations are not reportable errors at all: the output stream being
unavailable, and an explicit ``error()`` call. Both hand a message to a *fatal
handler*, a callable that must not return. The built-in handlers abort the
process, drop into the debugger first, or exit immediately with a fixed code.
Tests and embedding applications can pass their own handler to the guard.
"""

import os
import sys
from collections.abc import Callable
from typing import NoReturn

FATAL_EXIT_CODE = 3

FatalHandler = Callable[[str], NoReturn]


class ConsoleError(Exception):
    """Base class for every error raised by conguard."""


class FormatArgumentError(ConsoleError, ValueError):
    """The format string and its arguments do not match."""


class PaddingRangeError(ConsoleError, ValueError):
    """A padding amount outside 0..255."""


class InvalidMaxValueError(ConsoleError, ValueError):
    """A progress bar maximum that is not a positive number."""


class WidgetStateError(ConsoleError, RuntimeError):
    """A scoped widget used outside of its ``with`` block."""


class ReentrantOutputError(ConsoleError, RuntimeError):
    """The thread that owns the console asked for it again."""


class FatalError(ConsoleError):
    """Raised when a fatal handler returns instead of stopping the process."""


def _flush_std_streams():
    for stream in (sys.stdout, sys.stderr):
        if stream is not None and not getattr(stream, "closed", False):
            try:
                stream.flush()
            except (OSError, ValueError):
                pass


def abort_process(message: str) -> NoReturn:
    """Flush what was printed and raise SIGABRT."""
    _flush_std_streams()
    os.abort()


def debug_break(message: str) -> NoReturn:
    """Break into the configured debugger, then abort.

    ``breakpoint()`` honors ``PYTHONBREAKPOINT``, so setting it to ``0`` turns
    this into a plain abort.
    """
    _flush_std_streams()
    breakpoint()
    os.abort()


def exit_process(message: str) -> NoReturn:
    """Exit right away with ``FATAL_EXIT_CODE``, skipping cleanup handlers."""
    _flush_std_streams()
    os._exit(FATAL_EXIT_CODE)


FATAL_HANDLERS: dict[str, FatalHandler] = {
    "abort": abort_process,
    "debug": debug_break,
    "exit": exit_process,
}


def resolve_fatal_handler(mode: str) -> FatalHandler:
    """Return the built-in fatal handler registered under ``mode``."""
    try:
        return FATAL_HANDLERS[mode.strip().lower()]
    except KeyError:
        valid = ", ".join(sorted(FATAL_HANDLERS))
        raise ValueError(f"Unknown fatal mode {mode!r} (expected one of: {valid})") from None
