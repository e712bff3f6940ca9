"""
The output guard: shared state behind every print and widget.

An ``OutputGuard`` bundles what the rest of the package needs to agree on:
  - one lock, so that a print, or a waiter's whole lifetime, owns the terminal
    exclusively;
  - one padding counter (an unsigned byte with its own small lock), so padding
    changes are visible to every thread whether or not it is printing;
  - the Rich console that actually writes and colors the text;
  - the clock used to throttle spinners, and the fatal handler used when
    output is impossible or ``error()`` is called.

Guards are ordinary objects. Application code usually shares the default one
from ``conguard.shared``; tests build their own over an in-memory stream so
they never see each other's padding or lock.

Everything written goes through ``_emit`` as plain Rich segments. Plain text
segments are passed to the stream untouched, which keeps the carriage returns
the widgets rely on even when the stream is not a terminal, while styled
segments get an escape sequence and a reset from Rich.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import IO, Any, NoReturn

from rich.console import Console
from rich.segment import Segment, Segments

from .colors import ALERT, NEUTRAL, ConsoleColor
from .config import BAR_WIDTH, FATAL_MODE, SPIN_INTERVAL, load_settings
from .errors import FatalError, FatalHandler, ReentrantOutputError, resolve_fatal_handler
from .formatting import format_message
from .padding import MAX_PADDING, PaddingScope
from .waiters import ProgressWaiter, SpinWaiter


def coerce_color(color: ConsoleColor | int | str) -> ConsoleColor:
    if isinstance(color, str):
        return ConsoleColor.from_name(color)
    return ConsoleColor(color)


class OutputGuard:
    """Serialized, padded, colored console output."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        file: IO[str] | None = None,
        force_terminal: bool | None = None,
        spin_interval: float = SPIN_INTERVAL,
        bar_width: int = BAR_WIDTH,
        clock: Callable[[], float] = time.monotonic,
        fatal_handler: FatalHandler | None = None,
    ):
        if console is not None and file is not None:
            raise ValueError("Pass either a console or a file, not both")
        if bar_width < 1:
            raise ValueError(f"bar_width must be at least 1, got {bar_width}")
        if spin_interval < 0:
            raise ValueError(f"spin_interval must not be negative, got {spin_interval}")

        if console is None:
            console = Console(file=file, force_terminal=force_terminal, highlight=False)
        self.console = console
        self.spin_interval = spin_interval
        self.bar_width = bar_width
        self.clock = clock
        self.fatal_handler = fatal_handler or resolve_fatal_handler(FATAL_MODE)

        self._lock = threading.Lock()
        # Thread currently holding the console through a waiter
        self._owner: int | None = None

        self._padding = 0
        self._padding_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: dict[str, Any] | None = None, **overrides) -> OutputGuard:
        """Build a guard from environment settings; keyword overrides win."""
        if settings is None:
            settings = load_settings()
        kwargs: dict[str, Any] = {
            "spin_interval": settings["spin_interval"],
            "bar_width": settings["bar_width"],
            "fatal_handler": resolve_fatal_handler(settings["fatal_mode"]),
        }
        if "console" not in overrides:
            kwargs["force_terminal"] = settings["force_terminal"]
        kwargs.update(overrides)
        return cls(**kwargs)

    # --- Padding ---

    @property
    def padding(self) -> int:
        with self._padding_lock:
            return self._padding

    def _extend_padding(self, amount: int) -> int:
        """Add ``amount`` (wrapping like a byte) and return the previous value."""
        with self._padding_lock:
            previous = self._padding
            self._padding = (previous + amount) & MAX_PADDING
            return previous

    def _reset_padding(self, value: int) -> None:
        with self._padding_lock:
            self._padding = value

    def padded(self, amount: int) -> PaddingScope:
        """Indent output by ``amount`` more spaces inside a ``with`` block."""
        return PaddingScope(self, amount)

    # --- Locking ---

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    def _acquire(self) -> None:
        if self._owner == threading.get_ident():
            raise ReentrantOutputError(
                "This thread already owns the console through an active waiter"
            )
        self._lock.acquire()

    def _acquire_line(self) -> None:
        self._acquire()
        self._owner = threading.get_ident()

    def _release_line(self) -> None:
        self._owner = None
        self._lock.release()

    @contextmanager
    def _locked(self) -> Iterator[None]:
        self._acquire()
        try:
            yield
        finally:
            self._lock.release()

    # --- Output ---

    def _check_stream(self) -> None:
        stream = self.console.file
        writable = getattr(stream, "writable", None)
        if (
            stream is None
            or getattr(stream, "closed", False)
            or (callable(writable) and not writable())
        ):
            self._fatal("Console output stream is unavailable")

    def _emit(self, *segments: Segment) -> None:
        """Write segments as-is. Callers must hold the lock."""
        self._check_stream()
        self.console.print(Segments(segments), end="", crop=False, soft_wrap=True)

    def _fatal(self, message: str) -> NoReturn:
        self.fatal_handler(message)
        raise FatalError(message)

    def _print_text(self, text: str, color: ConsoleColor) -> int:
        with self._locked():
            padding = self.padding
            self._emit(Segment(" " * padding), Segment(text, color.style))
        return padding + len(text)

    def print(self, fmt: str, *args: Any, color: ConsoleColor | int | str = NEUTRAL, **kwargs: Any) -> int:
        """Print ``fmt.format(*args, **kwargs)`` after the current padding.

        The text is drawn in ``color`` and the terminal is back to its neutral
        color afterwards. No newline is added. Returns the number of characters
        written, padding included.

        Raises:
            FormatArgumentError: ``fmt`` and the arguments do not match. Nothing
                is written in that case.
        """
        resolved = coerce_color(color)
        text = format_message(fmt, args, kwargs)
        return self._print_text(text, resolved)

    def error(self, fmt: str, *args: Any, **kwargs: Any) -> NoReturn:
        """Print in the alert color, then hand the message to the fatal handler."""
        message = format_message(fmt, args, kwargs)
        self._print_text(message, ALERT)
        self._fatal(message)

    # --- Widgets ---

    def spinner(self, clear_on_release: bool = False) -> SpinWaiter:
        """Spinner that owns the console inside a ``with`` block."""
        return SpinWaiter(self, clear_on_release)

    def progress(self, max_value, clear_on_release: bool = False, bar_width: int | None = None) -> ProgressWaiter:
        """Progress bar that owns the console inside a ``with`` block."""
        return ProgressWaiter(self, max_value, clear_on_release, bar_width)

    def __repr__(self) -> str:
        return f"OutputGuard(padding={self.padding}, locked={self.locked})"
