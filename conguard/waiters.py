"""
Scope-bound progress widgets.

A waiter owns the console for the whole of its ``with`` block: entering takes
the guard lock, every ``update()`` repaints one terminal line in place, and
leaving writes a final carriage return or newline before letting go of the
lock. Prints from other threads wait until the block ends.

Two waiters are provided:
  - ``SpinWaiter``: a four-frame spinner for work of unknown length. Redraws
    are throttled to the guard's spin interval, so it is safe to call
    ``update()`` from a tight loop.
  - ``ProgressWaiter``: a percentage plus a fixed-width bar for work with a
    known maximum.

Opening a second waiter (or printing) from the thread that already owns the
console raises ``ReentrantOutputError`` rather than deadlocking.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from rich.segment import Segment

from .errors import InvalidMaxValueError, WidgetStateError

if TYPE_CHECKING:
    from .guard import OutputGuard

CARRIAGE_RETURN = "\r"
NEWLINE = "\n"


class ScopedWaiter:
    """Base class: lock handling and the ``with`` protocol shared by both waiters."""

    def __init__(self, guard: OutputGuard, clear_on_release: bool = False):
        self.guard = guard
        self.clear_on_release = clear_on_release
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def __enter__(self):
        if self._active:
            raise WidgetStateError(f"{type(self).__name__} is already active")
        self.guard._acquire_line()
        self._active = True
        try:
            self._on_acquire()
        except BaseException:
            self._active = False
            self.guard._release_line()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            self._on_release()
        finally:
            self._active = False
            self.guard._release_line()
        return False

    def _require_active(self) -> None:
        if not self._active:
            raise WidgetStateError(f"{type(self).__name__} can only be updated inside its 'with' block")

    def _on_acquire(self) -> None:
        pass

    def _on_release(self) -> None:
        pass


class SpinWaiter(ScopedWaiter):
    """Rotating single-character indicator for indeterminate work."""

    FRAMES = ("\\", "|", "/", "─")

    def __init__(self, guard: OutputGuard, clear_on_release: bool = False):
        super().__init__(guard, clear_on_release)
        self.frame_index = 0
        self.last_update_time = 0.0

    @property
    def frame(self) -> str:
        return self.FRAMES[self.frame_index]

    def _on_acquire(self) -> None:
        self.last_update_time = self.guard.clock()

    def update(self) -> bool:
        """Advance and redraw the spinner if the throttle interval has passed.

        Returns True when a frame was drawn, False when the call was throttled.
        """
        self._require_active()
        now = self.guard.clock()
        if now - self.last_update_time < self.guard.spin_interval:
            return False

        self.frame_index = (self.frame_index + 1) % len(self.FRAMES)
        self.guard._emit(
            Segment(" " * self.guard.padding + self.frame),
            Segment(CARRIAGE_RETURN),
        )
        self.last_update_time = now
        return True

    def _on_release(self) -> None:
        self.guard._emit(Segment(CARRIAGE_RETURN if self.clear_on_release else NEWLINE))


def validate_max_value(max_value):
    try:
        as_float = float(max_value)
    except (TypeError, ValueError):
        raise InvalidMaxValueError(
            f"max_value must be a number, got {type(max_value).__name__}"
        ) from None
    if isinstance(max_value, bool) or not math.isfinite(as_float) or as_float <= 0:
        raise InvalidMaxValueError(f"max_value must be a positive finite number, got {max_value!r}")
    return max_value


class ProgressWaiter(ScopedWaiter):
    """Percentage and bar for work with a known maximum.

    ``current_value`` and ``max_value`` may be any numbers that compare and
    divide with each other (ints, floats, Decimals, Fractions).
    """

    FILL = "■"

    def __init__(
        self,
        guard: OutputGuard,
        max_value,
        clear_on_release: bool = False,
        bar_width: int | None = None,
    ):
        super().__init__(guard, clear_on_release)
        self.max_value = validate_max_value(max_value)
        self.bar_width = guard.bar_width if bar_width is None else bar_width
        if self.bar_width < 1:
            raise ValueError(f"bar_width must be at least 1, got {self.bar_width}")
        self.value = None
        self.percent: int | None = None
        self.last_drawn_width = 0

    def measure(self, current_value) -> tuple[int, int]:
        """Return ``(percent, filled_cells)`` for ``current_value``.

        The value is clamped to ``0..max_value`` first, so the percentage never
        exceeds 100 and the bar never overflows its width.
        """
        clamped = min(current_value, self.max_value)
        if clamped < 0:
            clamped = 0
        percent = math.floor(clamped * 100 / self.max_value)
        filled = math.floor(clamped * self.bar_width / self.max_value)
        return percent, filled

    def render(self, current_value) -> str:
        """Build the bar text for ``current_value`` without the leading padding."""
        percent, filled = self.measure(current_value)
        bar = self.FILL * filled + " " * (self.bar_width - filled)
        return f"{percent}%[{bar}]"

    def update(self, current_value) -> None:
        self._require_active()
        line = " " * self.guard.padding + self.render(current_value)
        self.guard._emit(Segment(CARRIAGE_RETURN), Segment(line))
        self.value = current_value
        self.percent = self.measure(current_value)[0]
        self.last_drawn_width = len(line)

    def _on_release(self) -> None:
        if self.clear_on_release:
            self.guard._emit(
                Segment(CARRIAGE_RETURN),
                Segment(" " * self.last_drawn_width),
                Segment(CARRIAGE_RETURN),
            )
        else:
            self.guard._emit(Segment(NEWLINE))
