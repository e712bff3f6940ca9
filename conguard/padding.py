"""
Scoped padding.

``PaddingScope`` indents everything printed through a guard while its ``with``
block is active:

    with guard.padded(2):
        guard.print("nested\\n")

On exit the guard's padding is *reset* to the value saved on entry; nothing is
subtracted. Properly nested scopes therefore always round-trip, and leaving
scopes out of order (for example from two threads) overwrites whatever the
other scope set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import PaddingRangeError, WidgetStateError

if TYPE_CHECKING:
    from .guard import OutputGuard

MAX_PADDING = 0xFF


def validate_padding_amount(amount) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise PaddingRangeError(f"Padding amount must be an int, got {type(amount).__name__}")
    if not 0 <= amount <= MAX_PADDING:
        raise PaddingRangeError(f"Padding amount must be between 0 and {MAX_PADDING}, got {amount}")
    return amount


class PaddingScope:
    """Adds ``amount`` to the guard's padding for the duration of a ``with`` block."""

    def __init__(self, guard: OutputGuard, amount: int):
        self.guard = guard
        self.amount = validate_padding_amount(amount)
        self.restore_padding: int | None = None
        self._active = False

    def __enter__(self) -> PaddingScope:
        if self._active:
            raise WidgetStateError("PaddingScope is already active")
        self.restore_padding = self.guard._extend_padding(self.amount)
        self._active = True
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._active = False
        if self.restore_padding is not None:
            self.guard._reset_padding(self.restore_padding)
        return False

    def __repr__(self) -> str:
        return f"PaddingScope(amount={self.amount}, restore_padding={self.restore_padding})"
