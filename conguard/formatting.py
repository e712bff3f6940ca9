"""
Strict ``str.format`` substitution.

``str.format`` quietly ignores arguments that no placeholder uses, which hides
the most common printf-style mistake (passing one value too many). The
formatter here reports every mismatch as a ``FormatArgumentError`` instead.
"""

from collections.abc import Mapping, Sequence
from string import Formatter
from typing import Any

from .errors import FormatArgumentError


class StrictFormatter(Formatter):
    """A ``string.Formatter`` that refuses unused or missing arguments."""

    def check_unused_args(self, used_args, args, kwargs):
        unused = [index for index in range(len(args)) if index not in used_args]
        unused += [name for name in kwargs if name not in used_args]
        if unused:
            names = ", ".join(repr(item) for item in unused)
            raise FormatArgumentError(f"Arguments not used by the format string: {names}")


_formatter = StrictFormatter()


def format_message(fmt: str, args: Sequence[Any] = (), kwargs: Mapping[str, Any] | None = None) -> str:
    """Substitute ``args``/``kwargs`` into ``fmt``, raising on any mismatch."""
    if not isinstance(fmt, str):
        raise FormatArgumentError(f"Format must be a str, got {type(fmt).__name__}")
    try:
        return _formatter.vformat(fmt, args, kwargs or {})
    except FormatArgumentError:
        raise
    except IndexError as e:
        raise FormatArgumentError(f"Missing positional argument for {fmt!r}: {e}") from e
    except KeyError as e:
        raise FormatArgumentError(f"Missing keyword argument {e} for {fmt!r}") from e
    except ValueError as e:
        raise FormatArgumentError(f"Invalid format string {fmt!r}: {e}") from e
