"""conguard - serialized, padded, colored console output with spinner and progress widgets"""

from .colors import ALERT, NEUTRAL, ConsoleColor
from .config import (
    BAR_WIDTH,
    DEFAULT_CONFIG,
    FATAL_MODE,
    SPIN_INTERVAL,
    get_int_setting,
    get_setting,
    load_settings,
)
from .errors import (
    FATAL_EXIT_CODE,
    ConsoleError,
    FatalError,
    FormatArgumentError,
    InvalidMaxValueError,
    PaddingRangeError,
    ReentrantOutputError,
    WidgetStateError,
    abort_process,
    debug_break,
    exit_process,
    resolve_fatal_handler,
)
from .formatting import format_message
from .guard import OutputGuard
from .padding import PaddingScope
from .shared import console, error, print_line
from .waiters import ProgressWaiter, SpinWaiter

__all__ = [
    # Colors
    "ALERT",
    "NEUTRAL",
    "ConsoleColor",
    # Config
    "BAR_WIDTH",
    "DEFAULT_CONFIG",
    "FATAL_MODE",
    "SPIN_INTERVAL",
    "get_int_setting",
    "get_setting",
    "load_settings",
    # Shared guard
    "console",
    "error",
    "print_line",
    # Errors
    "FATAL_EXIT_CODE",
    "ConsoleError",
    "FatalError",
    "FormatArgumentError",
    "InvalidMaxValueError",
    "PaddingRangeError",
    "ReentrantOutputError",
    "WidgetStateError",
    "abort_process",
    "debug_break",
    "exit_process",
    "resolve_fatal_handler",
    # Formatting
    "format_message",
    # Guard and widgets
    "OutputGuard",
    "PaddingScope",
    "ProgressWaiter",
    "SpinWaiter",
]
