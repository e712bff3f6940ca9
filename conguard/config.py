import os

from dotenv import load_dotenv
from rich.console import Console

from .errors import FATAL_HANDLERS

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "CONGUARD_SPIN_INTERVAL_MS": "100",
    "CONGUARD_BAR_WIDTH": "10",
    "CONGUARD_FATAL_MODE": "abort",
    "CONGUARD_FORCE_TERMINAL": "",
}

# Warnings about settings. The shared guard does not exist yet when they are read.
warn_console = Console(stderr=True, highlight=False)


def get_setting(key: str, default: str) -> str:
    """Get setting with priority: Env Var > Default"""
    env_val = os.getenv(key)
    if env_val:
        return env_val
    return default


def get_int_setting(key: str, default: int, minimum: int = 0) -> int:
    """Get integer setting with priority: Env Var > Default"""
    value = get_setting(key, str(default))
    try:
        number = int(value)
    except ValueError:
        warn_console.print(
            f"[yellow]Warning: Invalid integer value for {key}: {value}, using default {default}[/yellow]"
        )
        return default
    if number < minimum:
        warn_console.print(
            f"[yellow]Warning: {key} must be at least {minimum}, got {number}, using default {default}[/yellow]"
        )
        return default
    return number


def get_optional_bool_setting(key: str) -> bool | None:
    """Get a tri-state boolean setting: unset means "let the terminal decide"."""
    value = get_setting(key, "").strip().lower()
    if not value:
        return None
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    warn_console.print(f"[yellow]Warning: Invalid boolean value for {key}: {value}, ignoring[/yellow]")
    return None


def get_fatal_mode_setting(key: str, default: str) -> str:
    """Get the fatal policy name, falling back to the default for unknown names."""
    value = get_setting(key, default).strip().lower()
    if value not in FATAL_HANDLERS:
        warn_console.print(
            f"[yellow]Warning: Unknown fatal mode for {key}: {value}, using default {default}[/yellow]"
        )
        return default
    return value


def load_settings() -> dict:
    """Read every setting the shared guard is built from."""
    return {
        "spin_interval": get_int_setting(
            "CONGUARD_SPIN_INTERVAL_MS", int(DEFAULT_CONFIG["CONGUARD_SPIN_INTERVAL_MS"])
        )
        / 1000,
        "bar_width": get_int_setting(
            "CONGUARD_BAR_WIDTH", int(DEFAULT_CONFIG["CONGUARD_BAR_WIDTH"]), minimum=1
        ),
        "fatal_mode": get_fatal_mode_setting(
            "CONGUARD_FATAL_MODE", DEFAULT_CONFIG["CONGUARD_FATAL_MODE"]
        ),
        "force_terminal": get_optional_bool_setting("CONGUARD_FORCE_TERMINAL"),
    }


# Defaults used by guards built by hand
SPIN_INTERVAL = int(DEFAULT_CONFIG["CONGUARD_SPIN_INTERVAL_MS"]) / 1000
BAR_WIDTH = int(DEFAULT_CONFIG["CONGUARD_BAR_WIDTH"])
FATAL_MODE = DEFAULT_CONFIG["CONGUARD_FATAL_MODE"]
