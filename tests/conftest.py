"""Shared fixtures: isolated guards over in-memory streams and a manual clock."""

import io

import pytest
from rich.console import Console

from conguard import OutputGuard


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FatalCalled(Exception):
    """Raised by the test fatal handler so tests can observe fatal calls."""


def raising_fatal_handler(message):
    raise FatalCalled(message)


def plain_console(buffer: io.StringIO) -> Console:
    """Console that writes undecorated text (no color, no terminal)."""
    return Console(file=buffer, force_terminal=False, color_system=None, width=200)


@pytest.fixture
def color_guard(buffer):
    """Guard that writes standard ANSI colors to the buffer."""
    console = Console(
        file=buffer,
        force_terminal=True,
        color_system="standard",
        no_color=False,
        width=200,
    )
    return OutputGuard(console, fatal_handler=raising_fatal_handler)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def make_guard(buffer, clock):
    """Factory for guards over the shared buffer and clock with custom settings."""

    def factory(**kwargs):
        kwargs.setdefault("spin_interval", 0.5)
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("fatal_handler", raising_fatal_handler)
        return OutputGuard(plain_console(buffer), **kwargs)

    return factory


@pytest.fixture
def guard(make_guard):
    return make_guard()
