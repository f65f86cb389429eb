"""Testing utilities: fake HTTP client, fixed clock and pytest fixtures."""

from .mocks import FakeHttpClient, FixedClock

__all__ = ["FakeHttpClient", "FixedClock"]
