"""Pytest fixtures for testing code built on the Selligent SDK."""

from __future__ import annotations

import pytest

from ..auth.credentials import Credentials
from ..auth.signer import RequestSigner
from ..transport.registry import ClientRegistry
from .mocks import FakeHttpClient, FixedClock


@pytest.fixture
def credentials() -> Credentials:
    """Pytest fixture providing ``Credentials("api-user", "s3cret")``."""
    return Credentials(username="api-user", secret="s3cret")


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Pytest fixture providing a ``FixedClock`` at ``1700000000``."""
    return FixedClock()


@pytest.fixture
def signer(credentials: Credentials, fixed_clock: FixedClock) -> RequestSigner:
    """Pytest fixture providing a ``RequestSigner`` on the fixed clock."""
    return RequestSigner(credentials, clock=fixed_clock)


@pytest.fixture
def fake_http() -> FakeHttpClient:
    """Pytest fixture providing a ``FakeHttpClient`` with no canned responses."""
    return FakeHttpClient()


@pytest.fixture
def fake_registry(fake_http: FakeHttpClient) -> ClientRegistry:
    """Pytest fixture providing a ``ClientRegistry`` that always hands out ``fake_http``.

    Returns:
        A registry whose factory ignores the base URL.
    """
    return ClientRegistry(factory=lambda url: fake_http)
