"""ClientRegistry: one HTTP client handle per base URL."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from .http import ApiHttpClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], ApiHttpClient]


class ClientRegistry:
    """Caller-owned cache of HTTP client handles keyed by base URL.

    ``get_or_create`` returns the same handle for the same base URL for the
    lifetime of the registry; handles are never evicted. Creation is
    guarded by a lock, so concurrent callers never build two handles for
    one URL.

    Args:
        factory: Builds a handle for a base URL. Defaults to ``ApiHttpClient``.
    """

    def __init__(self, factory: ClientFactory | None = None) -> None:
        self._factory: ClientFactory = factory or ApiHttpClient
        self._clients: dict[str, ApiHttpClient] = {}
        self._lock = threading.Lock()

    def get_or_create(self, base_url: str) -> ApiHttpClient:
        """Return the handle for ``base_url``, creating it on first use."""
        client = self._clients.get(base_url)
        if client is not None:
            return client

        with self._lock:
            client = self._clients.get(base_url)
            if client is None:
                client = self._factory(base_url)
                self._clients[base_url] = client
                logger.debug("Created HTTP client for %s", base_url)
            return client

    def __contains__(self, base_url: object) -> bool:
        return base_url in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def close(self) -> None:
        """Close every handle's session. Intended for process shutdown."""
        with self._lock:
            for client in self._clients.values():
                client.close()
