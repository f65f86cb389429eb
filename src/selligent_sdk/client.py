"""SelligentClient: sign and send request descriptors in one call."""

from __future__ import annotations

import logging
import time

from .api.descriptor import RequestDescriptor
from .auth.credentials import Credentials
from .auth.signer import Clock, RequestSigner
from .config import SelligentSettings
from .transport.http import ApiHttpClient, HttpResponse
from .transport.registry import ClientRegistry

logger = logging.getLogger(__name__)


class SelligentClient:
    """Signs descriptors with one credential pair and sends them to one instance.

    The HTTP handle comes from a ``ClientRegistry``, so several clients
    sharing a registry and a base URL share one connection pool.

    Example:
        ```python
        settings = SelligentSettings.from_environment()
        client = SelligentClient.from_settings(settings)
        response = client.execute(
            build_search_profiles_request(settings.profiles_list_id, {"ID": 0, "op": "<>"})
        )
        ```

    Args:
        credentials: Username/secret pair used to sign every request.
        base_url: Instance base URL.
        registry: Registry to take the HTTP handle from. A private one is
            created if omitted.
        clock: Returns the current Unix time in seconds.
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str,
        registry: ClientRegistry | None = None,
        clock: Clock = time.time,
    ) -> None:
        self._signer = RequestSigner(credentials, clock=clock)
        self._base_url = base_url
        self._registry = registry if registry is not None else ClientRegistry()

    @classmethod
    def from_settings(
        cls,
        settings: SelligentSettings,
        registry: ClientRegistry | None = None,
    ) -> SelligentClient:
        """Create a client from loaded settings, honouring ``settings.timeout``."""
        if registry is None:
            registry = ClientRegistry(
                factory=lambda url: ApiHttpClient(url, timeout=settings.timeout)
            )
        return cls(settings.credentials, settings.base_url, registry=registry)

    @property
    def signer(self) -> RequestSigner:
        return self._signer

    @property
    def http(self) -> ApiHttpClient:
        """The shared HTTP handle for this client's base URL."""
        return self._registry.get_or_create(self._base_url)

    def execute(self, descriptor: RequestDescriptor) -> HttpResponse:
        """Sign ``descriptor`` and send it.

        Raises:
            TransportError: If the HTTP call fails.
        """
        signed = self._signer.sign(descriptor)
        logger.debug("Sending %s %s to %s", descriptor.method.value, descriptor.path, self._base_url)
        response = self.http.send(signed)
        logger.debug(
            "%s %s completed with status %d",
            descriptor.method.value, descriptor.path, response.status,
        )
        return response
