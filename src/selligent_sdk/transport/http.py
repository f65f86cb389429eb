"""HTTP client handle that sends signed request descriptors."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from ..api.descriptor import RequestDescriptor
from ..errors import TransportError

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 30  # seconds


@dataclass
class HttpResponse:
    """Simple HTTP response container.

    Attributes:
        status: HTTP status code (e.g. ``200``, ``401``).
        headers: Response headers (keys are lower-cased).
        data: Response body as a decoded string.
    """

    status: int
    headers: dict[str, str]
    data: str


class ApiHttpClient:
    """HTTP client bound to one Selligent base URL.

    Wraps a ``requests.Session`` so connections are kept alive between
    calls. Does not retry and does not interpret response bodies; non-2xx
    responses are returned like any other.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = _DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Instance base URL, e.g. ``https://acme.slgnt.eu``.
            timeout: Request timeout in seconds. Defaults to 30.
            session: Session to send through. A new one is created if omitted.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()

    @property
    def base_url(self) -> str:
        """Base URL every descriptor path is appended to."""
        return self._base_url

    def url_for(self, descriptor: RequestDescriptor) -> str:
        return self._base_url + descriptor.path

    def send(self, descriptor: RequestDescriptor) -> HttpResponse:
        """Send a (signed) descriptor and return the raw response.

        Args:
            descriptor: Request to send. Its headers are sent as-is.

        Returns:
            HttpResponse with status, headers, and body data.

        Raises:
            TransportError: If the request could not be performed
                (connection refused, DNS failure, timeout, ...).
        """
        method = descriptor.method.value
        try:
            response = self._session.request(
                method,
                self.url_for(descriptor),
                headers=dict(descriptor.headers),
                data=descriptor.body.encode("utf-8") if descriptor.body else None,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, descriptor.path, e)
            raise TransportError(
                f"{method} {descriptor.path} failed: {e}",
                method=method,
                path=descriptor.path,
            ) from e

        logger.debug("%s %s -> %d", method, descriptor.path, response.status_code)
        return HttpResponse(
            status=response.status_code,
            headers={k.lower(): v for k, v in response.headers.items()},
            data=response.text,
        )

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> ApiHttpClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
