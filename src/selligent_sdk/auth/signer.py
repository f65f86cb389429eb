"""HMAC request authentication for the Selligent REST API.

The ``Authorization`` header has the form::

    hmac <username>:<hex HMAC-SHA256(secret, "<timestamp>-<method>-<path>")>:<timestamp>

where ``timestamp`` is the current Unix time in whole seconds. The server
recomputes the hash and rejects stale timestamps; this client enforces no
window itself.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from ..api.descriptor import HttpMethod, RequestDescriptor, method_name
from ..errors import InvalidArgumentError
from .credentials import Credentials

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"

Clock = Callable[[], float]


def compute_auth_header(
    username: str,
    secret: str,
    path: str,
    method: HttpMethod | str = HttpMethod.GET,
    *,
    clock: Clock = time.time,
) -> str:
    """Compute the ``Authorization`` header value for one request.

    Reading the clock is the only non-deterministic step; pass a fixed
    ``clock`` for reproducible output.

    Args:
        username: API user name.
        secret: API secret, used as the HMAC key.
        path: Request target as sent (relative path including query string).
        method: HTTP method. Plain strings are used with their case as given.
        clock: Returns the current Unix time in seconds.

    Returns:
        ``"hmac <username>:<hash>:<timestamp>"``.

    Raises:
        InvalidArgumentError: If ``username`` or ``secret`` is empty.
    """
    if not username:
        raise InvalidArgumentError("Cannot sign a request with an empty username")
    if not secret:
        raise InvalidArgumentError("Cannot sign a request with an empty secret")

    timestamp = int(clock())
    message = f"{timestamp}-{method_name(method)}-{path}"
    digest = hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    return f"hmac {username}:{digest}:{timestamp}"


@dataclass(frozen=True)
class RequestSigner:
    """Signs request descriptors with one credential pair.

    Instances are callable, so a signer can be passed wherever a
    ``RequestDescriptor -> RequestDescriptor`` function is expected.

    Example:
        ```python
        signer = RequestSigner(Credentials("api-user", "s3cret"))
        request = signer.sign(build_fetch_lists_request())
        ```

    Attributes:
        credentials: Username/secret pair to sign with.
        clock: Returns the current Unix time in seconds.
    """

    credentials: Credentials
    clock: Clock = field(default=time.time, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.credentials.validate()

    def authorization(self, descriptor: RequestDescriptor) -> str:
        """Return the ``Authorization`` header value for ``descriptor``."""
        return compute_auth_header(
            self.credentials.username,
            self.credentials.secret,
            descriptor.path,
            descriptor.method,
            clock=self.clock,
        )

    def sign(self, descriptor: RequestDescriptor) -> RequestDescriptor:
        """Return a copy of ``descriptor`` carrying the ``Authorization`` header."""
        signed = descriptor.with_header(AUTHORIZATION_HEADER, self.authorization(descriptor))
        logger.debug("Signed %s %s", descriptor.method.value, descriptor.path)
        return signed

    __call__ = sign


def authenticate_request(
    username: str,
    secret: str,
    descriptor: RequestDescriptor,
    *,
    clock: Clock = time.time,
) -> RequestDescriptor:
    """Sign a single descriptor without keeping a ``RequestSigner`` around."""
    return RequestSigner(Credentials(username, secret), clock=clock).sign(descriptor)
