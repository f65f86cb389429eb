"""RequestDescriptor: immutable description of one API request."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel

from ..errors import InvalidArgumentError, SerializationError

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "*/*",
    "Connection": "keep-alive",
}


class HttpMethod(str, Enum):
    """HTTP verbs used by the Selligent REST API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


def method_name(method: HttpMethod | str) -> str:
    """Return the wire name of a method, keeping the case of plain strings."""
    if isinstance(method, HttpMethod):
        return method.value
    return str(method)


@dataclass(frozen=True)
class RequestDescriptor:
    """Fully specified HTTP request, ready to be signed and sent.

    Attributes:
        method: HTTP method.
        path: Request target relative to the instance base URL, including
            any query string (e.g. ``/restapi/api/async/lists/3/profiles?fields=ID``).
        headers: Request headers, as a read-only mapping.
        body: Request body; ``""`` when the request has none.
    """

    method: HttpMethod
    path: str
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    body: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def __hash__(self) -> int:
        return hash((self.method, self.path, tuple(self.headers.items()), self.body))

    def with_header(self, name: str, value: str) -> RequestDescriptor:
        """Return a copy of this descriptor with ``name`` set to ``value``."""
        return replace(self, headers={**self.headers, name: value})


def encode_json(value: Any) -> str:
    """Encode ``value`` as compact JSON, preserving key order.

    NaN and infinities are rejected; they have no JSON representation.

    Raises:
        SerializationError: If the value is not JSON encodable.
    """
    try:
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode request body as JSON: {e}") from e


def _http_method(method: HttpMethod | str) -> HttpMethod:
    try:
        return HttpMethod(method_name(method).upper())
    except ValueError as e:
        raise InvalidArgumentError(
            f"method must be one of {[m.value for m in HttpMethod]}, got {method!r}"
        ) from e


def build_request(
    path: str,
    body: str | Mapping[str, Any] | Sequence[Any] | BaseModel | None = None,
    method: HttpMethod | str = HttpMethod.GET,
) -> RequestDescriptor:
    """Build a descriptor with the headers every Selligent call carries.

    Args:
        path: Request target relative to the base URL.
        body: ``str`` bodies pass through unchanged, payload models are
            dumped by alias without their unset optional fields, mappings
            and sequences are JSON encoded and ``None`` produces an empty body.
        method: HTTP method. Defaults to ``GET``.

    Raises:
        InvalidArgumentError: If ``method`` is not a supported verb.
        SerializationError: If a structured body cannot be JSON encoded.
    """
    http_method = _http_method(method)

    if body is None:
        encoded = ""
    elif isinstance(body, str):
        encoded = body
    elif isinstance(body, BaseModel):
        # python mode keeps nested values as given, so encode_json rejects
        # the same values for model bodies as for plain mappings
        dumped = body.model_dump(mode="python", by_alias=True)
        encoded = encode_json({k: v for k, v in dumped.items() if v is not None})
    elif isinstance(body, Mapping):
        encoded = encode_json(dict(body))
    else:
        encoded = encode_json(list(body))

    return RequestDescriptor(
        method=http_method,
        path=path,
        headers=dict(DEFAULT_HEADERS),
        body=encoded,
    )
