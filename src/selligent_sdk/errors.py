"""Error hierarchy for the Selligent SDK.

- ``ValidationError``: bad identifiers, empty credentials, bad settings
- ``SerializationError``: a body or stream record cannot be JSON encoded
- ``TransportError``: the HTTP call itself failed
"""

from __future__ import annotations


class SelligentError(Exception):
    """Base error for all Selligent SDK errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)


# ============================================================================
# Validation errors
# ============================================================================


class ValidationError(SelligentError):
    """Base validation error.

    Raised synchronously to the immediate caller and never retried.
    """


class InvalidArgumentError(ValidationError):
    """An argument passed to a builder or signer is malformed.

    Raised for non-positive list / profile / record ids, empty credentials
    when signing, unknown list types and, under ``strict=True``, stream
    batches whose records do not share the first record's keys.
    """


class ConfigurationError(ValidationError):
    """Missing or invalid SDK configuration.

    Raised when required environment variables are missing or cannot be
    parsed.
    """


# ============================================================================
# Serialization errors
# ============================================================================


class SerializationError(SelligentError):
    """A request body or bulk stream record cannot be JSON encoded.

    Fatal to the single call; no partial output is returned.
    """


# ============================================================================
# Transport errors
# ============================================================================


class TransportError(SelligentError):
    """The HTTP collaborator failed to perform the request.

    The original exception is chained as ``__cause__``.

    Attributes:
        method: HTTP method of the failed request.
        path: Request path (relative to the base URL) of the failed request.
    """

    def __init__(
        self,
        message: str,
        *,
        method: str = "",
        path: str = "",
    ):
        super().__init__(message)
        self.method = method
        self.path = path
