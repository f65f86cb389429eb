"""Credentials: the username/secret pair used to sign API requests."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidArgumentError


@dataclass(frozen=True)
class Credentials:
    """Selligent API credentials.

    The secret never leaves the process: it is only used as the HMAC key.

    Attributes:
        username: API user name, sent in clear in the ``Authorization`` header.
        secret: API secret (the "password" in the Selligent console).
    """

    username: str
    secret: str

    def __repr__(self) -> str:
        """Return masked representation to prevent credential leakage in logs."""
        return f"Credentials(username={self.username!r}, secret='***')"

    def __str__(self) -> str:
        """Return masked string representation."""
        return self.__repr__()

    def validate(self) -> None:
        """Raise if either part is empty.

        Raises:
            InvalidArgumentError: If ``username`` or ``secret`` is empty.
        """
        if not self.username:
            raise InvalidArgumentError("Credentials username cannot be empty")
        if not self.secret:
            raise InvalidArgumentError("Credentials secret cannot be empty")
