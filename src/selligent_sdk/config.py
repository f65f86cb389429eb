"""SelligentSettings: connection settings loaded from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .auth.credentials import Credentials
from .errors import ConfigurationError

_DEFAULT_TIMEOUT = 30.0  # seconds


@dataclass(frozen=True)
class SelligentSettings:
    """Settings needed to talk to a Selligent instance.

    Attributes:
        username: API user name (first part of the ``Authorization`` header).
        secret: API secret used as the HMAC key.
        base_url: Base URL of the Selligent instance
            (e.g. ``https://acme.slgnt.eu``).
        profiles_list_id: Default profiles list, if configured.
        timeout: HTTP timeout in seconds.
    """

    username: str
    secret: str
    base_url: str
    profiles_list_id: int | None = None
    timeout: float = _DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        """Return masked representation to prevent secret leakage in logs."""
        return (
            f"SelligentSettings(username={self.username!r}, secret='***', "
            f"base_url={self.base_url!r}, profiles_list_id={self.profiles_list_id!r}, "
            f"timeout={self.timeout!r})"
        )

    @property
    def credentials(self) -> Credentials:
        """The username/secret pair as ``Credentials``."""
        return Credentials(username=self.username, secret=self.secret)

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> SelligentSettings:
        """Create settings from environment variables.

        Expected env vars:
        - SELLIGENT_USERNAME: API user name (required)
        - SELLIGENT_PASSWORD: API secret (required)
        - SELLIGENT_BASE_URL: Instance base URL (required)
        - SELLIGENT_PROFILES_LIST_ID: Default profiles list id
        - SELLIGENT_TIMEOUT: HTTP timeout in seconds (default: 30)

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigurationError: If a required variable is missing or a numeric
                variable cannot be parsed.
        """
        env = os.environ if environ is None else environ

        missing = [
            name
            for name in ("SELLIGENT_USERNAME", "SELLIGENT_PASSWORD", "SELLIGENT_BASE_URL")
            if not env.get(name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        list_id_raw = env.get("SELLIGENT_PROFILES_LIST_ID", "").strip()
        profiles_list_id = None
        if list_id_raw:
            try:
                profiles_list_id = int(list_id_raw)
            except ValueError as e:
                raise ConfigurationError(
                    f"SELLIGENT_PROFILES_LIST_ID must be an integer, got {list_id_raw!r}"
                ) from e

        timeout_raw = env.get("SELLIGENT_TIMEOUT", "").strip()
        timeout = _DEFAULT_TIMEOUT
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError as e:
                raise ConfigurationError(
                    f"SELLIGENT_TIMEOUT must be a number, got {timeout_raw!r}"
                ) from e
            if timeout <= 0:
                raise ConfigurationError("SELLIGENT_TIMEOUT must be positive")

        return cls(
            username=env["SELLIGENT_USERNAME"],
            secret=env["SELLIGENT_PASSWORD"],
            base_url=env["SELLIGENT_BASE_URL"],
            profiles_list_id=profiles_list_id,
            timeout=timeout,
        )
