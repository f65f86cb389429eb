"""Structured logging configuration for the Selligent SDK.

Uses ``structlog`` for machine-readable JSON output in production and
human-readable console output during development. Both structlog events
and records from the SDK's stdlib loggers go through the same chain, and
``redact_secrets`` masks credentials before anything is rendered.

Usage::

    from selligent_sdk.logging import configure_logging, get_logger

    configure_logging(log_format="json", verbose=True)
    logger = get_logger(__name__)
    logger.info("profiles_synced", list_id=42, count=10)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

import structlog

REDACTED = "***"

# Event keys (and nested mapping keys, e.g. request headers) whose values
# are always masked. Compared case-insensitively.
SECRET_KEYS = frozenset({"authorization", "secret", "password"})

# "hmac <user>:<sha256 hex>:<timestamp>"; the hash is masked, the rest kept.
_HMAC_HEADER = re.compile(r"(hmac [^\s:]+:)[0-9a-fA-F]{64}(:\d+)")

# Third-party loggers that log full request lines at DEBUG.
_NOISY_LOGGERS = ("urllib3", "requests")


def _redact(key: str, value: Any) -> Any:
    if key.lower() in SECRET_KEYS:
        return REDACTED
    if isinstance(value, str):
        return _HMAC_HEADER.sub(rf"\1{REDACTED}\2", value)
    if isinstance(value, Mapping):
        return {k: _redact(str(k), v) for k, v in value.items()}
    return value


def redact_secrets(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """structlog processor that masks secrets and Authorization hashes.

    Values under ``SECRET_KEYS`` are replaced with ``REDACTED``, at the top
    level and inside mapping values. The hash part of any
    ``hmac user:hash:timestamp`` string, the rendered event message
    included, is masked too.
    """
    return {key: _redact(key, value) for key, value in event_dict.items()}


def configure_logging(
    log_format: str = "text",
    verbose: bool = False,
) -> None:
    """Configure structured logging for the SDK.

    Should be called once at application startup. The library itself never
    calls this; it only emits records.

    Args:
        log_format: ``"json"`` for machine-readable output, ``"text"``
            for human-readable console output.
        verbose: If ``True``, set log level to ``DEBUG``; otherwise ``INFO``.
    """
    level = logging.DEBUG if verbose else logging.INFO

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            redact_secrets,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog BoundLogger wrapping a stdlib logger."""
    return structlog.get_logger(name)
