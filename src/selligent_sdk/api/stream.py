"""Bulk stream payload serializer for the ``.../post?mode=append`` endpoints."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..errors import InvalidArgumentError, SerializationError

logger = logging.getLogger(__name__)


def serialize_stream(records: Sequence[Mapping[str, Any]], *, strict: bool = False) -> str:
    """Serialize records into the pipe-header / JSON-lines stream format.

    The first line holds the first record's keys joined by ``|``; every
    record (the first included) follows as one compact JSON line. There is
    no trailing newline, and an empty batch serializes to ``""``.

    Every record must have the first record's keys in the same order. The
    server reads columns from the header, so a batch that breaks this is
    malformed.

    Args:
        records: Records to upload, in order.
        strict: Raise on records whose keys differ from the first record's.
            When ``False`` the mismatch is only logged.

    Returns:
        The stream payload.

    Raises:
        InvalidArgumentError: If ``strict`` and the records are heterogeneous.
        SerializationError: If a record cannot be JSON encoded.
    """
    if not records:
        return ""

    columns = list(records[0].keys())
    header = "|".join(str(column) for column in columns)

    lines = []
    for index, record in enumerate(records):
        if list(record.keys()) != columns:
            if strict:
                raise InvalidArgumentError(
                    f"Stream record {index} keys {list(record.keys())!r} "
                    f"do not match header {columns!r}"
                )
            logger.warning(
                "Stream record %d keys do not match header %r; payload will be malformed",
                index, columns,
            )
        try:
            lines.append(json.dumps(dict(record), separators=(",", ":"), allow_nan=False))
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode stream record {index}: {e}") from e

    return header + "\n" + "\n".join(lines)
