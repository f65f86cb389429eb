"""Request builders for the Selligent REST API endpoints.

Every function here is pure: it validates identifiers, assembles the path
and body, and returns an unsigned ``RequestDescriptor``. Sign the result
with ``RequestSigner`` before sending it.

Two path families are used:

- ``/restapi/api/{async|sync}/...`` for single-record and list operations
- ``/restapi/api/stream/...`` for bulk appends
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from ..errors import InvalidArgumentError
from .descriptor import HttpMethod, RequestDescriptor, build_request
from .payloads import CampaignTriggerPayload, SearchRequestBody
from .stream import serialize_stream

API_ROOT = "/restapi/api"

Identifier = int | str


class ListType(str, Enum):
    """Kind of records a list search or bulk upload targets."""

    PROFILES = "profiles"
    DATA = "data"


def _mode(async_: bool) -> str:
    return "async" if async_ else "sync"


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _record_id(name: str, value: Identifier) -> int:
    """Validate a list / profile / record id and return it as an int.

    Accepts positive ints and strings of digits (ids read from the
    environment arrive as strings).
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    if isinstance(value, str):
        stripped = value.strip()
        if not _is_digits(stripped):
            raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
        value = int(stripped)
    if not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return value


def _campaign_id(value: Identifier) -> str:
    """Validate a campaign id: a positive int or a path-safe API name."""
    if isinstance(value, str) and not _is_digits(value.strip()):
        if not value or any(ch in value for ch in "/?#") or any(ch.isspace() for ch in value):
            raise InvalidArgumentError(f"Invalid campaign id {value!r}")
        return value
    return str(_record_id("campaign_id", value))


def _list_type(value: ListType | str) -> ListType:
    try:
        return ListType(value)
    except ValueError as e:
        raise InvalidArgumentError(
            f"list_type must be one of {[t.value for t in ListType]}, got {value!r}"
        ) from e


def _fields(value: Sequence[str] | None) -> list[str]:
    if isinstance(value, str):
        raise InvalidArgumentError(f"fields must be a sequence of column names, got {value!r}")
    return list(value or ())


def _with_fields(path: str, fields: Sequence[str] | None) -> str:
    columns = _fields(fields)
    if columns:
        return f"{path}?fields=" + ",".join(columns)
    return path


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


def build_fetch_lists_request() -> RequestDescriptor:
    """``GET /restapi/api/async/lists``."""
    return build_request(f"{API_ROOT}/async/lists", None, HttpMethod.GET)


def build_fetch_list_request(list_id: Identifier) -> RequestDescriptor:
    """``GET /restapi/api/async/lists/{list_id}``."""
    list_id = _record_id("list_id", list_id)
    return build_request(f"{API_ROOT}/async/lists/{list_id}", None, HttpMethod.GET)


def build_fetch_list_profiles_request(
    list_id: Identifier,
    fields: Sequence[str] | None = (),
) -> RequestDescriptor:
    """Fetch the profiles of a list, optionally restricted to ``fields``."""
    list_id = _record_id("list_id", list_id)
    path = _with_fields(f"{API_ROOT}/async/lists/{list_id}/profiles", fields)
    return build_request(path, None, HttpMethod.GET)


def build_fetch_list_data_request(
    list_id: Identifier,
    fields: Sequence[str] | None = (),
) -> RequestDescriptor:
    """Fetch the data records of a list, optionally restricted to ``fields``.

    Always uses the ``sync`` mode segment.
    """
    list_id = _record_id("list_id", list_id)
    path = _with_fields(f"{API_ROOT}/sync/lists/{list_id}/data", fields)
    return build_request(path, None, HttpMethod.GET)


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


def build_fetch_profile_request(list_id: Identifier, profile_id: Identifier) -> RequestDescriptor:
    list_id = _record_id("list_id", list_id)
    profile_id = _record_id("profile_id", profile_id)
    return build_request(
        f"{API_ROOT}/async/lists/{list_id}/profiles/{profile_id}", None, HttpMethod.GET
    )


def build_create_profile_request(
    list_id: Identifier,
    body: Mapping[str, Any],
    async_: bool = True,
) -> RequestDescriptor:
    list_id = _record_id("list_id", list_id)
    return build_request(
        f"{API_ROOT}/{_mode(async_)}/lists/{list_id}/profiles", body, HttpMethod.POST
    )


def build_update_profile_request(
    list_id: Identifier,
    profile_id: Identifier,
    body: Mapping[str, Any],
    async_: bool = True,
) -> RequestDescriptor:
    list_id = _record_id("list_id", list_id)
    profile_id = _record_id("profile_id", profile_id)
    return build_request(
        f"{API_ROOT}/{_mode(async_)}/lists/{list_id}/profiles/{profile_id}",
        body,
        HttpMethod.PUT,
    )


def build_delete_profile_request(
    list_id: Identifier,
    profile_id: Identifier,
    async_: bool = True,
) -> RequestDescriptor:
    list_id = _record_id("list_id", list_id)
    profile_id = _record_id("profile_id", profile_id)
    return build_request(
        f"{API_ROOT}/{_mode(async_)}/lists/{list_id}/profiles/{profile_id}",
        None,
        HttpMethod.DELETE,
    )


def build_create_many_profiles_request(
    list_id: Identifier,
    profiles: Sequence[Mapping[str, Any]],
    *,
    strict: bool = False,
) -> RequestDescriptor:
    """Append many profiles in one call through the stream endpoint.

    See ``serialize_stream`` for the payload format and its precondition.
    """
    list_id = _record_id("list_id", list_id)
    return build_request(
        f"{API_ROOT}/stream/lists/{list_id}/profiles/post?mode=append",
        serialize_stream(profiles, strict=strict),
        HttpMethod.POST,
    )


# ---------------------------------------------------------------------------
# Data records
# ---------------------------------------------------------------------------


def build_create_data_record_request(
    list_id: Identifier,
    body: Mapping[str, Any],
    async_: bool = True,
) -> RequestDescriptor:
    list_id = _record_id("list_id", list_id)
    return build_request(
        f"{API_ROOT}/{_mode(async_)}/lists/{list_id}/data", body, HttpMethod.POST
    )


def build_update_data_record_request(
    list_id: Identifier,
    record_id: Identifier,
    body: Mapping[str, Any],
    async_: bool = True,
) -> RequestDescriptor:
    list_id = _record_id("list_id", list_id)
    record_id = _record_id("record_id", record_id)
    return build_request(
        f"{API_ROOT}/{_mode(async_)}/lists/{list_id}/data/{record_id}",
        body,
        HttpMethod.PUT,
    )


def build_delete_data_record_request(
    list_id: Identifier,
    record_id: Identifier,
    async_: bool = True,
) -> RequestDescriptor:
    list_id = _record_id("list_id", list_id)
    record_id = _record_id("record_id", record_id)
    return build_request(
        f"{API_ROOT}/{_mode(async_)}/lists/{list_id}/data/{record_id}",
        None,
        HttpMethod.DELETE,
    )


def build_create_many_data_records_request(
    list_id: Identifier,
    records: Sequence[Mapping[str, Any]],
    *,
    strict: bool = False,
) -> RequestDescriptor:
    """Append many data records in one call through the stream endpoint."""
    list_id = _record_id("list_id", list_id)
    return build_request(
        f"{API_ROOT}/stream/lists/{list_id}/data/post?mode=append",
        serialize_stream(records, strict=strict),
        HttpMethod.POST,
    )


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


def build_search_list_request(
    list_type: ListType | str,
    list_id: Identifier,
    filter: Mapping[str, Any],
    fields: Sequence[str] | None = None,
    limit: int | None = None,
) -> RequestDescriptor:
    """Search the profiles or data records of a list (always ``sync``).

    Args:
        list_type: ``"profiles"`` or ``"data"``.
        list_id: Id of the list to search.
        filter: Selligent filter expression.
        fields: Columns to return; omitted from the body when empty.
        limit: Deprecated. Accepted for compatibility but not sent; the
            endpoint has no limit parameter.

    Raises:
        InvalidArgumentError: On an unknown list type or a bad list id.
    """
    if limit is not None:
        warnings.warn(
            "The search 'limit' argument has no effect and will be removed",
            DeprecationWarning,
            stacklevel=2,
        )
    list_type = _list_type(list_type)
    list_id = _record_id("list_id", list_id)
    body = SearchRequestBody(fields=_fields(fields) or None, filter=dict(filter))
    return build_request(
        f"{API_ROOT}/sync/lists/{list_id}/{list_type.value}/search",
        body,
        HttpMethod.POST,
    )


def build_search_profiles_request(
    list_id: Identifier,
    filter: Mapping[str, Any],
    fields: Sequence[str] | None = None,
    limit: int | None = None,
) -> RequestDescriptor:
    return build_search_list_request(ListType.PROFILES, list_id, filter, fields, limit)


def build_search_data_request(
    list_id: Identifier,
    filter: Mapping[str, Any],
    fields: Sequence[str] | None = None,
    limit: int | None = None,
) -> RequestDescriptor:
    return build_search_list_request(ListType.DATA, list_id, filter, fields, limit)


# ---------------------------------------------------------------------------
# Campaigns
# ---------------------------------------------------------------------------


def build_trigger_campaign_request(
    campaign_id: Identifier,
    action_list_id: Identifier,
    user_id: Identifier,
    user_list_id: Identifier,
    action_list_record: Mapping[str, Any] | None = None,
    gate: str = "POC_GATE",
) -> RequestDescriptor:
    """Trigger a campaign for one user.

    Args:
        campaign_id: Campaign id or API name.
        action_list_id: Id of the action list.
        user_id: Id of the user (profile) the campaign targets.
        user_list_id: Id of the list holding the user.
        action_list_record: Values for the action list record. Defaults to
            an empty record.
        gate: Campaign gate. Defaults to ``"POC_GATE"``.

    Raises:
        InvalidArgumentError: On a bad campaign, action list, user or list id.
        SerializationError: If ``action_list_record`` cannot be JSON encoded.
    """
    campaign = _campaign_id(campaign_id)
    payload = CampaignTriggerPayload(
        action_list=_record_id("action_list_id", action_list_id),
        user=_record_id("user_id", user_id),
        user_list_id=_record_id("user_list_id", user_list_id),
        action_list_record=dict(action_list_record or {}),
        gate=gate,
    )
    return build_request(
        f"{API_ROOT}/async/campaigns/{campaign}/trigger", payload, HttpMethod.POST
    )
