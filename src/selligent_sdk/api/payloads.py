"""Typed JSON bodies for the search and campaign trigger endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchRequestBody(BaseModel):
    """Body of ``POST .../lists/{id}/{profiles|data}/search``.

    ``fields`` is dumped only when non-empty, and always before ``filter``.

    Attributes:
        fields: Columns to return. Empty means all columns.
        filter: Selligent filter expression, e.g. ``{"ID": 0, "op": "<>"}``.
    """

    model_config = ConfigDict(frozen=True)

    fields: list[str] | None = None
    filter: dict[str, Any]

    @field_validator("fields")
    @classmethod
    def _drop_empty_fields(cls, value: list[str] | None) -> list[str] | None:
        return value or None


class CampaignTriggerPayload(BaseModel):
    """Body of ``POST /restapi/api/async/campaigns/{id}/trigger``.

    Attributes:
        action_list: Id of the action list (``ActionList``).
        user: Id of the user the campaign is triggered for (``User``).
        user_list_id: Id of the list holding ``user`` (``UserListId``).
        action_list_record: Values for the action list record
            (``ActionListRecord``).
        gate: Campaign gate name (``Gate``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    action_list: int | str = Field(alias="ActionList")
    user: int | str = Field(alias="User")
    user_list_id: int | str = Field(alias="UserListId")
    action_list_record: dict[str, Any] = Field(default_factory=dict, alias="ActionListRecord")
    gate: str = Field(default="POC_GATE", alias="Gate")
