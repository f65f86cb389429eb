"""Request descriptors and per-endpoint builders for the Selligent REST API."""

from .builders import (
    ListType,
    build_create_data_record_request,
    build_create_many_data_records_request,
    build_create_many_profiles_request,
    build_create_profile_request,
    build_delete_data_record_request,
    build_delete_profile_request,
    build_fetch_list_data_request,
    build_fetch_list_profiles_request,
    build_fetch_list_request,
    build_fetch_lists_request,
    build_fetch_profile_request,
    build_search_data_request,
    build_search_list_request,
    build_search_profiles_request,
    build_trigger_campaign_request,
    build_update_data_record_request,
    build_update_profile_request,
)
from .descriptor import DEFAULT_HEADERS, HttpMethod, RequestDescriptor, build_request
from .payloads import CampaignTriggerPayload, SearchRequestBody
from .stream import serialize_stream

__all__ = [
    "DEFAULT_HEADERS",
    "CampaignTriggerPayload",
    "HttpMethod",
    "ListType",
    "RequestDescriptor",
    "SearchRequestBody",
    "build_create_data_record_request",
    "build_create_many_data_records_request",
    "build_create_many_profiles_request",
    "build_create_profile_request",
    "build_delete_data_record_request",
    "build_delete_profile_request",
    "build_fetch_list_data_request",
    "build_fetch_list_profiles_request",
    "build_fetch_list_request",
    "build_fetch_lists_request",
    "build_fetch_profile_request",
    "build_request",
    "build_search_data_request",
    "build_search_list_request",
    "build_search_profiles_request",
    "build_trigger_campaign_request",
    "build_update_data_record_request",
    "build_update_profile_request",
    "serialize_stream",
]
