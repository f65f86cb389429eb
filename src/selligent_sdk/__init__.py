"""Selligent SDK.

Request builders and HMAC authentication for the Selligent
marketing-automation REST API: lists, profiles, data records, search,
bulk stream uploads and campaign triggers.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("selligent-sdk")
except PackageNotFoundError:
    __version__ = "0.0.0"

from .api import (
    CampaignTriggerPayload,
    HttpMethod,
    ListType,
    RequestDescriptor,
    SearchRequestBody,
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
    build_request,
    build_search_data_request,
    build_search_list_request,
    build_search_profiles_request,
    build_trigger_campaign_request,
    build_update_data_record_request,
    build_update_profile_request,
    serialize_stream,
)
from .auth import Credentials, RequestSigner, authenticate_request, compute_auth_header
from .client import SelligentClient
from .config import SelligentSettings
from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    SelligentError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .logging import configure_logging, get_logger
from .transport import ApiHttpClient, ClientRegistry, HttpResponse

__all__ = [
    "ApiHttpClient",
    "CampaignTriggerPayload",
    "ClientRegistry",
    "ConfigurationError",
    "Credentials",
    "HttpMethod",
    "HttpResponse",
    "InvalidArgumentError",
    "ListType",
    "RequestDescriptor",
    "RequestSigner",
    "SearchRequestBody",
    "SelligentClient",
    "SelligentError",
    "SelligentSettings",
    "SerializationError",
    "TransportError",
    "ValidationError",
    "authenticate_request",
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
    "compute_auth_header",
    "configure_logging",
    "get_logger",
    "serialize_stream",
]
