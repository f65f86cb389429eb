"""HTTP client handles for sending signed requests."""

from .http import ApiHttpClient, HttpResponse
from .registry import ClientRegistry

__all__ = ["ApiHttpClient", "ClientRegistry", "HttpResponse"]
