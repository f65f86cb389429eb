"""HMAC authentication for Selligent API requests."""

from .credentials import Credentials
from .signer import AUTHORIZATION_HEADER, RequestSigner, authenticate_request, compute_auth_header

__all__ = [
    "AUTHORIZATION_HEADER",
    "Credentials",
    "RequestSigner",
    "authenticate_request",
    "compute_auth_header",
]
