"""Python client for the SignNow document-signing API."""

from .client import SignNowClient
from .client.common import ApiError, HttpError, ParseError, TransportError
from .config import ConfigError, encode_credentials
from .models import ApiHost, ApiTarget, Authorization, AuthType, RequestIntent

__all__ = [
    "ApiError",
    "ApiHost",
    "ApiTarget",
    "AuthType",
    "Authorization",
    "ConfigError",
    "HttpError",
    "ParseError",
    "RequestIntent",
    "SignNowClient",
    "TransportError",
    "encode_credentials",
]
