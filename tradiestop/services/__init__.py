"""Services for talking to the marketplace API and persisting the session."""

from tradiestop.services.api_client import ApiClient
from tradiestop.services.error_classifier import ErrorClassifier, ErrorType
from tradiestop.services.exceptions import (
    ApiConnectionError,
    ApiError,
    NotAuthenticatedError,
)
from tradiestop.services.marketplace_api import MarketplaceApi
from tradiestop.services.retry_handler import (
    CircuitBreakerError,
    RetryExhaustedException,
    RetryHandler,
)
from tradiestop.services.session_store import SessionStore

__all__ = [
    "ApiClient",
    "ApiConnectionError",
    "ApiError",
    "CircuitBreakerError",
    "ErrorClassifier",
    "ErrorType",
    "MarketplaceApi",
    "NotAuthenticatedError",
    "RetryExhaustedException",
    "RetryHandler",
    "SessionStore",
]
