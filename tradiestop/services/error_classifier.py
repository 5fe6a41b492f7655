"""
Error classification for API failures: retryable, fatal or unknown.
"""

import socket
from enum import Enum

import requests.exceptions

from tradiestop.services.exceptions import ApiConnectionError, ApiError

NETWORK_ERRORS = (
    socket.timeout,
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
)


class ErrorType(Enum):
    """Classification of error types."""

    RETRYABLE = "retryable"  # 429, 5xx, network errors
    FATAL = "fatal"  # other 4xx
    UNKNOWN = "unknown"


class ErrorClassifier:
    """
    Classifies API errors so only transient failures are retried.

    Example:
        >>> ErrorClassifier().classify(ApiError("Too many requests", 429))
        <ErrorType.RETRYABLE: 'retryable'>
    """

    def classify(self, exception: Exception) -> ErrorType:
        if isinstance(exception, ApiConnectionError) or isinstance(
            exception, NETWORK_ERRORS
        ):
            return ErrorType.RETRYABLE

        if isinstance(exception, ApiError) and exception.status_code is not None:
            status_code = exception.status_code
            if status_code == 429 or 500 <= status_code < 600:
                return ErrorType.RETRYABLE
            if 400 <= status_code < 500:
                return ErrorType.FATAL

        return ErrorType.UNKNOWN

    def is_retryable(self, exception: Exception) -> bool:
        return self.classify(exception) == ErrorType.RETRYABLE

    def get_error_description(self, exception: Exception) -> str:
        """
        Human-readable description, e.g. ``"Server error (HTTP 503) - retryable"``.
        """
        error_type = self.classify(exception)
        status_code = getattr(exception, "status_code", None)

        if isinstance(exception, ApiError) and status_code is not None:
            if status_code == 429:
                return f"Rate limit error (HTTP 429) - {error_type.value}"
            if 500 <= status_code < 600:
                return f"Server error (HTTP {status_code}) - {error_type.value}"
            if 400 <= status_code < 500:
                return (
                    f"Client error (HTTP {status_code}): {exception.message} "
                    f"- {error_type.value}"
                )

        if isinstance(exception, (socket.timeout, requests.exceptions.Timeout)):
            return f"Network timeout error - {error_type.value}"

        if isinstance(
            exception, (ApiConnectionError, requests.exceptions.ConnectionError)
        ):
            return f"Network connection error - {error_type.value}"

        return f"{type(exception).__name__}: {exception} - {error_type.value}"

