"""
JSON-over-HTTP client for the marketplace REST API.
"""

import logging
from typing import Any, Callable, Dict, Optional

import requests
import requests.exceptions

from tradiestop.services.exceptions import (
    DEFAULT_API_ERROR_MESSAGE,
    ApiConnectionError,
    ApiError,
)
from tradiestop.services.retry_handler import (
    CircuitBreakerError,
    RetryExhaustedException,
    RetryHandler,
)
from tradiestop.utils.logging_utils import (
    LogContext,
    generate_correlation_id,
    sanitize_sensitive_data,
)

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


class ApiClient:
    """
    Thin wrapper around ``requests.Session`` for the marketplace API.

    Features:
    - Bearer token taken from the current session on every request
    - Server error messages surfaced as ApiError
    - GET requests retried on 429, 5xx and network errors; writes sent once
    - One correlation ID per request in the logs, payloads redacted

    Example:
        >>> client = ApiClient("http://localhost:5001/api", lambda: None)
        >>> client.build_url("/data/all")
        'http://localhost:5001/api/data/all'
    """

    def __init__(
        self,
        base_url: str,
        token_provider: Optional[TokenProvider] = None,
        timeout: float = 10.0,
        retry_handler: Optional[RetryHandler] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            base_url: API root, e.g. ``http://localhost:5001/api``
            token_provider: Returns the bearer token of the logged-in user,
                or None when logged out
            timeout: Seconds to wait for the server
            retry_handler: Retry policy for GET requests
            session: HTTP session to use (injected in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider or (lambda: None)
        self.timeout = timeout
        self.retry_handler = retry_handler or RetryHandler()
        self._session = session or requests.Session()

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self.token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(self, method: str, endpoint: str, body: Optional[Any] = None) -> Any:
        """
        Send a request and return the decoded JSON response.

        Args:
            method: HTTP verb
            endpoint: Path below the API root, e.g. ``/bookings``
            body: JSON-serialisable request body

        Returns:
            Parsed JSON, or None for 204 No Content

        Raises:
            ApiError: Non-2xx response; message taken from the body
            ApiConnectionError: The server could not be reached
        """
        method = method.upper()
        if method != "GET":
            return self._send(method, endpoint, body)

        try:
            return self.retry_handler.execute_with_retry(
                self._send, method, endpoint, body
            )
        except RetryExhaustedException as e:
            if isinstance(e.last_error, ApiError):
                raise e.last_error from e
            raise ApiConnectionError(str(e)) from e
        except CircuitBreakerError as e:
            logger.error(f"API Error on {method} {endpoint}: {e}")
            raise ApiConnectionError(str(e)) from e

    def _send(self, method: str, endpoint: str, body: Optional[Any]) -> Any:
        with LogContext(correlation_id=generate_correlation_id()):
            logger.debug(
                f"{method} {endpoint}"
                + (f" body={sanitize_sensitive_data(body)}" if body is not None else "")
            )
            try:
                response = self._session.request(
                    method,
                    self.build_url(endpoint),
                    json=body,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
            except requests.exceptions.RequestException as e:
                logger.error(f"API Error on {method} {endpoint}: {e}")
                raise ApiConnectionError(f"Could not reach the API: {e}") from e

            return self._handle_response(method, endpoint, response)

    def _handle_response(
        self, method: str, endpoint: str, response: requests.Response
    ) -> Any:
        if not response.ok:
            message = self._error_message(response)
            logger.error(
                f"API Error on {method} {endpoint}: "
                f"HTTP {response.status_code} {message}"
            )
            raise ApiError(message, response.status_code)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"API Error on {method} {endpoint}: invalid JSON ({e})")
            raise ApiError("The API returned an invalid response", response.status_code)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return DEFAULT_API_ERROR_MESSAGE
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return DEFAULT_API_ERROR_MESSAGE

    def get(self, endpoint: str) -> Any:
        return self.request("GET", endpoint)

    def post(self, endpoint: str, body: Optional[Any] = None) -> Any:
        return self.request("POST", endpoint, body)

    def put(self, endpoint: str, body: Optional[Any] = None) -> Any:
        return self.request("PUT", endpoint, body)

    def delete(self, endpoint: str) -> Any:
        return self.request("DELETE", endpoint)

    def close(self) -> None:
        self._session.close()
