"""Errors raised by the marketplace API client."""

from typing import Optional

DEFAULT_API_ERROR_MESSAGE = "An API error occurred"


class ApiError(Exception):
    """A request to the marketplace API failed.

    Attributes:
        message: Message from the response body, or a generic message
        status_code: HTTP status, None when no response was received
    """

    def __init__(
        self, message: str = DEFAULT_API_ERROR_MESSAGE, status_code: Optional[int] = None
    ) -> None:
        self.message = message or DEFAULT_API_ERROR_MESSAGE
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class ApiConnectionError(ApiError):
    """The server could not be reached or did not answer in time."""


class NotAuthenticatedError(Exception):
    """An operation needs a logged-in user and there is none."""
