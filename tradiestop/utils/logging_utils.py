"""Structured logging helpers: request context, redaction, call tracing."""

import functools
import inspect
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Optional

_thread_local = threading.local()

# Substrings that mark a payload key as secret (matched case-insensitively)
SENSITIVE_FIELDS = {
    "password",
    "token",
    "secret",
    "authorization",
    "api_key",
    "apikey",
}

REDACTED = "***REDACTED***"


def generate_correlation_id() -> str:
    """Return a new correlation ID for tagging one API request in the logs."""
    return uuid.uuid4().hex[:12]


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the structured fields active on this thread."""
    return dict(getattr(_thread_local, "context", {}))


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID, or None outside of a request."""
    return get_log_context().get("correlation_id")


class LogContext:
    """
    Context manager that attaches structured fields to every log record
    emitted on the current thread while it is active.

    Example:
        with LogContext(user_id="client-1", correlation_id="ab12"):
            logger.info("Fetching bookings")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        if not hasattr(_thread_local, "context"):
            _thread_local.context = {}
        self.previous_context = _thread_local.context.copy()
        _thread_local.context.update(self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _thread_local.context = self.previous_context or {}


class ContextFilter(logging.Filter):
    """Logging filter that copies LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in getattr(_thread_local, "context", {}).items():
            setattr(record, key, value)
        return True


def sanitize_sensitive_data(data: Any) -> Any:
    """
    Redact secret values in a request or response payload before logging.

    Dictionaries are processed recursively, and so are lists of dictionaries.
    Keys are matched case-insensitively against SENSITIVE_FIELDS, so both
    ``password`` and ``newPassword`` are redacted.

    Args:
        data: Payload to sanitize (any JSON-like value)

    Returns:
        A sanitized copy; the input is never modified
    """
    if isinstance(data, list):
        return [sanitize_sensitive_data(item) for item in data]
    if not isinstance(data, dict):
        return data

    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(marker in str(key).lower() for marker in SENSITIVE_FIELDS):
            sanitized[key] = REDACTED if value is not None else None
        else:
            sanitized[key] = sanitize_sensitive_data(value)
    return sanitized


def _format_arguments(f: Callable, args: tuple, kwargs: dict) -> str:
    """Render call arguments by parameter name with secrets redacted."""
    try:
        bound = inspect.signature(f).bind(*args, **kwargs)
    except (TypeError, ValueError):
        return "..."
    named = {
        name: value
        for name, value in bound.arguments.items()
        if name not in ("self", "cls")
    }
    return ", ".join(
        f"{name}={value!r}" for name, value in sanitize_sensitive_data(named).items()
    )


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Decorator to log function entry, exit and exceptions.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Whether to include function arguments in logs
        level: Log level to use for entry/exit messages

    Example:
        @log_function_call
        def fetch_data(self):
            ...

        @log_function_call(include_args=True, level="INFO")
        def login(self, user_id, password):
            ...
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            if include_args:
                signature = _format_arguments(f, args, kwargs)
                logger.log(log_level, f"Entering {f.__name__}({signature})")
            else:
                logger.log(log_level, f"Entering {f.__name__}")

            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Exception in {f.__name__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise

            logger.log(log_level, f"Exiting {f.__name__}")
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
