"""Shared utilities."""

from tradiestop.utils.logging_utils import (
    ContextFilter,
    LogContext,
    generate_correlation_id,
    get_correlation_id,
    log_function_call,
    sanitize_sensitive_data,
)

__all__ = [
    "ContextFilter",
    "LogContext",
    "generate_correlation_id",
    "get_correlation_id",
    "log_function_call",
    "sanitize_sensitive_data",
]
