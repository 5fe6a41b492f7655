"""CLI utility functions."""

from tradiestop.cli.utils.formatters import (
    format_chart,
    format_error,
    format_heading,
    format_info,
    format_status,
    format_success,
    format_table,
    format_toast,
    format_warning,
)

__all__ = [
    "format_chart",
    "format_error",
    "format_heading",
    "format_info",
    "format_status",
    "format_success",
    "format_table",
    "format_toast",
    "format_warning",
]
