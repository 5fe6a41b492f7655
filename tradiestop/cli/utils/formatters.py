"""Output formatting utilities for CLI."""

from typing import Iterable, List

import click

from tradiestop.models.enums import (
    BookingStatus,
    PaymentStatus,
    SupportTicketStatus,
    ToastType,
)
from tradiestop.models.notification import ChartData, ToastMessage

STATUS_COLORS = {
    BookingStatus.REQUESTED: "yellow",
    BookingStatus.CONFIRMED: "blue",
    BookingStatus.COMPLETED: "green",
    BookingStatus.CANCELLED: "red",
    PaymentStatus.PAID: "green",
    PaymentStatus.PENDING: "yellow",
    PaymentStatus.OVERDUE: "red",
    SupportTicketStatus.OPEN: "yellow",
    SupportTicketStatus.CLOSED: "green",
}


def format_success(message: str) -> str:
    """Format a success message with green color.

    Args:
        message: The success message to format

    Returns:
        Formatted success message with color
    """
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_status(status) -> str:
    """Colour a booking, payment or ticket status by its meaning."""
    return click.style(status.value, fg=STATUS_COLORS.get(status))


def format_toast(toast: ToastMessage) -> str:
    if toast.type == ToastType.SUCCESS:
        return format_success(toast.message)
    if toast.type == ToastType.ERROR:
        return format_error(toast.message)
    return format_info(toast.message)


def format_heading(title: str) -> str:
    return click.style(title, bold=True, underline=True)


def format_chart(chart: ChartData, width: int = 30) -> str:
    """Horizontal bar chart, one line per label."""
    if not chart.labels:
        return "  (no data yet)"
    peak = max(chart.data) or 1
    lines = []
    for label, value in zip(chart.labels, chart.data):
        bar = "█" * int(round(width * value / peak)) if value > 0 else ""
        lines.append(f"  {label:<4}{bar} {value:g}")
    return "\n".join(lines)


def _visible_width(cell: str) -> int:
    return len(click.unstyle(cell))


def format_table(headers: List[str], rows: Iterable[List[str]], max_width: int = 40) -> str:
    """Format data as a table.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width for each column (default: 40)

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""
    rows = [[str(cell) for cell in row] for row in rows]

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(col_widths)]):
            col_widths[i] = max(col_widths[i], _visible_width(cell))
    col_widths = [min(w, max_width) for w in col_widths]

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"
    header_row = "|" + "|".join(
        f" {h:<{col_widths[i]}} " for i, h in enumerate(headers)
    ) + "|"

    data_rows = []
    for row in rows:
        cells = []
        for i, cell in enumerate(row[: len(col_widths)]):
            if _visible_width(cell) > col_widths[i]:
                cell = click.unstyle(cell)[: col_widths[i]]
            padding = " " * (col_widths[i] - _visible_width(cell))
            cells.append(f" {cell}{padding} ")
        data_rows.append("|" + "|".join(cells) + "|")

    table_lines = [separator, header_row, separator]
    if rows:
        table_lines.extend(data_rows)
        table_lines.append(separator)
    return "\n".join(table_lines)
