"""Calculator modules for invoices and currency."""

from tradiestop.calculators.currency import (
    format_currency,
    format_display_date,
    format_percentage,
    format_service_date,
    parse_amount,
    parse_display_date,
    parse_number,
    parse_quantity,
    parse_service_date,
    round_cents,
)
from tradiestop.calculators.invoice_calculator import (
    InvoiceTotals,
    PaymentSummary,
    calculate_invoice_totals,
    calculate_line_total,
    calculate_subtotal,
    calculate_tax,
    reconcile_invoice_totals,
    summarize_payments,
)

__all__ = [
    # currency
    "format_currency",
    "format_display_date",
    "format_percentage",
    "format_service_date",
    "parse_amount",
    "parse_display_date",
    "parse_number",
    "parse_quantity",
    "parse_service_date",
    "round_cents",
    # invoice_calculator
    "InvoiceTotals",
    "PaymentSummary",
    "calculate_invoice_totals",
    "calculate_line_total",
    "calculate_subtotal",
    "calculate_tax",
    "reconcile_invoice_totals",
    "summarize_payments",
]
