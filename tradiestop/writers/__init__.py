"""Writers rendering marketplace records as documents."""

from tradiestop.writers.invoice_preview_writer import (
    InvoicePreviewWriter,
    render_invoice_preview,
)

__all__ = [
    "InvoicePreviewWriter",
    "render_invoice_preview",
]
