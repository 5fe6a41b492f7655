"""Invoice data models.

This module defines the invoice line items, the parties printed on an
invoice, the invoice record returned by the API and the creation payload
sent to ``POST /invoices``.
"""

import datetime as dt
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from tradiestop.models.base import BaseDataModel, Money, to_decimal
from tradiestop.models.enums import PaymentStatus
from tradiestop.models.tradie import CompanyDetails


class LineItem(BaseDataModel):
    """An editable invoice line before the server assigns it an id.

    Attributes:
        description: What was done or supplied
        quantity: Units billed (may be fractional, e.g. hours)
        unit_price: Price per unit

    Example:
        >>> item = LineItem(description="Labour", quantity="2", unit_price="45.50")
        >>> item.quantity * item.unit_price
        Decimal('91.00')
    """

    description: str = ""
    quantity: Money = Decimal("1")
    unit_price: Money = Decimal("0")

    @field_validator("quantity", "unit_price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal for precision."""
        return to_decimal(v)


class InvoiceItem(LineItem):
    """A persisted invoice line."""

    id: str = ""


class InvoiceTradie(BaseDataModel):
    """The issuing tradie as embedded in an invoice."""

    id: str
    name: str = ""
    profession: str = ""
    company_details: CompanyDetails = Field(default_factory=CompanyDetails)


class InvoiceClient(BaseDataModel):
    """The billed client as embedded in an invoice."""

    id: str
    name: str = ""
    address: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None


class Invoice(BaseDataModel):
    """Billing document generated from a completed booking.

    ``subtotal``, ``tax`` and ``total`` are the values computed and stored by
    the server; ``calculators.invoice_calculator.reconcile_invoice_totals``
    checks them against the line items.
    """

    id: str = Field(..., min_length=1)
    booking_id: str
    tradie: InvoiceTradie
    client: InvoiceClient
    job_address: Optional[str] = None
    invoice_number: str = ""
    issue_date: str = ""
    due_date: str = ""
    items: List[InvoiceItem] = Field(default_factory=list)
    notes: str = ""
    subtotal: Money = Decimal("0")
    tax: Money = Decimal("0")
    total: Money = Decimal("0")
    status: PaymentStatus = PaymentStatus.PENDING
    tax_rate: Money = Decimal("0")
    theme_color: str = "#334155"
    footer_notes: Optional[str] = None
    logo_data_url: Optional[str] = None
    signature_data_url: Optional[str] = None

    @field_validator("subtotal", "tax", "total", "tax_rate", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal for precision."""
        return to_decimal(v)

    @property
    def display_logo_url(self) -> str:
        """Logo to print: the invoice's own upload, else the company logo."""
        return self.logo_data_url or self.tradie.company_details.logo_url


class InvoiceCreationPayload(BaseDataModel):
    """Body of ``POST /invoices``.

    Dates are display strings ("June 15, 2024"), as stored on the invoice.
    """

    booking_id: str
    items: List[LineItem]
    notes: str = ""
    client_name: str = ""
    client_address: str = ""
    invoice_number: str
    issue_date: str
    due_date: str
    tax_rate: Money
    theme_color: str
    footer_notes: str = ""
    logo_url: str = ""


class InvoiceDraft(BaseDataModel):
    """The invoice being edited before it is sent to the server.

    Dates are kept as dates while editing and formatted for display when the
    creation payload is built.
    """

    booking_id: str
    items: List[LineItem] = Field(default_factory=list)
    notes: str = ""
    client_name: str = ""
    client_address: str = ""
    invoice_number: str = ""
    issue_date: dt.date
    due_date: dt.date
    tax_rate: Money = Decimal("10")
    theme_color: str = "#334155"
    footer_notes: str = ""
    logo_url: str = ""

    @field_validator("tax_rate", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return to_decimal(v)
