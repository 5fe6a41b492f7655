"""Invoice calculator: line totals, subtotal, tax and grand total.

This module is the single implementation of invoice arithmetic. The draft
editor, the preview, payment summaries and the check of server-computed
totals all call into it, so the numbers shown before and after an invoice is
saved cannot drift apart.

Rules:
- line total = quantity × unit price, rounded to cents
- subtotal = sum of exact line products, rounded to cents
- tax = subtotal × tax rate / 100, rounded to cents
- total = subtotal + tax

Rounding is half-up to two decimal places.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Sequence, Union

from tradiestop.calculators.currency import round_cents
from tradiestop.models.base import to_decimal
from tradiestop.models.enums import PaymentStatus
from tradiestop.models.invoice import Invoice, LineItem

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class InvoiceTotals:
    """Computed totals of an invoice.

    Attributes:
        subtotal: Sum of all line amounts before tax
        tax: Tax amount (not the rate)
        total: Amount due (subtotal + tax)

    Example:
        >>> totals = InvoiceTotals(
        ...     subtotal=Decimal("100.00"),
        ...     tax=Decimal("10.00"),
        ...     total=Decimal("110.00"),
        ... )
        >>> totals.total
        Decimal('110.00')
    """

    subtotal: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class PaymentSummary:
    """Money received and outstanding across a set of invoices.

    Attributes:
        total_earnings: Sum of totals of paid invoices
        pending_amount: Sum of totals of invoices awaiting payment
        overdue_amount: Sum of totals of overdue invoices
        invoice_count: Number of invoices summarised
    """

    total_earnings: Decimal
    pending_amount: Decimal
    overdue_amount: Decimal
    invoice_count: int


def calculate_line_total(
    quantity: Union[Decimal, int, str], unit_price: Union[Decimal, int, str]
) -> Decimal:
    """Amount of a single invoice line.

    Example:
        >>> calculate_line_total(Decimal("1.5"), Decimal("33.33"))
        Decimal('50.00')
    """
    return round_cents(to_decimal(quantity) * to_decimal(unit_price))


def calculate_subtotal(items: Iterable[LineItem]) -> Decimal:
    """Sum of the exact line products, rounded once at the end.

    Args:
        items: Invoice lines (drafts or persisted)

    Returns:
        Subtotal in cents precision; 0.00 for no items

    Example:
        >>> calculate_subtotal([
        ...     LineItem(description="Labour", quantity=2, unit_price="45"),
        ...     LineItem(description="Parts", quantity=1, unit_price="12.50"),
        ... ])
        Decimal('102.50')
    """
    exact = sum(
        (to_decimal(item.quantity) * to_decimal(item.unit_price) for item in items),
        Decimal("0"),
    )
    return round_cents(exact)


def calculate_tax(
    subtotal: Union[Decimal, int, str], tax_rate: Union[Decimal, int, str]
) -> Decimal:
    """Tax amount for a subtotal at a percentage rate.

    Example:
        >>> calculate_tax(Decimal("102.50"), Decimal("10"))
        Decimal('10.25')
    """
    return round_cents(to_decimal(subtotal) * to_decimal(tax_rate) / HUNDRED)


def calculate_invoice_totals(
    items: Sequence[LineItem], tax_rate: Union[Decimal, int, str]
) -> InvoiceTotals:
    """Calculate subtotal, tax and total for a list of line items.

    Args:
        items: Invoice lines
        tax_rate: Tax percentage, e.g. 10 for 10%

    Returns:
        InvoiceTotals with total == subtotal + tax

    Example:
        >>> totals = calculate_invoice_totals(
        ...     [LineItem(description="Call-out", quantity=1, unit_price="80")],
        ...     Decimal("10"),
        ... )
        >>> (totals.subtotal, totals.tax, totals.total)
        (Decimal('80.00'), Decimal('8.00'), Decimal('88.00'))
    """
    subtotal = calculate_subtotal(items)
    tax = calculate_tax(subtotal, tax_rate)
    return InvoiceTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)


def reconcile_invoice_totals(invoice: Invoice) -> List[str]:
    """Compare the totals stored on an invoice with a fresh calculation.

    Args:
        invoice: Invoice as returned by the API

    Returns:
        Names of the fields ("subtotal", "tax", "total") whose stored value
        differs from the calculated one; empty when they agree
    """
    expected = calculate_invoice_totals(invoice.items, invoice.tax_rate)
    mismatches = []
    for field in ("subtotal", "tax", "total"):
        stored = round_cents(getattr(invoice, field))
        if stored != getattr(expected, field):
            mismatches.append(field)

    if mismatches:
        logger.debug(
            f"Invoice {invoice.invoice_number or invoice.id}: stored "
            f"{', '.join(mismatches)} differ from calculated totals {expected}"
        )
    return mismatches


def summarize_payments(invoices: Iterable[Invoice]) -> PaymentSummary:
    """Sum invoice totals by payment status.

    Example:
        >>> summarize_payments([]).total_earnings
        Decimal('0.00')
    """
    paid = pending = overdue = Decimal("0")
    count = 0
    for invoice in invoices:
        count += 1
        if invoice.status == PaymentStatus.PAID:
            paid += invoice.total
        elif invoice.status == PaymentStatus.PENDING:
            pending += invoice.total
        elif invoice.status == PaymentStatus.OVERDUE:
            overdue += invoice.total

    return PaymentSummary(
        total_earnings=round_cents(paid),
        pending_amount=round_cents(pending),
        overdue_amount=round_cents(overdue),
        invoice_count=count,
    )
