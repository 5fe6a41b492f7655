"""Payments page selectors."""

from dataclasses import dataclass, field
from typing import List, Optional

from tradiestop.calculators.invoice_calculator import PaymentSummary, summarize_payments
from tradiestop.models.app_data import AppData
from tradiestop.models.enums import Role
from tradiestop.models.invoice import Invoice
from tradiestop.models.user import User


@dataclass
class PaymentsView:
    invoices: List[Invoice] = field(default_factory=list)
    summary: Optional[PaymentSummary] = None


def invoices_for_user(data: AppData, user: Optional[User]) -> List[Invoice]:
    """Client: invoices billed to me. Tradie: invoices I issued. Admin: all."""
    if user is None:
        return []
    if user.role == Role.CLIENT:
        return [inv for inv in data.invoices if inv.client.id == user.id]
    if user.role == Role.TRADIE:
        return [inv for inv in data.invoices if inv.tradie.id == user.id]
    return list(data.invoices)


def payments_view(data: AppData, user: Optional[User]) -> PaymentsView:
    """Invoices of the payments page; tradies also get their earnings summary."""
    invoices = invoices_for_user(data, user)
    summary = None
    if user is not None and user.role == Role.TRADIE:
        summary = summarize_payments(invoices)
    return PaymentsView(invoices=invoices, summary=summary)
