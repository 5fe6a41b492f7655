"""Plain-text rendering of an invoice.

The layout follows the printed invoice: company header, invoice number and
dates, the bill-to block, the line item table and the totals, followed by
notes and footer notes.
"""

import logging
import textwrap
from typing import List

from tradiestop.calculators.currency import format_currency, format_percentage
from tradiestop.calculators.invoice_calculator import calculate_line_total
from tradiestop.models.invoice import Invoice

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 72
QTY_WIDTH = 8
PRICE_WIDTH = 14
AMOUNT_WIDTH = 14


class InvoicePreviewWriter:
    """Render invoices as fixed-width text documents.

    Attributes:
        width: Total line width of the document
        currency_symbol: Symbol used for every amount

    Example:
        >>> writer = InvoicePreviewWriter(width=72)
        >>> print(writer.render(invoice))  # doctest: +SKIP
    """

    def __init__(self, width: int = DEFAULT_WIDTH, currency_symbol: str = "$"):
        if width < 48:
            raise ValueError("width must be at least 48 characters")
        self.width = width
        self.currency_symbol = currency_symbol

    def _money(self, amount) -> str:
        return format_currency(amount, self.currency_symbol)

    def _rule(self, char: str = "-") -> str:
        return char * self.width

    def _pair(self, left: str, right: str) -> str:
        gap = max(self.width - len(left) - len(right), 1)
        return f"{left}{' ' * gap}{right}"

    def _wrapped(self, text: str) -> List[str]:
        lines = []
        for paragraph in text.splitlines() or [""]:
            lines.extend(textwrap.wrap(paragraph, self.width) or [""])
        return lines

    def _header(self, invoice: Invoice) -> List[str]:
        company = invoice.tradie.company_details
        lines = [company.name or invoice.tradie.name]
        if company.address:
            lines.append(company.address)
        contact = " | ".join(part for part in (company.email, company.phone) if part)
        if contact:
            lines.append(contact)
        if company.tax_id:
            lines.append(f"Tax ID: {company.tax_id}")
        lines.append("")
        lines.append(self._pair("INVOICE", f"# {invoice.invoice_number}"))
        lines.append(self._pair("", f"Date: {invoice.issue_date}"))
        return lines

    def _bill_to(self, invoice: Invoice) -> List[str]:
        client = invoice.client
        lines = [self._pair("Bill To:", f"Due Date: {invoice.due_date}")]
        lines.append(self._pair(client.name, f"Amount Due: {self._money(invoice.total)}"))
        for detail in (client.address, client.email, client.phone):
            if detail:
                lines.append(detail)
        if invoice.job_address and invoice.job_address != client.address:
            lines.append(f"Job Address: {invoice.job_address}")
        return lines

    def _items(self, invoice: Invoice) -> List[str]:
        desc_width = self.width - QTY_WIDTH - PRICE_WIDTH - AMOUNT_WIDTH
        lines = [
            f"{'Description':<{desc_width}}{'Qty':>{QTY_WIDTH}}"
            f"{'Unit Price':>{PRICE_WIDTH}}{'Amount':>{AMOUNT_WIDTH}}",
            self._rule(),
        ]
        for item in invoice.items:
            amount = calculate_line_total(item.quantity, item.unit_price)
            description = textwrap.wrap(item.description, desc_width - 1) or [""]
            lines.append(
                f"{description[0]:<{desc_width}}{item.quantity.normalize():>{QTY_WIDTH}f}"
                f"{self._money(item.unit_price):>{PRICE_WIDTH}}"
                f"{self._money(amount):>{AMOUNT_WIDTH}}"
            )
            lines.extend(description[1:])
        return lines

    def _totals(self, invoice: Invoice) -> List[str]:
        label_width = self.width - AMOUNT_WIDTH
        return [
            f"{'Subtotal':>{label_width}}{self._money(invoice.subtotal):>{AMOUNT_WIDTH}}",
            f"{'Tax (' + format_percentage(invoice.tax_rate) + ')':>{label_width}}"
            f"{self._money(invoice.tax):>{AMOUNT_WIDTH}}",
            f"{'Total':>{label_width}}{self._money(invoice.total):>{AMOUNT_WIDTH}}",
        ]

    def render(self, invoice: Invoice) -> str:
        """Render the complete invoice document."""
        logger.debug(f"Rendering invoice {invoice.invoice_number or invoice.id}")
        sections = [
            self._header(invoice),
            self._bill_to(invoice),
            self._items(invoice),
            self._totals(invoice),
        ]
        if invoice.notes:
            sections.append(["Notes:"] + self._wrapped(invoice.notes))
        if invoice.footer_notes:
            sections.append(self._wrapped(invoice.footer_notes))

        lines = [self._rule("=")]
        for section in sections:
            lines.extend(section)
            lines.append(self._rule())
        lines[-1] = self._rule("=")
        return "\n".join(lines) + "\n"


def render_invoice_preview(invoice: Invoice, width: int = DEFAULT_WIDTH) -> str:
    """Render ``invoice`` with the default writer."""
    return InvoicePreviewWriter(width=width).render(invoice)
