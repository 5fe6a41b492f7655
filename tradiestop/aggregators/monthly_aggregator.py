"""Monthly chart series for the dashboards.

Records are bucketed by calendar month with pandas. Months without records
between the first and the last one are filled with zero, and the most recent
``months`` buckets are returned, labelled ``Jan``..``Dec``.
"""

import datetime as dt
import logging
from typing import Iterable, Optional, Tuple

import pandas as pd

from tradiestop.calculators.currency import MONTH_NAMES, parse_display_date
from tradiestop.models.booking import Booking
from tradiestop.models.enums import PaymentStatus
from tradiestop.models.invoice import Invoice
from tradiestop.models.notification import ChartData
from tradiestop.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_MONTHS = 6


class MonthlyAggregator:
    """Builds ChartData series from invoices, bookings and users.

    Attributes:
        months: Number of most recent months in each series

    Example:
        >>> aggregator = MonthlyAggregator(months=6)
        >>> chart = aggregator.monthly_bookings(bookings)  # doctest: +SKIP
        >>> chart.labels  # doctest: +SKIP
        ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun']
    """

    def __init__(self, months: int = DEFAULT_MONTHS):
        if months < 1:
            raise ValueError("months must be at least 1")
        self.months = months

    def _series(
        self,
        points: Iterable[Tuple[Optional[dt.date], float]],
        cumulative: bool = False,
    ) -> ChartData:
        rows = [(day, value) for day, value in points if day is not None]
        if not rows:
            return ChartData()

        df = pd.DataFrame(rows, columns=["date", "value"])
        df["month"] = pd.to_datetime(df["date"]).dt.to_period("M")
        monthly = df.groupby("month")["value"].sum().sort_index()

        full_range = pd.period_range(monthly.index.min(), monthly.index.max(), freq="M")
        monthly = monthly.reindex(full_range, fill_value=0)
        if cumulative:
            monthly = monthly.cumsum()
        monthly = monthly.tail(self.months)

        return ChartData(
            labels=[MONTH_NAMES[period.month - 1][:3] for period in monthly.index],
            data=[round(float(value), 2) for value in monthly.values],
        )

    def monthly_spending(self, invoices: Iterable[Invoice], client_id: str) -> ChartData:
        """Invoice totals billed to a client, by issue month."""
        return self._series(
            (parse_display_date(inv.issue_date), float(inv.total))
            for inv in invoices
            if inv.client.id == client_id
        )

    def monthly_earnings(self, invoices: Iterable[Invoice], tradie_id: str) -> ChartData:
        """Paid invoice totals of a tradie, by issue month."""
        return self._series(
            (parse_display_date(inv.issue_date), float(inv.total))
            for inv in invoices
            if inv.tradie.id == tradie_id and inv.status == PaymentStatus.PAID
        )

    def monthly_bookings(self, bookings: Iterable[Booking]) -> ChartData:
        """Number of bookings by service month."""
        return self._series(
            (parse_display_date(booking.service_date), 1.0) for booking in bookings
        )

    def user_growth(self, users: Iterable[User]) -> ChartData:
        """Cumulative number of users by the month they joined."""
        user_list = list(users)
        skipped = [u.id for u in user_list if parse_display_date(u.joined_date) is None]
        if skipped:
            logger.debug(f"No usable joined date for users: {', '.join(skipped)}")
        return self._series(
            ((parse_display_date(u.joined_date), 1.0) for u in user_list),
            cumulative=True,
        )
