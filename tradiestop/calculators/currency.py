"""Currency, percentage and date formatting in both directions.

Amounts shown to users are formatted as ``$1234.50``: two decimals, no
thousands separator, the sign in front of the symbol. Text typed by a user is
parsed the way a browser number field feeds ``parseFloat``: the leading
numeric prefix counts, and input with no number in front reads as zero.
"""

import datetime as dt
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional, Union

CENTS = Decimal("0.01")

# Largest decimal exponent a number field can hold; beyond it input reads as zero
MAX_EXPONENT = 308

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_LEADING_NUMBER = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_CURRENCY_PREFIX = re.compile(r"^[$€£¥]")
_DISPLAY_DATE = re.compile(
    r"^([A-Za-z]+)\s+(\d{1,2}),\s*(\d{4})(?:,\s*(\d{1,2}):(\d{2}))?$"
)
_CLOCK_TIME = re.compile(r"^(\d{1,2}):(\d{2})$")

Numeric = Union[str, int, float, Decimal]


def round_cents(value: Numeric) -> Decimal:
    """Round a monetary value to cents, half-up.

    Example:
        >>> round_cents(Decimal("2.675"))
        Decimal('2.68')
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    with localcontext() as ctx:
        if value.is_finite():
            ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Numeric, symbol: str = "$") -> str:
    """Format an amount for display.

    Args:
        amount: Monetary value
        symbol: Currency symbol placed before the digits

    Returns:
        e.g. ``"$1234.50"`` or ``"-$5.00"``

    Example:
        >>> format_currency(Decimal("1234.5"))
        '$1234.50'
        >>> format_currency(-5)
        '-$5.00'
    """
    value = round_cents(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):.2f}"


def parse_number(text: Union[Numeric, None]) -> Decimal:
    """Read the leading number of user input.

    A currency symbol in front of the digits and thousands separators are
    ignored. Anything else that does not start with a number reads as zero,
    as do numbers too large for a number field.

    Example:
        >>> parse_number("$1,234.50")
        Decimal('1234.50')
        >>> parse_number("12abc")
        Decimal('12')
        >>> parse_number("abc")
        Decimal('0')
        >>> parse_number("x5")
        Decimal('0')
    """
    if text is None or isinstance(text, bool):
        return Decimal("0")
    if isinstance(text, (int, float, Decimal)):
        try:
            value = Decimal(str(text))
        except InvalidOperation:
            return Decimal("0")
        return value if _in_range(value) else Decimal("0")

    cleaned = str(text).strip()
    negative = False
    # Sign may sit on either side of the symbol: "-$5.00" or "$-5.00"
    for _ in range(2):
        if cleaned[:1] in ("-", "+"):
            negative = negative or cleaned[0] == "-"
            cleaned = cleaned[1:].lstrip()
        cleaned = _CURRENCY_PREFIX.sub("", cleaned).lstrip()

    cleaned = re.sub(r"(?<=\d),(?=\d)", "", cleaned)
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return Decimal("0")

    try:
        value = Decimal(match.group(0))
    except InvalidOperation:
        return Decimal("0")
    if not _in_range(value):
        return Decimal("0")
    return -value if negative else value


def _in_range(value: Decimal) -> bool:
    return value.is_finite() and (value.is_zero() or value.adjusted() <= MAX_EXPONENT)


def parse_amount(text: Union[Numeric, None]) -> Decimal:
    """Parse a monetary amount typed by a user or produced by format_currency.

    The result keeps the precision the user typed; rounding happens when
    totals are calculated.

    Example:
        >>> parse_amount(format_currency(Decimal("19.999")))
        Decimal('20.00')
    """
    return parse_number(text)


def parse_quantity(text: Union[Numeric, None]) -> Decimal:
    """Parse an item quantity; garbage reads as zero."""
    return parse_number(text)


def format_percentage(rate: Numeric) -> str:
    """Format a tax rate without trailing zeros.

    Example:
        >>> format_percentage(Decimal("10.00"))
        '10%'
        >>> format_percentage("12.5")
        '12.5%'
    """
    value = parse_number(rate).normalize()
    return f"{value:f}%"


def format_display_date(value: Union[str, dt.date]) -> str:
    """Format an ISO date (or date object) the way invoices print it.

    Example:
        >>> format_display_date("2024-06-05")
        'June 5, 2024'
    """
    if isinstance(value, dt.datetime):
        value = value.date()
    if isinstance(value, str):
        value = dt.date.fromisoformat(value.strip()[:10])
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def format_service_date(day: Union[str, dt.date], time: Union[str, dt.time]) -> str:
    """Combine a calendar day and a clock time into a booking service date.

    Args:
        day: ISO date string or date
        time: ``"HH:MM"`` string or time

    Raises:
        ValueError: If the time is not a valid 24-hour clock time

    Example:
        >>> format_service_date("2024-06-15", "09:00")
        'June 15, 2024, 09:00'
    """
    if isinstance(time, str):
        match = _CLOCK_TIME.match(time.strip())
        if not match:
            raise ValueError(f"Invalid time {time!r}, expected HH:MM")
        time = dt.time(int(match.group(1)), int(match.group(2)))
    return f"{format_display_date(day)}, {time:%H:%M}"


def parse_service_date(text: Optional[str]) -> Optional[dt.datetime]:
    """Parse a display date (with or without time) or an ISO timestamp.

    Returns None when the text cannot be read, so callers can sort
    unparseable dates last.

    Example:
        >>> parse_service_date("June 15, 2024, 09:30")
        datetime.datetime(2024, 6, 15, 9, 30)
    """
    if not text:
        return None
    text = text.strip()

    match = _DISPLAY_DATE.match(text)
    if match:
        month_name, day, year, hour, minute = match.groups()
        months = [m.lower() for m in MONTH_NAMES]
        name = month_name.lower()
        month = next(
            (i + 1 for i, m in enumerate(months) if m == name or m[:3] == name[:3]),
            None,
        )
        if month is None:
            return None
        try:
            return dt.datetime(
                int(year), month, int(day), int(hour or 0), int(minute or 0)
            )
        except ValueError:
            return None

    try:
        parsed = dt.datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed.replace(tzinfo=None)


def parse_display_date(text: Optional[str]) -> Optional[dt.date]:
    """Date part of parse_service_date."""
    parsed = parse_service_date(text)
    return parsed.date() if parsed else None
