"""Currency formatting for rendered statements."""

from collections.abc import Callable
from decimal import Decimal

CurrencyFormatter = Callable[[Decimal], str]


def usd(amount: Decimal) -> str:
    """Format a dollar amount the US way, e.g. ``$1,234.50`` or ``-$5.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
