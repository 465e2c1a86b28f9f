"""Currency presentation, kept apart from the integer-cent arithmetic."""

from decimal import Decimal

CENTS_PER_DOLLAR = 100


def usd(cents: int) -> str:
    """Format integer cents as US dollars, e.g. ``$1,234.56``."""
    dollars = Decimal(cents) / CENTS_PER_DOLLAR
    if dollars < 0:
        return f"-${-dollars:,.2f}"
    return f"${dollars:,.2f}"
