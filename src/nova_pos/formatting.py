"""Amount formatting for display and prompts."""

from decimal import Decimal


def _trimmed(amount: Decimal) -> Decimal:
    if amount == amount.to_integral_value():
        return amount.to_integral_value()
    return amount.normalize()


def plain_amount(amount: Decimal) -> str:
    """Render an amount without separators or trailing zeros.

    Example: Decimal("800.00") -> "800", Decimal("12.50") -> "12.5"
    """
    return format(_trimmed(amount), "f")


def format_amount(amount: Decimal, symbol: str = "$") -> str:
    """Format an amount with a currency symbol and thousands separators.

    Example: Decimal("4200") -> "$4,200", Decimal("1234.5") -> "$1,234.5"
    """
    return f"{symbol}{_trimmed(amount):,f}"
