"""Display data for the dashboard: stat cards, weekly trend and receipts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from nova_pos.formatting import format_amount, plain_amount
from nova_pos.ledger.models import ZERO, LedgerStats, Order

TREND_DAYS = 7
RECEIPT_WIDTH = 44


@dataclass(frozen=True)
class StatCard:
    """One of the four summary tiles."""

    label: str
    value: str


@dataclass(frozen=True)
class TrendPoint:
    """Orders created on one day of the weekly activity chart."""

    label: str
    day: date
    value: int


def stat_cards(stats: LedgerStats, symbol: str = "$") -> list[StatCard]:
    """Build the summary tiles in display order."""
    return [
        StatCard("Total Income", format_amount(stats.total_income, symbol)),
        StatCard("Due Amount", format_amount(stats.total_due, symbol)),
        StatCard("Order Success", str(stats.success_count)),
        StatCard("Order Pending", str(stats.pending_or_confirmed_count)),
    ]


def weekly_activity(orders: Iterable[Order], today: date | None = None) -> list[TrendPoint]:
    """Count orders created on each of the seven days ending ``today``.

    Cancelled orders are counted too; the chart shows activity, not income.
    """
    end = today or date.today()
    per_day = Counter(order.created_date for order in orders)
    points = []
    for offset in range(TREND_DAYS - 1, -1, -1):
        day = end - timedelta(days=offset)
        points.append(TrendPoint(label=day.strftime("%a"), day=day, value=per_day[day]))
    return points


def can_settle(order: Order) -> bool:
    """Whether the payment button is active for this order."""
    return order.due > ZERO and not order.is_cancelled


def payment_label(order: Order, symbol: str = "$") -> str:
    if can_settle(order):
        return f"Pay: {symbol}{plain_amount(order.due)}"
    return "Settled"


@dataclass(frozen=True)
class Receipt:
    """Printable view of a single order."""

    invoice_code: str
    issued_on: date
    billed_to: str
    phone: str
    description: str
    amount: Decimal
    outstanding_due: Decimal
    grand_total: Decimal
    symbol: str = "$"

    def render_text(self) -> str:
        """Render the receipt as fixed-width plain text."""

        def row(left: str, right: str) -> str:
            gap = max(RECEIPT_WIDTH - len(left) - len(right), 1)
            return f"{left}{' ' * gap}{right}"

        rule = "=" * RECEIPT_WIDTH
        thin = "-" * RECEIPT_WIDTH
        lines = [
            rule,
            row("OFFICIAL RECEIPT", "TI NOVA POS"),
            self.issued_on.isoformat(),
            rule,
            row("Billed To", "Invoice Number"),
            row(self.billed_to, self.invoice_code),
            self.phone,
            thin,
            row("Description", "Amount"),
            row(self.description.upper(), format_amount(self.amount, self.symbol)),
            thin,
            row("Outstanding Due", format_amount(self.outstanding_due, self.symbol)),
            row("Grand Total", format_amount(self.grand_total, self.symbol)),
            rule,
        ]
        return "\n".join(lines)


def build_receipt(order: Order, symbol: str = "$") -> Receipt:
    """Build the receipt view for an order."""
    return Receipt(
        invoice_code=order.invoice_code,
        issued_on=order.created_date,
        billed_to=order.client_name,
        phone=order.phone,
        description=order.service,
        amount=order.total,
        outstanding_due=order.due,
        grand_total=order.total,
        symbol=symbol,
    )
