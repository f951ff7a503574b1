"""Order and statistics models for the ledger."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any

from nova_pos.errors import AmountOutOfRangeError


class WorkStatus(str, Enum):
    """Fulfilment stage of an order."""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    SUCCESS = "Success"
    CANCELLED = "Cancelled"


# Forward cycle used by advance_status; CANCELLED is absorbing and not listed.
STATUS_FLOW: tuple[WorkStatus, ...] = (
    WorkStatus.PENDING,
    WorkStatus.CONFIRMED,
    WorkStatus.SUCCESS,
)

ZERO = Decimal("0")
CENTS = Decimal("0.01")

# Largest amount one order field may carry; keeps totals and stats sums
# inside the default 28-digit decimal context.
MAX_AMOUNT = Decimal("1000000000")


def next_status(status: WorkStatus) -> WorkStatus:
    """Return the status that follows ``status`` in the work cycle.

    Success wraps back to Pending. Cancelled maps to itself.
    """
    if status not in STATUS_FLOW:
        return status
    index = STATUS_FLOW.index(status)
    return STATUS_FLOW[(index + 1) % len(STATUS_FLOW)]


def coerce_amount(value: Any, maximum: Decimal = MAX_AMOUNT) -> Decimal:
    """Coerce form input to a non-negative Decimal rounded to cents.

    Missing, non-numeric, non-finite and negative values all become zero.
    Fractions of a cent are rounded half up.

    Raises:
        AmountOutOfRangeError: If the value is larger than ``maximum``.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    else:
        text = str(value).strip()
        if not text:
            return ZERO
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return ZERO
    if not amount.is_finite() or amount < 0:
        return ZERO
    if amount > maximum:
        raise AmountOutOfRangeError(amount, maximum)
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Order:
    """One row of the ledger."""

    id: str
    invoice_code: str
    client_name: str
    phone: str
    service: str
    paid: Decimal
    due: Decimal
    total: Decimal
    work_status: WorkStatus
    created_date: date

    @property
    def is_cancelled(self) -> bool:
        return self.work_status is WorkStatus.CANCELLED

    def to_dict(self) -> dict[str, Any]:
        """Serialize the order for a presentation layer."""
        return {
            "id": self.id,
            "invoice_code": self.invoice_code,
            "client_name": self.client_name,
            "phone": self.phone,
            "service": self.service,
            "paid": str(self.paid),
            "due": str(self.due),
            "total": str(self.total),
            "work_status": self.work_status.value,
            "created_date": self.created_date.isoformat(),
        }


@dataclass(frozen=True)
class LedgerStats:
    """Aggregates over every order that is not cancelled."""

    total_income: Decimal = ZERO
    total_due: Decimal = ZERO
    success_count: int = 0
    pending_or_confirmed_count: int = 0


def compute_stats(orders: list[Order] | tuple[Order, ...]) -> LedgerStats:
    """Fold the collection into a statistics snapshot."""
    income = ZERO
    due = ZERO
    success = 0
    open_orders = 0
    for order in orders:
        if order.is_cancelled:
            continue
        income += order.paid
        due += order.due
        if order.work_status is WorkStatus.SUCCESS:
            success += 1
        elif order.work_status in (WorkStatus.PENDING, WorkStatus.CONFIRMED):
            open_orders += 1
    return LedgerStats(
        total_income=income,
        total_due=due,
        success_count=success,
        pending_or_confirmed_count=open_orders,
    )
