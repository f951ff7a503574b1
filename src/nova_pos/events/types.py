"""Event type definitions for ledger change notifications.

Events are delivered to the presentation layer so it can re-render after
every state change.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID, uuid4


class EventType(str, Enum):
    """Types of events emitted by the ledger and insight panel."""

    # Order lifecycle
    ORDER_CREATED = "order.created"
    ORDER_STATUS_CHANGED = "order.status_changed"
    ORDER_CANCELLED = "order.cancelled"
    ORDER_DELETED = "order.deleted"
    ORDER_DUE_SETTLED = "order.due_settled"

    # Insights
    INSIGHT_GENERATED = "insight.generated"


@dataclass
class LedgerEvent:
    """Base event structure for all ledger events."""

    event_type: EventType
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: UUID = field(default_factory=uuid4)
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize event to a plain dictionary."""
        return {
            "id": str(self.event_id),
            "type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "data": self.data,
        }


@dataclass
class OrderEvent(LedgerEvent):
    """Event tied to a single order."""

    order_id: str = ""
    invoice_code: str = ""

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["order"] = {
            "id": self.order_id,
            "invoice_code": self.invoice_code,
        }
        return base


# Factory functions


def order_created(order_id: str, invoice_code: str, total: str) -> OrderEvent:
    """Create an order created event."""
    return OrderEvent(
        event_type=EventType.ORDER_CREATED,
        order_id=order_id,
        invoice_code=invoice_code,
        data={"total": total},
    )


def order_status_changed(
    order_id: str, invoice_code: str, from_status: str, to_status: str
) -> OrderEvent:
    """Create a status change event."""
    return OrderEvent(
        event_type=EventType.ORDER_STATUS_CHANGED,
        order_id=order_id,
        invoice_code=invoice_code,
        data={"from": from_status, "to": to_status},
    )


def order_cancelled(order_id: str, invoice_code: str, previous_status: str) -> OrderEvent:
    """Create an order cancelled event."""
    return OrderEvent(
        event_type=EventType.ORDER_CANCELLED,
        order_id=order_id,
        invoice_code=invoice_code,
        data={"previous_status": previous_status},
    )


def order_deleted(order_id: str, invoice_code: str) -> OrderEvent:
    """Create an order deleted event."""
    return OrderEvent(
        event_type=EventType.ORDER_DELETED,
        order_id=order_id,
        invoice_code=invoice_code,
    )


def order_due_settled(order_id: str, invoice_code: str, settled_amount: str) -> OrderEvent:
    """Create a due settled event."""
    return OrderEvent(
        event_type=EventType.ORDER_DUE_SETTLED,
        order_id=order_id,
        invoice_code=invoice_code,
        data={"settled_amount": settled_amount},
    )


def insight_generated(text: str, fallback: bool) -> LedgerEvent:
    """Create an insight generated event."""
    return LedgerEvent(
        event_type=EventType.INSIGHT_GENERATED,
        data={"text": text, "fallback": fallback},
    )
