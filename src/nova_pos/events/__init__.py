"""Ledger change events."""

from nova_pos.events.hub import EventHook, EventHub
from nova_pos.events.types import (
    EventType,
    LedgerEvent,
    OrderEvent,
    insight_generated,
    order_cancelled,
    order_created,
    order_deleted,
    order_due_settled,
    order_status_changed,
)

__all__ = [
    "EventHook",
    "EventHub",
    "EventType",
    "LedgerEvent",
    "OrderEvent",
    "insight_generated",
    "order_cancelled",
    "order_created",
    "order_deleted",
    "order_due_settled",
    "order_status_changed",
]
