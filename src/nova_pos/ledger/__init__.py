"""Order ledger: models, lifecycle store and search."""

from nova_pos.ledger.identifiers import InvoiceCodeAllocator, OrderIdSequence
from nova_pos.ledger.models import (
    MAX_AMOUNT,
    STATUS_FLOW,
    LedgerStats,
    Order,
    WorkStatus,
    coerce_amount,
    compute_stats,
    next_status,
)
from nova_pos.ledger.query import search_orders
from nova_pos.ledger.seed import demo_orders
from nova_pos.ledger.store import LedgerStore

__all__ = [
    "InvoiceCodeAllocator",
    "LedgerStats",
    "LedgerStore",
    "MAX_AMOUNT",
    "Order",
    "OrderIdSequence",
    "STATUS_FLOW",
    "WorkStatus",
    "coerce_amount",
    "compute_stats",
    "demo_orders",
    "next_status",
    "search_orders",
]
