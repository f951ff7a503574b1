"""Nova POS - order ledger, statistics and AI insights for a POS dashboard."""

__version__ = "0.1.0"

from nova_pos.clients import GeminiClient, GeminiResponse
from nova_pos.config import configure_logging, get_settings
from nova_pos.dashboard import Dashboard
from nova_pos.errors import (
    AmountOutOfRangeError,
    GeminiConfigurationError,
    NovaPOSError,
    OrderValidationError,
)
from nova_pos.events import EventHub, EventType, LedgerEvent
from nova_pos.insights import InsightPanel, InsightSummarizer
from nova_pos.ledger import LedgerStats, LedgerStore, Order, WorkStatus, search_orders

__all__ = [
    # Version
    "__version__",
    # Ledger
    "LedgerStore",
    "LedgerStats",
    "Order",
    "WorkStatus",
    "search_orders",
    # Insights
    "InsightSummarizer",
    "InsightPanel",
    "GeminiClient",
    "GeminiResponse",
    # Events
    "EventHub",
    "EventType",
    "LedgerEvent",
    # Dashboard
    "Dashboard",
    # Errors
    "NovaPOSError",
    "OrderValidationError",
    "AmountOutOfRangeError",
    "GeminiConfigurationError",
    # Config
    "get_settings",
    "configure_logging",
]
