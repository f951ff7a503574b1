"""Session facade consumed by the presentation layer.

The dashboard bundles the ledger store, the current search term, the
insight panel and the open receipt. Destructive operations go through a
``confirm`` callback first; the default declines, so a front end has to
wire in its own prompt before cancel or delete can take effect.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any

import structlog

from nova_pos.config import configure_logging, get_settings
from nova_pos.insights import InsightPanel, InsightSummarizer
from nova_pos.ledger import LedgerStats, LedgerStore, Order
from nova_pos.reports import (
    Receipt,
    StatCard,
    TrendPoint,
    build_receipt,
    stat_cards,
    weekly_activity,
)

logger = structlog.get_logger(__name__)

CANCEL_PROMPT = "Cancel this order? Payments will be adjusted."
DELETE_PROMPT = "Delete this permanent record?"

ConfirmCallback = Callable[[str], bool]


def _decline(prompt: str) -> bool:
    return False


class Dashboard:
    """State of one dashboard session."""

    def __init__(
        self,
        store: LedgerStore | None = None,
        panel: InsightPanel | None = None,
        confirm: ConfirmCallback | None = None,
    ):
        settings = get_settings()
        self.store = store or LedgerStore.from_settings()
        self.panel = panel or InsightPanel(InsightSummarizer(), hub=self.store.events)
        self._confirm = confirm or _decline
        self._symbol = settings.currency_symbol
        self._search_term = ""
        self._receipt_order_id: str | None = None
        self._logger = logger.bind(component="dashboard")

    @classmethod
    def from_settings(cls, confirm: ConfirmCallback | None = None) -> Dashboard:
        """Start a session with logging configured and the default store and panel."""
        configure_logging()
        return cls(confirm=confirm)

    # Views

    @property
    def orders(self) -> tuple[Order, ...]:
        return self.store.orders

    @property
    def search_term(self) -> str:
        return self._search_term

    @search_term.setter
    def search_term(self, value: str) -> None:
        self._search_term = value or ""

    @property
    def filtered_orders(self) -> list[Order]:
        return self.store.search(self._search_term)

    @property
    def stats(self) -> LedgerStats:
        return self.store.stats()

    @property
    def stat_cards(self) -> list[StatCard]:
        return stat_cards(self.stats, self._symbol)

    def trend(self, today: date | None = None) -> list[TrendPoint]:
        return weekly_activity(self.store.orders, today)

    # Actions

    def add_order(
        self,
        name: str | None,
        phone: str | None = None,
        service: str | None = None,
        paid: Any = None,
        due: Any = None,
    ) -> Order:
        """Create an order from the new-entry form.

        Raises:
            OrderValidationError: If name or service is blank.
        """
        return self.store.create(name, phone, service, paid, due)

    def advance_status(self, order_id: str) -> Order | None:
        return self.store.advance_status(order_id)

    def settle_due(self, order_id: str) -> Order | None:
        return self.store.settle_due(order_id)

    def cancel_order(self, order_id: str) -> bool:
        """Cancel after confirmation. Returns True if the order was cancelled."""
        if not self._confirm(CANCEL_PROMPT):
            self._logger.debug("cancel_declined", order_id=order_id)
            return False
        return self.store.cancel(order_id) is not None

    def delete_order(self, order_id: str) -> bool:
        """Delete after confirmation. Returns True if the order was removed."""
        if not self._confirm(DELETE_PROMPT):
            self._logger.debug("delete_declined", order_id=order_id)
            return False
        removed = self.store.delete_order(order_id)
        if removed is not None and self._receipt_order_id == order_id:
            self._receipt_order_id = None
        return removed is not None

    # Receipt

    def open_receipt(self, order_id: str) -> Receipt | None:
        if self.store.get(order_id) is None:
            return None
        self._receipt_order_id = order_id
        return self.receipt

    def close_receipt(self) -> None:
        self._receipt_order_id = None

    @property
    def receipt(self) -> Receipt | None:
        """Receipt of the open order, reflecting its current amounts."""
        if self._receipt_order_id is None:
            return None
        order = self.store.get(self._receipt_order_id)
        return build_receipt(order, self._symbol) if order else None

    # Insights

    @property
    def insights(self) -> str:
        return self.panel.text

    @property
    def is_generating_insights(self) -> bool:
        return self.panel.is_generating

    async def generate_insights(self) -> str | None:
        """Ask for a fresh insight over the current statistics."""
        return await self.panel.refresh(self.stats)
