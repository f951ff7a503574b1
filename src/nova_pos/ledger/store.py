"""Ledger store: owns the order collection and its lifecycle operations.

The store is the only place orders are created, changed or removed.
Orders are frozen; a mutation swaps the stored record for an updated copy
and publishes one event. Operations on a missing or ineligible order are
silent no-ops that return ``None``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any

import structlog

from nova_pos.config import get_settings
from nova_pos.errors import AmountOutOfRangeError, OrderValidationError
from nova_pos.events import (
    EventHook,
    EventHub,
    order_cancelled,
    order_created,
    order_deleted,
    order_due_settled,
    order_status_changed,
)
from nova_pos.ledger.identifiers import InvoiceCodeAllocator, OrderIdSequence
from nova_pos.ledger.models import (
    ZERO,
    LedgerStats,
    Order,
    WorkStatus,
    coerce_amount,
    compute_stats,
    next_status,
)
from nova_pos.ledger.query import search_orders
from nova_pos.ledger.seed import demo_orders

logger = structlog.get_logger(__name__)

MISSING_PHONE = "N/A"


class LedgerStore:
    """In-memory ledger of orders, newest first."""

    def __init__(
        self,
        orders: Iterable[Order] = (),
        hub: EventHub | None = None,
        order_ids: OrderIdSequence | None = None,
        invoice_codes: InvoiceCodeAllocator | None = None,
        clock: Callable[[], date] | None = None,
    ):
        self._orders: list[Order] = list(orders)
        self._hub = hub or EventHub()
        self._order_ids = order_ids or OrderIdSequence()
        self._invoice_codes = invoice_codes or InvoiceCodeAllocator(
            prefix=get_settings().invoice_prefix
        )
        self._clock = clock or date.today
        self._max_amount = get_settings().max_order_amount

        for order in self._orders:
            self._order_ids.reserve(order.id)
            self._invoice_codes.reserve(order.invoice_code)

        self._logger = logger.bind(component="ledger_store")

    @classmethod
    def from_settings(cls, **kwargs: Any) -> LedgerStore:
        """Build a store, seeded with the demo orders unless disabled."""
        orders = demo_orders() if get_settings().seed_demo_orders else []
        return cls(orders, **kwargs)

    # Read side

    @property
    def orders(self) -> tuple[Order, ...]:
        """All orders, newest first."""
        return tuple(self._orders)

    @property
    def events(self) -> EventHub:
        return self._hub

    def __len__(self) -> int:
        return len(self._orders)

    def get(self, order_id: str) -> Order | None:
        """Look up an order by id."""
        index = self._index_of(order_id)
        return None if index is None else self._orders[index]

    def stats(self) -> LedgerStats:
        """Recompute the statistics snapshot from the current collection."""
        return compute_stats(self._orders)

    def search(self, term: str | None) -> list[Order]:
        """Filtered view of the ledger; see :func:`search_orders`."""
        return search_orders(self._orders, term)

    def add_listener(self, hook: EventHook) -> None:
        """Register a callback invoked after every state change."""
        self._hub.add_event_hook(hook)

    def remove_listener(self, hook: EventHook) -> None:
        self._hub.remove_event_hook(hook)

    # Mutations

    def create(
        self,
        name: str | None,
        phone: str | None = None,
        service: str | None = None,
        paid_amount: Any = None,
        due_amount: Any = None,
    ) -> Order:
        """Create an order and insert it at the head of the ledger.

        Args:
            name: Client name. Required.
            phone: Client phone; stored as ``N/A`` when blank.
            service: Service description. Required.
            paid_amount: Amount already collected (coerced, default 0).
            due_amount: Amount outstanding (coerced, default 0).

        Returns:
            The new order, in ``Pending`` status.

        Raises:
            OrderValidationError: If name or service is blank, or an amount
                is above ``MAX_ORDER_AMOUNT``. The ledger is left unchanged.
        """
        client_name = (name or "").strip()
        service_name = (service or "").strip()
        missing = tuple(
            field
            for field, value in (("name", client_name), ("service", service_name))
            if not value
        )
        if missing:
            self._logger.info("order_rejected", missing_fields=list(missing))
            raise OrderValidationError("Fill Name and Service", missing_fields=missing)

        amounts: dict[str, Decimal] = {}
        too_large: list[str] = []
        for field, raw in (("paid", paid_amount), ("due", due_amount)):
            try:
                amounts[field] = coerce_amount(raw, self._max_amount)
            except AmountOutOfRangeError:
                too_large.append(field)
        if too_large:
            self._logger.info("order_rejected", invalid_fields=too_large)
            raise OrderValidationError(
                f"Amount exceeds the maximum of {self._max_amount}",
                invalid_fields=tuple(too_large),
            )

        paid, due = amounts["paid"], amounts["due"]
        order = Order(
            id=self._order_ids.allocate(),
            invoice_code=self._invoice_codes.allocate(),
            client_name=client_name,
            phone=(phone or "").strip() or MISSING_PHONE,
            service=service_name,
            paid=paid,
            due=due,
            total=paid + due,
            work_status=WorkStatus.PENDING,
            created_date=self._clock(),
        )
        self._orders.insert(0, order)

        self._logger.info(
            "order_created",
            order_id=order.id,
            invoice_code=order.invoice_code,
            total=str(order.total),
        )
        self._hub.publish(order_created(order.id, order.invoice_code, str(order.total)))
        return order

    def advance_status(self, order_id: str) -> Order | None:
        """Move an order one step along Pending → Confirmed → Success → Pending.

        Cancelled orders and unknown ids are left alone.
        """
        index = self._index_of(order_id)
        if index is None:
            self._logger.debug("advance_status_skipped", order_id=order_id, reason="not_found")
            return None

        current = self._orders[index]
        if current.is_cancelled:
            self._logger.debug("advance_status_skipped", order_id=order_id, reason="cancelled")
            return None

        updated = replace(current, work_status=next_status(current.work_status))
        self._orders[index] = updated

        self._logger.info(
            "order_status_changed",
            order_id=order_id,
            from_status=current.work_status.value,
            to_status=updated.work_status.value,
        )
        self._hub.publish(
            order_status_changed(
                order_id,
                updated.invoice_code,
                current.work_status.value,
                updated.work_status.value,
            )
        )
        return updated

    def cancel(self, order_id: str) -> Order | None:
        """Cancel an order. Amounts are kept as they are.

        Confirmation is the caller's job; once invoked this always cancels.
        """
        index = self._index_of(order_id)
        if index is None:
            self._logger.debug("cancel_skipped", order_id=order_id, reason="not_found")
            return None

        current = self._orders[index]
        if current.is_cancelled:
            self._logger.debug("cancel_skipped", order_id=order_id, reason="already_cancelled")
            return None

        updated = replace(current, work_status=WorkStatus.CANCELLED)
        self._orders[index] = updated

        self._logger.info(
            "order_cancelled",
            order_id=order_id,
            previous_status=current.work_status.value,
        )
        self._hub.publish(
            order_cancelled(order_id, updated.invoice_code, current.work_status.value)
        )
        return updated

    def delete_order(self, order_id: str) -> Order | None:
        """Remove an order permanently and return it."""
        index = self._index_of(order_id)
        if index is None:
            self._logger.debug("delete_skipped", order_id=order_id, reason="not_found")
            return None

        removed = self._orders.pop(index)

        self._logger.info(
            "order_deleted", order_id=order_id, invoice_code=removed.invoice_code
        )
        self._hub.publish(order_deleted(order_id, removed.invoice_code))
        return removed

    def settle_due(self, order_id: str) -> Order | None:
        """Collect the outstanding due: ``paid = total`` and ``due = 0``."""
        index = self._index_of(order_id)
        if index is None:
            self._logger.debug("settle_skipped", order_id=order_id, reason="not_found")
            return None

        current = self._orders[index]
        if current.is_cancelled or current.due == ZERO:
            self._logger.debug(
                "settle_skipped",
                order_id=order_id,
                reason="cancelled" if current.is_cancelled else "nothing_due",
            )
            return None

        updated = replace(current, paid=current.total, due=ZERO)
        self._orders[index] = updated

        self._logger.info("order_due_settled", order_id=order_id, amount=str(current.due))
        self._hub.publish(
            order_due_settled(order_id, updated.invoice_code, str(current.due))
        )
        return updated

    def _index_of(self, order_id: str) -> int | None:
        for index, order in enumerate(self._orders):
            if order.id == order_id:
                return index
        return None
