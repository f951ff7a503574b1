"""Search over the ledger."""

from collections.abc import Iterable

from nova_pos.ledger.models import Order


def search_orders(orders: Iterable[Order], term: str | None) -> list[Order]:
    """Return orders whose client name or invoice code contains ``term``.

    Matching is case-insensitive. An empty term matches everything. The
    input order is preserved and the input is never modified.
    """
    needle = (term or "").casefold()
    if not needle:
        return list(orders)
    return [
        order
        for order in orders
        if needle in order.client_name.casefold() or needle in order.invoice_code.casefold()
    ]
