"""Demo orders loaded into a fresh session."""

from datetime import date
from decimal import Decimal

from nova_pos.ledger.models import Order, WorkStatus


def demo_orders() -> list[Order]:
    """Return the three demo orders, in display order."""
    return [
        Order(
            id="1",
            invoice_code="NV-8291",
            client_name="James Wilson",
            phone="+1 555 0101",
            service="UI/UX Design",
            paid=Decimal("1200"),
            due=Decimal("300"),
            total=Decimal("1500"),
            work_status=WorkStatus.SUCCESS,
            created_date=date(2023, 10, 25),
        ),
        Order(
            id="2",
            invoice_code="NV-4921",
            client_name="Sophia Chen",
            phone="+1 555 0202",
            service="Cloud Migration",
            paid=Decimal("2500"),
            due=Decimal("0"),
            total=Decimal("2500"),
            work_status=WorkStatus.CONFIRMED,
            created_date=date(2023, 10, 26),
        ),
        Order(
            id="3",
            invoice_code="NV-1029",
            client_name="Marcus Brown",
            phone="+1 555 0303",
            service="SEO Audit",
            paid=Decimal("500"),
            due=Decimal("500"),
            total=Decimal("1000"),
            work_status=WorkStatus.PENDING,
            created_date=date(2023, 10, 27),
        ),
    ]
