"""Allocators for order ids and invoice codes.

Both hand out values from a counter and skip anything already reserved,
so seeded records and previously issued values are never reissued, even
after the order holding them is deleted.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

import structlog

logger = structlog.get_logger(__name__)


class _ReservedSequence(ABC):
    """Counter that never yields a value present in its reserved set."""

    def __init__(self, start: int, reserved: Iterable[str] = ()):
        self._next = start
        self._issued: set[str] = set(reserved)

    @abstractmethod
    def _format(self, value: int) -> str:
        """Render a counter value as an identifier."""

    def reserve(self, value: str) -> None:
        """Mark a value as taken."""
        self._issued.add(value)

    def is_issued(self, value: str) -> bool:
        return value in self._issued

    def allocate(self) -> str:
        """Return the next free value and mark it as taken."""
        while True:
            candidate = self._format(self._next)
            self._next += 1
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate


class OrderIdSequence(_ReservedSequence):
    """Plain increasing integer ids rendered as strings ("4", "5", ...)."""

    def __init__(self, start: int = 1, reserved: Iterable[str] = ()):
        super().__init__(start, reserved)

    def _format(self, value: int) -> str:
        return str(value)


class InvoiceCodeAllocator(_ReservedSequence):
    """Invoice codes such as ``NV-1001``.

    The numeric part is zero-padded to ``width`` digits and simply grows
    past it once exhausted.
    """

    def __init__(
        self,
        prefix: str = "NV-",
        start: int = 1001,
        width: int = 4,
        reserved: Iterable[str] = (),
    ):
        super().__init__(start, reserved)
        self.prefix = prefix
        self._width = width

    def _format(self, value: int) -> str:
        return f"{self.prefix}{value:0{self._width}d}"

    def allocate(self) -> str:
        code = super().allocate()
        logger.debug("invoice_code_allocated", invoice_code=code)
        return code
