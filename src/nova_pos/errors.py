"""Exceptions raised by the Nova POS core."""

from decimal import Decimal
from typing import Any


class NovaPOSError(Exception):
    """Base exception for Nova POS errors."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class OrderValidationError(NovaPOSError):
    """An order could not be created from the submitted fields."""

    def __init__(
        self,
        message: str,
        missing_fields: tuple[str, ...] = (),
        invalid_fields: tuple[str, ...] = (),
    ):
        super().__init__(
            message,
            details={
                "missing_fields": list(missing_fields),
                "invalid_fields": list(invalid_fields),
            },
        )
        self.missing_fields = missing_fields
        self.invalid_fields = invalid_fields


class AmountOutOfRangeError(NovaPOSError, ValueError):
    """A submitted amount is larger than the configured maximum."""

    def __init__(self, amount: Decimal, maximum: Decimal):
        super().__init__(
            f"Amount exceeds the maximum of {maximum}",
            details={"maximum": str(maximum)},
        )
        self.amount = amount
        self.maximum = maximum


class GeminiConfigurationError(NovaPOSError):
    """The Gemini client cannot be built (usually a missing API key)."""

    pass
