"""Payments context: processor interface."""
from decimal import Decimal
from typing import Protocol, runtime_checkable


@runtime_checkable
class PaymentProcessor(Protocol):
    """Performs (here, simulates) a payment for the given amount."""

    method: str

    def process_payment(self, amount: Decimal) -> None:
        ...
