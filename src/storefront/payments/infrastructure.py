"""Payments: console processors. They never reject a payment."""
from __future__ import annotations

import logging
import sys
from decimal import Decimal
from typing import Optional, TextIO

from storefront.money import Number, format_amount, to_decimal

logger = logging.getLogger(__name__)


class ConsoleProcessor:
    """Writes one confirmation line per payment. Subclasses set the label."""

    method = ""

    def __init__(self, stream: Optional[TextIO] = None, currency_symbol: str = "$") -> None:
        self._stream = stream
        self.currency_symbol = currency_symbol

    def process_payment(self, amount: Number) -> None:
        amount = to_decimal(amount)
        if amount < 0:
            logger.warning("Paying negative amount %s via %s", amount, self.method)
        logger.debug("Processing %s payment of %s", self.method, amount)
        print(self.confirmation(amount), file=self._stream or sys.stdout)

    def confirmation(self, amount: Decimal) -> str:
        return f"Processing {self.method} payment of {self.currency_symbol}{format_amount(amount)}"


class CreditCardProcessor(ConsoleProcessor):
    method = "credit card"


class PayPalProcessor(ConsoleProcessor):
    method = "PayPal"
