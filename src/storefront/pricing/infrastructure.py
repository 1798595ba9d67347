"""Pricing: discount strategy implementations."""
from __future__ import annotations

import logging
from decimal import Decimal

from storefront.money import Number, to_decimal

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)


class NoDiscount:
    def apply(self, total: Decimal) -> Decimal:
        return total

    def __repr__(self) -> str:
        return "NoDiscount()"


class PercentageDiscount:
    """Takes percent of the total off. Bounds are not enforced: over 100 goes negative."""

    def __init__(self, percent: Number) -> None:
        self.percent = to_decimal(percent)
        if not 0 <= self.percent <= HUNDRED:
            logger.warning("Discount percent %s is outside [0, 100]", self.percent)

    def apply(self, total: Number) -> Decimal:
        total = to_decimal(total)
        return total - total * self.percent / HUNDRED

    def __repr__(self) -> str:
        return f"PercentageDiscount({self.percent})"
