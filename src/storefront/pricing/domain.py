"""Pricing context: discount strategy interface."""
from decimal import Decimal
from typing import Protocol, runtime_checkable


@runtime_checkable
class Discount(Protocol):
    """Maps a pre-discount total to a post-discount total. Pure."""

    def apply(self, total: Decimal) -> Decimal:
        ...
