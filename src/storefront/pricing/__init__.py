"""Pricing context: discount strategies."""
from storefront.pricing.domain import Discount
from storefront.pricing.infrastructure import NoDiscount, PercentageDiscount

__all__ = ["Discount", "NoDiscount", "PercentageDiscount"]
