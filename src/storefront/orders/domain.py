"""Orders domain: product value, order aggregate and its event."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from storefront.domain import AggregateRoot, DomainEvent, ValueObject
from storefront.money import to_decimal
from storefront.payments.domain import PaymentProcessor
from storefront.pricing.domain import Discount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Product(ValueObject):
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to normalise the price type
        object.__setattr__(self, "price", to_decimal(self.price))
        if self.price < 0:
            logger.warning("Product %r has negative price %s", self.name, self.price)


@dataclass(frozen=True)
class OrderProcessed(DomainEvent):
    order_id: str
    subtotal: Decimal
    amount: Decimal
    payment_method: str


class Order(AggregateRoot):
    """
    Products bought together, with at most one discount strategy.
    process_order() sums the prices, applies the discount once and pays.
    """

    def __init__(self, id: Optional[str] = None) -> None:
        super().__init__(id)
        self._products: list[Product] = []
        self._discount: Optional[Discount] = None

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def discount(self) -> Optional[Discount]:
        return self._discount

    def add_product(self, product: Product) -> None:
        self._products.append(product)
        logger.debug("Order %s: added %s at %s", self.id, product.name, product.price)

    def set_discount_strategy(self, discount: Optional[Discount]) -> None:
        self._discount = discount

    def process_order(self, payment_processor: PaymentProcessor) -> None:
        subtotal = self._calculate_total()
        amount = subtotal
        if self._discount is not None:
            amount = self._discount.apply(subtotal)
        payment_processor.process_payment(amount)
        self.raise_event(
            OrderProcessed(
                order_id=self.id,
                subtotal=subtotal,
                amount=amount,
                payment_method=getattr(payment_processor, "method", type(payment_processor).__name__),
            )
        )

    def _calculate_total(self) -> Decimal:
        return sum((p.price for p in self._products), Decimal(0))
