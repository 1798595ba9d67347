"""Orders: commands and handlers (DI of strategy catalogs and settings)."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from storefront.core.config import Settings
from storefront.ddd import Catalog, Command
from storefront.domain.events import EventBus
from storefront.money import Number
from storefront.orders.domain import Order, OrderProcessed, Product
from storefront.payments.domain import PaymentProcessor
from storefront.pricing.domain import Discount

logger = logging.getLogger(__name__)


class DiscountCatalog(Catalog[Discount]):
    kind = "discount"


class PaymentCatalog(Catalog[PaymentProcessor]):
    kind = "payment"


@dataclass
class PlaceOrder(Command):
    items: list[tuple[str, Number]] = field(default_factory=list)
    payment: str = "credit-card"
    discount: str = "none"
    percent: Optional[Number] = None


class PlaceOrderHandler:
    def __init__(
        self,
        discounts: DiscountCatalog,
        payments: PaymentCatalog,
        settings: Settings,
        event_bus: EventBus,
    ):
        self._discounts = discounts
        self._payments = payments
        self._settings = settings
        self._event_bus = event_bus

    def __call__(self, cmd: PlaceOrder) -> OrderProcessed:
        # resolve both strategies before touching the order so a bad key pays nothing
        args = () if cmd.percent is None else (cmd.percent,)
        discount = self._discounts.create(cmd.discount, *args)
        processor = self._payments.create(cmd.payment, currency_symbol=self._settings.currency_symbol)

        order = Order()
        for name, price in cmd.items:
            order.add_product(Product(name, price))
        order.set_discount_strategy(discount)
        order.process_order(processor)

        events = order.collect_pending_events()
        for event in events:
            self._event_bus.publish(event)
        return events[-1]
