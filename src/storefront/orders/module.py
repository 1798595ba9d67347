"""One object = full bounded context «orders»."""
import logging

from storefront.ddd import DomainModule
from storefront.payments import CreditCardProcessor, PayPalProcessor
from storefront.pricing import NoDiscount, PercentageDiscount

from storefront.orders.application import DiscountCatalog, PaymentCatalog, PlaceOrder, PlaceOrderHandler
from storefront.orders.domain import OrderProcessed

logger = logging.getLogger(__name__)


def log_order_processed(event: OrderProcessed) -> None:
    """Domain event handler: audit line per paid order."""
    logger.info(
        "Order %s paid via %s: subtotal %s, charged %s",
        event.order_id,
        event.payment_method,
        event.subtotal,
        event.amount,
    )


orders_module = (
    DomainModule("orders")
    .strategy(DiscountCatalog, "none", NoDiscount)
    .strategy(DiscountCatalog, "percentage", PercentageDiscount)
    .strategy(PaymentCatalog, "credit-card", CreditCardProcessor)
    .strategy(PaymentCatalog, "paypal", PayPalProcessor)
    .command(PlaceOrder, PlaceOrderHandler)
    .on_event(OrderProcessed, log_order_processed)
)
