"""Orders context: products, the order aggregate and the PlaceOrder command."""
from storefront.orders.domain import Order, OrderProcessed, Product
from storefront.orders.application import DiscountCatalog, PaymentCatalog, PlaceOrder, PlaceOrderHandler

__all__ = [
    "Order",
    "OrderProcessed",
    "Product",
    "DiscountCatalog",
    "PaymentCatalog",
    "PlaceOrder",
    "PlaceOrderHandler",
]
