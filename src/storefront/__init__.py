"""
Storefront — strategy-pattern checkout over an in-memory order.
Discounts and payment processors are pluggable; the app is composed via app.register(module).
"""
from storefront.core import Application, Config, Settings, load_config_from_env
from storefront.orders import Order, OrderProcessed, PlaceOrder, Product
from storefront.payments import CreditCardProcessor, PaymentProcessor, PayPalProcessor
from storefront.pricing import Discount, NoDiscount, PercentageDiscount

__version__ = "0.1.0"

__all__ = [
    "Application",
    "Config",
    "Settings",
    "load_config_from_env",
    "Order",
    "OrderProcessed",
    "PlaceOrder",
    "Product",
    "Discount",
    "NoDiscount",
    "PercentageDiscount",
    "PaymentProcessor",
    "CreditCardProcessor",
    "PayPalProcessor",
]
