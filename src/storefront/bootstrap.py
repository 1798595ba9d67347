"""
App composition: everything via module objects and app.register().
Also the reference scenario used by `storefront demo`.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from storefront.core import Application, Settings, load_config_from_env
from storefront.orders import OrderProcessed, PlaceOrder
from storefront.orders.module import orders_module

DEMO_ITEMS = [("Laptop", Decimal(1000)), ("Phone", Decimal(500))]
DEMO_PERCENT = Decimal(10)


def create_app(settings: Optional[Settings] = None) -> Application:
    if settings is None:
        settings = load_config_from_env()
    return Application(config=settings).register(orders_module)


def run_demo(app: Optional[Application] = None, payment: str = "credit-card") -> OrderProcessed:
    """Laptop 1000 + Phone 500 with 10% off."""
    if app is None:
        app = create_app()
    return app.execute(
        PlaceOrder(items=list(DEMO_ITEMS), payment=payment, discount="percentage", percent=DEMO_PERCENT)
    )
