"""Tests for composition: Application, DomainModule, catalogs and PlaceOrder."""
from dataclasses import dataclass
from decimal import Decimal

import pytest

from storefront.bootstrap import create_app, run_demo
from storefront.core import Application, Settings
from storefront.ddd import Catalog, Command, DomainModule
from storefront.domain import EventBus
from storefront.errors import StrategyArgumentError, UnknownCommandError, UnknownStrategyError
from storefront.orders import DiscountCatalog, OrderProcessed, PaymentCatalog, PlaceOrder
from storefront.payments import PayPalProcessor
from storefront.pricing import NoDiscount, PercentageDiscount


@dataclass
class Ping(Command):
    text: str = "ping"


class TestCatalog:
    def test_create_passes_arguments(self):
        catalog = DiscountCatalog()
        catalog.add("percentage", PercentageDiscount)
        discount = catalog.create("percentage", 10)
        assert discount.apply(Decimal(100)) == Decimal(90)

    def test_unknown_key(self):
        catalog = PaymentCatalog()
        catalog.add("paypal", PayPalProcessor)
        with pytest.raises(UnknownStrategyError) as exc_info:
            catalog.create("cash")
        assert str(exc_info.value) == "Unknown payment strategy 'cash' (known: paypal)"
        assert isinstance(exc_info.value, KeyError)

    def test_bad_arguments(self):
        catalog = DiscountCatalog()
        catalog.add("percentage", PercentageDiscount)
        catalog.add("none", NoDiscount)
        with pytest.raises(StrategyArgumentError):
            catalog.create("percentage")
        with pytest.raises(StrategyArgumentError):
            catalog.create("none", 10)

    def test_keys_and_contains(self):
        catalog = Catalog()
        catalog.add("a", object)
        catalog.add("b", object)
        assert catalog.keys() == ["a", "b"]
        assert "a" in catalog
        assert "c" not in catalog


class TestApplication:
    def test_default_strategies_registered(self, app):
        assert app.container.resolve(DiscountCatalog).keys() == ["none", "percentage"]
        assert app.container.resolve(PaymentCatalog).keys() == ["credit-card", "paypal"]

    def test_config_available_via_container(self, settings):
        app = Application(config=settings)
        assert app.container.resolve(Settings) is settings
        assert app.config is settings

    def test_unknown_command(self, app):
        with pytest.raises(UnknownCommandError):
            app.execute(Ping())

    def test_callable_handler_and_event_subscription(self):
        seen = []
        module = (
            DomainModule("ping")
            .command(Ping, lambda cmd: cmd.text.upper())
            .on_event(OrderProcessed, seen.append)
        )
        app = Application().register(module)
        assert app.execute(Ping("hi")) == "HI"
        event = OrderProcessed(order_id="x", subtotal=Decimal(1), amount=Decimal(1), payment_method="m")
        app.event_bus.publish(event)
        assert seen == [event]

    def test_modules_extend_shared_catalog(self, app):
        app.register(DomainModule("extra").strategy(DiscountCatalog, "half", lambda: PercentageDiscount(50)))
        assert "half" in app.container.resolve(DiscountCatalog)
        assert "percentage" in app.container.resolve(DiscountCatalog)

    def test_registering_module_twice_subscribes_once(self):
        seen = []
        module = DomainModule("audit").on_event(OrderProcessed, seen.append)
        app = Application().register(module).register(module)
        event = OrderProcessed(order_id="x", subtotal=Decimal(1), amount=Decimal(1), payment_method="m")
        app.event_bus.publish(event)
        assert seen == [event]

    def test_bind_interface_to_implementation(self):
        class Clock:
            pass

        class FixedClock(Clock):
            pass

        app = Application().register(DomainModule("time").bind(Clock, FixedClock))
        assert isinstance(app.container.resolve(Clock), FixedClock)


class TestPlaceOrder:
    def test_demo_scenario(self, app, capsys):
        event = run_demo(app)
        assert capsys.readouterr().out == "Processing credit card payment of $1350\n"
        assert event.subtotal == Decimal(1500)
        assert event.amount == Decimal(1350)
        assert event.payment_method == "credit card"

    def test_demo_with_paypal(self, app, capsys):
        run_demo(app, payment="paypal")
        assert capsys.readouterr().out == "Processing PayPal payment of $1350\n"

    def test_no_discount_by_default(self, app, capsys):
        event = app.execute(PlaceOrder(items=[("Pen", "2.50"), ("Ink", 1)]))
        assert event.amount == Decimal("3.50")
        assert capsys.readouterr().out == "Processing credit card payment of $3.5\n"

    def test_currency_symbol_from_settings(self, capsys):
        app = create_app(Settings(currency_symbol="€"))
        app.execute(PlaceOrder(items=[("Pen", 2)], payment="paypal"))
        assert capsys.readouterr().out == "Processing PayPal payment of €2\n"

    def test_unknown_payment_pays_nothing(self, app, capsys):
        with pytest.raises(UnknownStrategyError):
            app.execute(PlaceOrder(items=[("Pen", 2)], payment="cash"))
        assert capsys.readouterr().out == ""

    def test_event_published_once(self, app, capsys):
        seen = []
        app.container.resolve(EventBus).subscribe(OrderProcessed, seen.append)
        event = app.execute(PlaceOrder(items=[("Pen", 2)]))
        assert seen == [event]
