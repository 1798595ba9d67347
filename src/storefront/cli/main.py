"""
CLI: demo, checkout, strategies.
Commands build a PlaceOrder and run it through the composed application.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

import typer

from storefront.bootstrap import create_app, run_demo
from storefront.core import Application, load_config_from_env
from storefront.errors import InvalidItemError, InvalidLogLevelError, StorefrontError
from storefront.money import to_decimal
from storefront.orders import DiscountCatalog, PaymentCatalog, PlaceOrder

app = typer.Typer(help="Storefront CLI: place an order with a discount and a payment method.")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level: str) -> None:
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidLogLevelError(level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("storefront").setLevel(level)


def _parse_item(raw: str) -> tuple[str, Decimal]:
    """NAME=PRICE; the name may itself contain '='."""
    name, sep, price = raw.rpartition("=")
    if not sep or not name.strip():
        raise InvalidItemError(raw)
    return name.strip(), to_decimal(price)


def _build_app() -> Application:
    return create_app(load_config_from_env())


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Overrides STOREFRONT_LOG_LEVEL"),
) -> None:
    settings = load_config_from_env()
    try:
        _configure_logging(log_level or settings.log_level)
    except StorefrontError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


@app.command()
def demo(
    payment: str = typer.Option("credit-card", "--payment", "-p", help="Payment strategy key"),
) -> None:
    """Laptop 1000 + Phone 500 with a 10% discount."""
    try:
        run_demo(_build_app(), payment=payment)
    except StorefrontError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


@app.command()
def checkout(
    item: List[str] = typer.Option(..., "--item", "-i", help="Product as NAME=PRICE (repeatable)"),
    discount: Optional[str] = typer.Option(None, "--discount", "-d", help="Discount strategy key"),
    percent: Optional[str] = typer.Option(None, "--percent", help="Percent for the percentage discount"),
    payment: Optional[str] = typer.Option(None, "--payment", "-p", help="Payment strategy key"),
) -> None:
    """Place an order with the given products, discount and payment method."""
    application = _build_app()
    settings = application.config
    try:
        cmd = PlaceOrder(
            items=[_parse_item(raw) for raw in item],
            payment=payment or settings.default_payment,
            discount=discount or settings.default_discount,
            percent=None if percent is None else to_decimal(percent),
        )
        application.execute(cmd)
    except StorefrontError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


@app.command()
def strategies() -> None:
    """List registered discount and payment keys."""
    container = _build_app().container
    typer.echo("discounts: " + ", ".join(container.resolve(DiscountCatalog).keys()))
    typer.echo("payments: " + ", ".join(container.resolve(PaymentCatalog).keys()))


def main() -> None:
    """Entry point for the storefront console command."""
    app()


if __name__ == "__main__":
    main()
