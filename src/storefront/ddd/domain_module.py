"""
DomainModule — one object per bounded context.
Describes bindings, strategies, commands and event subscriptions.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Type

from storefront.core.app import Application
from storefront.core.module import Module
from storefront.ddd.catalog import Catalog
from storefront.ddd.commands import Command

logger = logging.getLogger(__name__)


class DomainModule(Module):
    """
    One object = full bounded context.
    .bind() .strategy() .command() .on_event()
    Register via app.register(module).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._bindings: list[tuple[Type[Any], Type[Any]]] = []
        self._strategies: list[tuple[Type[Catalog[Any]], str, Callable[..., Any]]] = []
        self._commands: list[tuple[Type[Command], Type[Any] | Callable[..., Any]]] = []
        self._event_handlers: list[tuple[type, Callable[..., Any]]] = []

    def bind(self, interface: Type[Any], impl: Type[Any]) -> DomainModule:
        """Register any interface → implementation for DI (e.g. domain services)."""
        self._bindings.append((interface, impl))
        return self

    def strategy(self, catalog: Type[Catalog[Any]], key: str, factory: Callable[..., Any]) -> DomainModule:
        """Add a named strategy factory to a catalog (created on first use)."""
        self._strategies.append((catalog, key, factory))
        return self

    def command(self, cmd_type: Type[Command], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._commands.append((cmd_type, handler))
        return self

    def on_event(self, event_type: type, handler: Callable[..., Any]) -> DomainModule:
        self._event_handlers.append((event_type, handler))
        return self

    def register_into(self, app: Application) -> None:
        container = app.container

        for iface, impl in self._bindings:
            container.register_class(impl)
            container.register(iface, lambda c=container, i=impl: c.resolve(i))

        # Catalogs are shared between modules: extend if one is already registered
        for catalog_type, key, factory in self._strategies:
            if not container.has(catalog_type):
                container.register_instance(catalog_type, catalog_type())
            container.resolve(catalog_type).add(key, factory)

        for event_type, handler in self._event_handlers:
            app.event_bus.subscribe(event_type, handler)

        for cmd_type, handler in self._commands:
            if isinstance(handler, type):
                container.register_class(handler)
            app.add_command_handler(cmd_type, handler)

        logger.debug(
            "Module %s: %d strategies, %d commands, %d event handlers",
            self.name,
            len(self._strategies),
            len(self._commands),
            len(self._event_handlers),
        )
