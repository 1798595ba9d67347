"""Application — composed from modules via app.register(module)."""
from __future__ import annotations

import logging
from typing import Any, Callable

from storefront.core.config import Config, Settings
from storefront.core.container import Container
from storefront.core.module import Module
from storefront.domain.events import EventBus, InProcessEventDispatcher
from storefront.errors import UnknownCommandError

logger = logging.getLogger(__name__)


class Application:
    """
    Application. Composed from modules via register(module).
    Commands are dispatched in-process via execute(command).
    """

    def __init__(self, config: Any = None) -> None:
        self._modules: list[Module] = []
        self._container = Container()
        self._command_handlers: dict[type, Any] = {}
        if config is None:
            config = Settings()
        self._container.register_instance(type(config), config)
        self._container.register_instance(Config, config)
        self._container.register_instance("config", config)
        bus = InProcessEventDispatcher()
        self._container.register_instance(EventBus, bus)
        self._container.register_instance(InProcessEventDispatcher, bus)

    def register(self, module: Module) -> Application:
        """Register a module (DomainModule, etc.). Returns self for chaining. Registering the same module again is a no-op."""
        if any(m is module for m in self._modules):
            logger.debug("Module %r already registered, skipping", module)
            return self
        module.register_into(self)
        self._modules.append(module)
        return self

    def add_command_handler(self, cmd_type: type, handler: type[Any] | Callable[..., Any]) -> None:
        """Handler class (resolved from the container) or plain callable taking the command."""
        self._command_handlers[cmd_type] = handler

    def execute(self, command: Any) -> Any:
        """Run the handler registered for type(command) and return its result."""
        try:
            handler = self._command_handlers[type(command)]
        except KeyError:
            raise UnknownCommandError(type(command)) from None
        if isinstance(handler, type):
            handler = self._container.resolve(handler)
        logger.debug("Executing %s", type(command).__name__)
        return handler(command)

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container

    @property
    def event_bus(self) -> EventBus:
        return self._container.resolve(EventBus)

    @property
    def config(self) -> Any:
        return self._container.resolve("config")
