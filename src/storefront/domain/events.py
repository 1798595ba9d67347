"""Domain events: base type and a synchronous in-process dispatcher."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class EventBus(Protocol):
    """Event bus protocol: publish and subscribe."""

    def publish(self, event: "DomainEvent") -> None:
        ...

    def subscribe(self, event_type: type["DomainEvent"], handler: Callable[..., Any]) -> None:
        ...


@dataclass(frozen=True)
class DomainEvent:
    """Base domain event type. Subclasses are dataclasses with fields."""
    pass


class InProcessEventDispatcher:
    """Dispatcher: subscribe by event type, publish invokes handlers in subscription order."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[..., Any]]] = {}

    def subscribe(self, event_type: type[DomainEvent], handler: Callable[..., Any]) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def publish(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(type(event), [])
        logger.debug("Publishing %s to %d handler(s)", type(event).__name__, len(handlers))
        for handler in handlers:
            handler(event)
