"""AggregateRoot — aggregate root; collects domain events until they are published."""
from typing import List, Optional

from storefront.domain.entity import Entity
from storefront.domain.events import DomainEvent


class AggregateRoot(Entity):
    """
    Aggregate root. Events raised during work are collected
    and handed to the event bus by the application layer.
    """

    def __init__(self, id: Optional[str] = None) -> None:
        super().__init__(id)
        self._pending_events: List[DomainEvent] = []

    def raise_event(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def collect_pending_events(self) -> List[DomainEvent]:
        """Collect and clear pending events."""
        events = list(self._pending_events)
        self._pending_events.clear()
        return events
