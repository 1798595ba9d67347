"""Domain layer base classes: Entity, ValueObject, AggregateRoot, DomainEvent."""
from storefront.domain.entity import Entity
from storefront.domain.value_object import ValueObject
from storefront.domain.aggregate import AggregateRoot
from storefront.domain.events import DomainEvent, EventBus, InProcessEventDispatcher

__all__ = [
    "Entity",
    "ValueObject",
    "AggregateRoot",
    "DomainEvent",
    "EventBus",
    "InProcessEventDispatcher",
]
