"""DI container behind Application: strategy catalogs, settings, the event bus and command handlers live here."""
from __future__ import annotations

import inspect
import sys
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def _resolve_annotation(ann: str, cls: type[Any]) -> Any:
    """Look a postponed annotation up in the module that defined cls; unknown names stay strings."""
    mod = sys.modules.get(cls.__module__)
    if mod is not None and hasattr(mod, ann):
        return getattr(mod, ann)
    return ann


def _instantiate_with_container(container: Container, cls: type[T]) -> T:
    """Build cls from the container. Parameters with defaults are skipped when nothing is registered for them."""
    sig = inspect.signature(cls)
    kwargs: dict[str, Any] = {}
    for name, param in sig.parameters.items():
        if param.annotation is inspect.Parameter.empty:
            continue
        ann = param.annotation
        if isinstance(ann, str):
            ann = _resolve_annotation(ann, cls)
        if param.default is not inspect.Parameter.empty and not container.has(ann):
            continue
        kwargs[name] = container.resolve(ann)
    return cls(**kwargs)


class Container:
    """
    Keys are types, protocols or strings ("config"). Entries are singletons
    unless registered with singleton=False; re-registering a key drops its cached instance.
    """

    def __init__(self) -> None:
        self._registry: dict[type[Any] | str, Callable[[], Any]] = {}
        self._singletons: dict[type[Any] | str, Any] = {}
        self._singleton_keys: set[type[Any] | str] = set()

    def register(self, key: type[T] | type[Any] | str, factory: Callable[[], T], singleton: bool = True) -> None:
        """Register a factory for a type or string key."""
        self._registry[key] = factory
        self._singletons.pop(key, None)
        if singleton:
            self._singleton_keys.add(key)
        else:
            self._singleton_keys.discard(key)

    def register_instance(self, key: type[T] | type[Any] | str, instance: T) -> None:
        """Register a ready-made instance."""
        self._registry[key] = lambda: instance
        self._singletons[key] = instance
        self._singleton_keys.add(key)

    def register_class(self, cls: type[T], singleton: bool = True) -> None:
        """Register a class: on resolve an instance is created with dependencies from the container."""
        self.register(key=cls, factory=lambda: _instantiate_with_container(self, cls), singleton=singleton)

    def has(self, key: Any) -> bool:
        return key in self._registry

    def resolve(self, key: type[T] | type[Any] | str) -> T:
        """Resolve an instance by type or key."""
        if key not in self._registry:
            raise KeyError(f"No registration for {key}")
        if key in self._singletons:
            return self._singletons[key]
        instance = self._registry[key]()
        if key in self._singleton_keys:
            self._singletons[key] = instance
        return instance
