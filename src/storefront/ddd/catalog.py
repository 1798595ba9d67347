"""Catalog — named factories for one family of strategies."""
from __future__ import annotations

import inspect
from typing import Any, Callable, Generic, TypeVar

from storefront.errors import StrategyArgumentError, UnknownStrategyError

T = TypeVar("T")


class Catalog(Generic[T]):
    """
    Key -> factory map. Subclass per family so each one is a distinct DI key.
    create() passes extra arguments through to the factory.
    """

    kind = "strategy"

    def __init__(self) -> None:
        self._factories: dict[str, Callable[..., T]] = {}

    def add(self, key: str, factory: Callable[..., T]) -> None:
        self._factories[key] = factory

    def create(self, key: str, *args: Any, **kwargs: Any) -> T:
        try:
            factory = self._factories[key]
        except KeyError:
            raise UnknownStrategyError(self.kind, key, self.keys()) from None
        try:
            inspect.signature(factory).bind(*args, **kwargs)
        except TypeError as exc:
            raise StrategyArgumentError(self.kind, key, str(exc)) from None
        return factory(*args, **kwargs)

    def keys(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, key: object) -> bool:
        return key in self._factories
