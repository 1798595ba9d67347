"""Tests for the DI container."""
from __future__ import annotations

import pytest

from storefront.core import Container


class Repo:
    pass


class Service:
    def __init__(self, repo: Repo, retries: int = 3):
        self.repo = repo
        self.retries = retries


class TestContainer:
    def test_resolve_unknown_raises_key_error(self):
        with pytest.raises(KeyError):
            Container().resolve(Repo)

    def test_register_instance(self):
        container = Container()
        repo = Repo()
        container.register_instance(Repo, repo)
        assert container.resolve(Repo) is repo

    def test_singleton_factory_called_once(self):
        container = Container()
        calls = []
        container.register("thing", lambda: calls.append(1) or object())
        first = container.resolve("thing")
        assert container.resolve("thing") is first
        assert calls == [1]

    def test_transient_factory(self):
        container = Container()
        container.register(Repo, Repo, singleton=False)
        assert container.resolve(Repo) is not container.resolve(Repo)

    def test_register_class_resolves_string_annotations(self):
        container = Container()
        container.register_class(Repo)
        container.register_class(Service)
        service = container.resolve(Service)
        assert service.repo is container.resolve(Repo)
        assert service.retries == 3

    def test_has(self):
        container = Container()
        assert not container.has(Repo)
        container.register_class(Repo)
        assert container.has(Repo)

    def test_reregister_drops_cached_instance(self):
        container = Container()
        container.register(Repo, Repo)
        first = container.resolve(Repo)
        container.register(Repo, Repo)
        assert container.resolve(Repo) is not first
