import io
import logging
import os

import pytest

from storefront.bootstrap import create_app
from storefront.core import Application, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep STOREFRONT_* from the outer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("STOREFRONT_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_logger_level():
    yield
    logging.getLogger("storefront").setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def app(settings: Settings) -> Application:
    return create_app(settings)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()
