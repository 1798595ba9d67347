from storefront.core.app import Application
from storefront.core.container import Container
from storefront.core.module import Module
from storefront.core.config import Config, Settings, load_config_from_env

__all__ = [
    "Application",
    "Container",
    "Module",
    "Config",
    "Settings",
    "load_config_from_env",
]
