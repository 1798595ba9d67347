"""Single config object: user passes it when creating the app; available via DI."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


class Config:
    """
    Application config. User creates their own class or instance
    and passes to Application(config=...); then available via container.resolve(Config).
    """

    @classmethod
    def load_from_env(
        cls, prefix: str = "STOREFRONT_", environ: Optional[Mapping[str, str]] = None, **defaults: Any
    ) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for MyConfig(**Config.load_from_env())."""
        result = dict(defaults)
        env = os.environ if environ is None else environ
        for key, value in env.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


@dataclass
class Settings(Config):
    currency_symbol: str = "$"
    default_payment: str = "credit-card"
    default_discount: str = "none"
    log_level: str = "WARNING"


def load_config_from_env(environ: Optional[Mapping[str, str]] = None, prefix: str = "STOREFRONT_") -> Settings:
    """Settings from defaults plus STOREFRONT_* variables. Unknown keys are ignored."""
    known = {f.name for f in fields(Settings)}
    values = Config.load_from_env(prefix=prefix, environ=environ)
    return Settings(**{k: v for k, v in values.items() if k in known})
