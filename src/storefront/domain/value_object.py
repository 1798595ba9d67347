"""ValueObject — base for immutable domain values such as Product."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject:
    """Frozen dataclass base: no identity, two values with equal fields are equal."""
