"""Decimal helpers shared by the domain and the CLI."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from storefront.errors import InvalidAmountError

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal. Floats go through str() so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value.strip() if isinstance(value, str) else value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(value) from None
    if not result.is_finite():
        raise InvalidAmountError(value)
    return result


def format_amount(amount: Number) -> str:
    """Plain notation without insignificant zeros: 1350, 1350.5, -50."""
    normalized = to_decimal(amount).normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")
