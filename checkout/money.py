from __future__ import annotations
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

Money = Union[Decimal, int, str, float]

CENT = Decimal("0.01")


def to_money(value: Money) -> Decimal:
    """Convert a price to Decimal. Floats go through repr(), so 549.99 stays 549.99.

    Raises ValueError for malformed or non-finite values (NaN, Infinity).
    """
    try:
        if isinstance(value, Decimal):
            money = value
        elif isinstance(value, float):
            money = Decimal(repr(value))
        else:
            money = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"not a price: {value!r}") from e
    if not money.is_finite():
        raise ValueError(f"not a price: {value!r}")
    return money


def round_money(value: Decimal) -> Decimal:
    """Round to cents, half away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
