"""Decimal money helpers."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

CENTS = Decimal("0.01")

DecimalLike = Union[Decimal, int, float, str]


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Convert a numeric value to Decimal.

    Floats go through their shortest repr so 1.79 becomes Decimal("1.79")
    instead of its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_currency(amount: Decimal) -> Decimal:
    """Round an amount to cents, half away from zero."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
