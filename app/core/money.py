"""
Decimal helpers for monetary amounts.

Amounts are never converted through float arithmetic; floats are converted via
their string representation first.
"""
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

Money = Union[str, int, float, Decimal]


def to_decimal(value: Money | None) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ValueError(f"Invalid monetary amount: {value!r}") from e


def to_minor_units(value: Money) -> int:
    """
    Convert an amount in major units to integer minor units (cents).

    Rounds half away from zero: 19.995 -> 2000, -0.005 -> -1.
    """
    return int((to_decimal(value) * 100).to_integral_value(rounding=ROUND_HALF_UP))
