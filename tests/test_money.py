from decimal import Decimal

import pytest

from app.core.money import to_minor_units


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("10.00"), 1000),
        (Decimal("19.995"), 2000),
        (Decimal("0.005"), 1),
        (Decimal("0.004"), 0),
        (Decimal("-0.005"), -1),
        (19.995, 2000),
        ("12.345", 1235),
        (7, 700),
    ],
)
def test_to_minor_units_rounds_half_away_from_zero(amount, expected):
    assert to_minor_units(amount) == expected


def test_to_minor_units_rejects_garbage():
    with pytest.raises(ValueError):
        to_minor_units("ten euros")
