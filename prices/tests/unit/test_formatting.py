"""
Tests for Swedish currency formatting.
"""

from decimal import Decimal

import pytest

from prices.utils.formatting import MINUS, NBSP, SEK



@pytest.mark.parametrize("value,expected", [
    (Decimal("0"), f"0,00{NBSP}kr"),
    (Decimal("9.5"), f"9,50{NBSP}kr"),
    (Decimal("109.90"), f"109,90{NBSP}kr"),
    (Decimal("1234.5"), f"1234,50{NBSP}kr"),
    (Decimal("12345.67"), f"12{NBSP}345,67{NBSP}kr"),
    (Decimal("1234567"), f"1{NBSP}234{NBSP}567,00{NBSP}kr"),
    (30, f"30,00{NBSP}kr"),
    (19.99, f"19,99{NBSP}kr"),
])
def test_format(value, expected):
    assert SEK.format(value) == expected


def test_rounds_to_two_decimals():
    assert SEK.format(Decimal("10.005")) == f"10,00{NBSP}kr"
    assert SEK.format(Decimal("10.015")) == f"10,02{NBSP}kr"


def test_negative_uses_minus_sign():
    assert SEK.format(Decimal("-5")) == f"{MINUS}5,00{NBSP}kr"
