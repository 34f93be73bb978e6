"""
Test cases for decimal precision / scale extraction.
"""

from decimal import Decimal

import pytest

from excel2sql.schema.decimal_info import DecimalInfo, analyze_decimal


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("0"), DecimalInfo(1, 0, 0)),
        (Decimal("0.0"), DecimalInfo(2, 1, 1)),
        (Decimal("123.450"), DecimalInfo(6, 3, 1)),
        (Decimal("1.5"), DecimalInfo(2, 1, 0)),
        (Decimal("2.25"), DecimalInfo(3, 2, 0)),
        (Decimal("-12.5"), DecimalInfo(3, 1, 0)),
        (Decimal("0.05"), DecimalInfo(2, 2, 0)),
        (Decimal("100"), DecimalInfo(3, 0, 0)),
        (Decimal("10.500"), DecimalInfo(5, 3, 2)),
        (Decimal("0.00"), DecimalInfo(3, 2, 2)),
        (Decimal("-0"), DecimalInfo(1, 0, 0)),
    ],
)
def test_analyze_decimal(value, expected):
    assert analyze_decimal(value) == expected


def test_trailing_zeros_reset_on_non_zero_digit():
    # 1.00500 -> zeros "00" are reset by the 5, then "00" again
    assert analyze_decimal(Decimal("1.00500")).trailing_zeros == 2


def test_exponent_form_is_expanded():
    assert analyze_decimal(Decimal("1E+3")) == DecimalInfo(4, 0, 0)
    assert analyze_decimal(Decimal("1E-3")) == DecimalInfo(3, 3, 0)


def test_int_and_string_inputs():
    assert analyze_decimal(42) == DecimalInfo(2, 0, 0)
    assert analyze_decimal(" 3.140 ") == DecimalInfo(4, 3, 1)


def test_float_uses_shortest_repr():
    # 0.1 is not exactly representable; repr keeps it as one fractional digit
    assert analyze_decimal(0.1) == DecimalInfo(1, 1, 0)


@pytest.mark.parametrize("value", ["0", "0.000", "-7", "98765.4321", "0.0001", "5E+2"])
def test_precision_is_never_zero(value):
    assert analyze_decimal(Decimal(value)).precision >= 1


@pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity")])
def test_non_finite_values_rejected(value):
    with pytest.raises(ValueError):
        analyze_decimal(value)


def test_combine_is_elementwise_max():
    combined = DecimalInfo(2, 1, 0).combine(DecimalInfo(3, 2, 0))
    assert combined == DecimalInfo(3, 2, 0)
    assert combined.sql_suffix == "(3,2)"
    # Neither operand has the combined shape on its own
    assert DecimalInfo(5, 0, 0).combine(DecimalInfo(2, 2, 1)) == DecimalInfo(5, 2, 1)
