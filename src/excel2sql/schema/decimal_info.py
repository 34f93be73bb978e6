"""
Exact precision and scale of decimal values.

The digits are counted on the value's plain (non-exponent) textual form so
no binary floating-point rounding is involved: Decimal("123.450") keeps its
trailing zero and reports precision 6, scale 3.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

DecimalLike = Union[Decimal, int, float, str]


@dataclass(frozen=True)
class DecimalInfo:
    """
    Precision, scale and trailing fractional zeros of a decimal.

    Attributes:
        precision (int): Significant digit count
        scale (int): Digits right of the decimal point
        trailing_zeros (int): Zero digits at the end of the fractional part.
            Aggregated per column but not used when rendering DDL.
    """
    precision: int = 0
    scale: int = 0
    trailing_zeros: int = 0

    def combine(self, other: "DecimalInfo") -> "DecimalInfo":
        """Elementwise maximum; associative and commutative."""
        return DecimalInfo(
            precision=max(self.precision, other.precision),
            scale=max(self.scale, other.scale),
            trailing_zeros=max(self.trailing_zeros, other.trailing_zeros),
        )

    @property
    def sql_suffix(self) -> str:
        return f"({self.precision},{self.scale})"


def _plain_text(value: DecimalLike) -> str:
    if isinstance(value, bool):
        raise TypeError("bool is not a decimal value")
    if isinstance(value, float):
        # repr() is the shortest text that round-trips the float
        value = Decimal(repr(value))
    elif not isinstance(value, Decimal):
        value = Decimal(str(value).strip())
    if not value.is_finite():
        raise ValueError(f"Non-finite decimal has no precision: {value}")
    return format(value, "f")


def analyze_decimal(value: DecimalLike) -> DecimalInfo:
    """
    Compute precision, scale and trailing zeros of one decimal value.

    Leading zeros of the integer part are not significant; every fractional
    digit counts toward both precision and scale. A value made only of zeros
    gets one extra digit of precision so literal zero is never precision 0.

    Args:
        value (DecimalLike): Decimal, int, float or numeric string

    Returns:
        DecimalInfo: (precision, scale, trailing_zeros)

    Raises:
        ValueError: If the value is NaN or infinite

    Examples:
        0        -> (1, 0, 0)
        0.0      -> (2, 1, 1)
        123.450  -> (6, 3, 1)
        -0.05    -> (2, 2, 0)
    """
    text = _plain_text(value)

    precision = 0
    scale = 0
    trailing_zeros = 0
    in_fraction = False
    non_zero_seen = False

    for ch in text:
        if in_fraction:
            if ch == "0":
                trailing_zeros += 1
            else:
                non_zero_seen = True
                trailing_zeros = 0
            precision += 1
            scale += 1
        elif ch == ".":
            in_fraction = True
        elif ch != "-":
            if ch != "0" or non_zero_seen:
                non_zero_seen = True
                precision += 1

    if not non_zero_seen:
        precision += 1

    return DecimalInfo(precision, scale, trailing_zeros)
