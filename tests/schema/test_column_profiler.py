"""
Test cases for column profiling (nullability, text buckets, decimal sizes).
"""

from decimal import Decimal

import pytest

from excel2sql.core.exceptions import UnsupportedColumnType
from excel2sql.schema.column_profiler import (
    ColumnDecision,
    is_null_like,
    profile_column,
    profile_table,
    text_size_bucket,
)
from excel2sql.schema.dataset import Table
from excel2sql.schema.type_mapper import ValueType


def _single(value_type, values):
    table = Table.from_records("T", [("C", value_type)], [(v,) for v in values])
    return profile_column(table, table.columns[0])


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n", float("nan")])
def test_null_like_values(value):
    assert is_null_like(value)


@pytest.mark.parametrize("value", [0, False, "x", " x ", Decimal("0")])
def test_present_values(value):
    assert not is_null_like(value)


@pytest.mark.parametrize(
    "length, bucket",
    [(0, "255"), (1, "255"), (255, "255"), (256, "512"), (300, "512"), (512, "512"), (513, "MAX")],
)
def test_text_size_bucket_boundaries(length, bucket):
    assert text_size_bucket(length) == bucket


def test_text_column_longest_value_300_uses_512():
    decision = _single(ValueType.TEXT, ["a", "x" * 300, "bb"])
    assert decision == ColumnDecision("nvarchar", False, "(512)")
    assert decision.sql_type == "nvarchar(512)"


def test_text_column_over_512_uses_max():
    decision = _single(ValueType.TEXT, ["x" * 513, None])
    assert decision == ColumnDecision("nvarchar", True, "(MAX)")


def test_whitespace_cells_do_not_count_toward_length():
    decision = _single(ValueType.TEXT, ["ab", " " * 400])
    assert decision == ColumnDecision("nvarchar", True, "(255)")


def test_zero_row_text_column_defaults():
    table = Table.from_records("Empty", [("Name", ValueType.TEXT)])
    decision = profile_column(table, table.columns[0])
    assert decision.nullable is True
    assert decision.size_suffix == "(255)"


def test_zero_row_decimal_column_defaults():
    table = Table.from_records("Empty", [("Amount", ValueType.DECIMAL)])
    assert profile_column(table, table.columns[0]) == ColumnDecision("decimal", True, "(18,0)")


@pytest.mark.parametrize("value_type", [ValueType.INT32, ValueType.BOOLEAN, ValueType.GENERIC])
def test_zero_row_other_columns_are_nullable(value_type):
    table = Table.from_records("Empty", [("C", value_type)])
    decision = profile_column(table, table.columns[0])
    assert decision.nullable is True
    assert decision.size_suffix == ""


def test_decimal_column_aggregates_elementwise():
    decision = _single(ValueType.DECIMAL, [Decimal("1.5"), Decimal("2.25"), None])
    assert decision.nullable is True
    assert decision.size_suffix == "(3,2)"
    assert decision.sql_type == "decimal(3,2)"


def test_decimal_column_without_nulls():
    decision = _single(ValueType.DECIMAL, [Decimal("12345"), Decimal("0.001")])
    assert decision == ColumnDecision("decimal", False, "(5,3)")


def test_decimal_column_with_only_nulls_uses_default_size():
    assert _single(ValueType.DECIMAL, [None, ""]) == ColumnDecision("decimal", True, "(18,0)")


def test_other_types_only_get_nullability():
    assert _single(ValueType.INT32, [1, 2, 3]) == ColumnDecision("int", False, "")
    assert _single(ValueType.INT32, [1, None]) == ColumnDecision("int", True, "")
    assert _single(ValueType.GENERIC, ["a", 1]) == ColumnDecision("nvarchar(512)", False, "")


def test_short_rows_read_as_null():
    table = Table.from_records("T", [("A", ValueType.INT32), ("B", ValueType.INT32)], [(1, 2), (3,)])
    assert profile_column(table, table.columns[1]).nullable is True


def test_unsupported_type_raises():
    with pytest.raises(UnsupportedColumnType):
        _single(ValueType.DURATION, [None])


def test_profile_table_orders_by_ordinal(person_table):
    decisions = profile_table(person_table)
    assert [d.sql_type for d in decisions] == ["nvarchar(255)", "int"]
    assert [d.nullable for d in decisions] == [True, True]


def test_profile_table_parallel_matches_sequential():
    columns = [(f"C{i}", ValueType.TEXT if i % 2 else ValueType.DECIMAL) for i in range(8)]
    rows = [
        tuple("x" * (i * 50 + r) if i % 2 else Decimal(f"{r}.{i}") for i in range(8))
        for r in range(1, 20)
    ]
    table = Table.from_records("Wide", columns, rows)
    assert profile_table(table, max_workers=4) == profile_table(table, max_workers=1)
