"""
Profile table columns to decide SQL type, nullability and size.

Each column is scanned once. Text columns get a length bucket, decimal
columns get an aggregated (precision,scale), every other type only gets a
nullable flag.

Module Input:
    - Table with columns and rows

Module Output:
    - ColumnDecision per column (type name, nullable, size suffix)
"""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import reduce
from typing import Any, Iterable, List

from excel2sql.core.exceptions import UnsupportedColumnType
from excel2sql.core.logging_config import get_logger
from excel2sql.schema.dataset import Column, Table
from excel2sql.schema.decimal_info import DecimalInfo, analyze_decimal
from excel2sql.schema.type_mapper import ValueType, map_to_sql_type

logger = get_logger(__name__)

SAFE_TEXT_LENGTH = "255"
# SQL Server's own default when DECIMAL is declared without arguments
SAFE_DECIMAL_SUFFIX = "(18,0)"


@dataclass(frozen=True)
class ColumnDecision:
    sql_type_name: str
    nullable: bool
    size_suffix: str = ""

    @property
    def sql_type(self) -> str:
        return f"{self.sql_type_name}{self.size_suffix}"


def is_null_like(value: Any) -> bool:
    """None, NaN, empty text and whitespace-only text all count as absent."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return not str(value).strip()


def text_size_bucket(max_length: int) -> str:
    """
    Bucket a maximum text length into an nvarchar size.

    Returns:
        str: "255" (<= 255), "512" (<= 512) or "MAX"
    """
    if max_length <= 255:
        return "255"
    if max_length <= 512:
        return "512"
    return "MAX"


def _profile_text(values: Iterable[Any]) -> tuple[bool, str]:
    max_len = 0
    is_null = False
    for v in values:
        if is_null_like(v):
            is_null = True
            continue
        max_len = max(max_len, len(str(v)))
    return is_null, f"({text_size_bucket(max_len)})"


def _profile_decimal(values: Iterable[Any]) -> tuple[bool, str]:
    is_null = False
    infos: List[DecimalInfo] = []
    for v in values:
        if is_null_like(v):
            is_null = True
            continue
        infos.append(analyze_decimal(v))
    if not infos:
        return is_null, SAFE_DECIMAL_SUFFIX
    info = reduce(DecimalInfo.combine, infos)
    return is_null, info.sql_suffix


def profile_column(table: Table, column: Column) -> ColumnDecision:
    """
    Decide the SQL type, nullability and size suffix of one column.

    Args:
        table (Table): Table owning the column
        column (Column): Column to profile

    Returns:
        ColumnDecision: Resolved type name, nullable flag and size suffix

    Raises:
        UnsupportedColumnType: If the column's value type has no SQL mapping
    """
    try:
        type_name = map_to_sql_type(column.value_type)
    except UnsupportedColumnType as exc:
        raise UnsupportedColumnType(
            f"No SQL type mapping for column [{table.name}].[{column.name}]: "
            f"{exc.details.get('value_type')}",
            {"table": table.name, "column": column.name, **exc.details},
        ) from exc

    # Zero-row tables are conservatively nullable
    if not table.rows:
        if column.value_type is ValueType.TEXT:
            suffix = f"({SAFE_TEXT_LENGTH})"
        elif column.value_type is ValueType.DECIMAL:
            suffix = SAFE_DECIMAL_SUFFIX
        else:
            suffix = ""
        return ColumnDecision(type_name, True, suffix)

    values = table.column_values(column)
    if column.value_type is ValueType.TEXT:
        nullable, suffix = _profile_text(values)
    elif column.value_type is ValueType.DECIMAL:
        nullable, suffix = _profile_decimal(values)
    else:
        nullable, suffix = any(is_null_like(v) for v in values), ""

    decision = ColumnDecision(type_name, nullable, suffix)
    logger.debug(
        "Profiled %s.%s -> %s%s",
        table.name, column.name, decision.sql_type, " NULL" if nullable else "",
    )
    return decision


def profile_table(table: Table, max_workers: int = 1) -> List[ColumnDecision]:
    """
    Profile every column of a table, in ordinal order.

    Columns are independent, so with max_workers > 1 they are profiled on a
    thread pool; results still come back in column order.

    Args:
        table (Table): Table to profile
        max_workers (int): Number of profiling threads

    Returns:
        List[ColumnDecision]: One decision per column, ordered by ordinal
    """
    columns = table.ordered_columns
    if max_workers <= 1 or len(columns) <= 1:
        return [profile_column(table, c) for c in columns]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda c: profile_column(table, c), columns))
