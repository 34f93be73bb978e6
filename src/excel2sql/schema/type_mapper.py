"""
Map declared column value types to SQL Server type names.

Module Input:
    - ValueType tag of a column

Module Output:
    - SQL type-name literal (e.g., "nvarchar", "decimal", "nvarchar(512)")
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from excel2sql.core.exceptions import UnsupportedColumnType


class ValueType(str, Enum):
    """Semantic type of the values stored in a column."""

    TEXT = "text"
    GUID = "guid"
    INT64 = "int64"
    BYTES = "bytes"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DATETIME_OFFSET = "datetime_offset"
    DECIMAL = "decimal"
    FLOAT64 = "float64"
    INT32 = "int32"
    FLOAT32 = "float32"
    INT16 = "int16"
    INT8 = "int8"
    GENERIC = "generic"
    # Time-of-day / elapsed-time cells; no SQL mapping
    DURATION = "duration"


# Built once, never written to
SQL_TYPE_NAMES: Mapping[ValueType, str] = MappingProxyType({
    ValueType.TEXT: "nvarchar",
    ValueType.GUID: "uniqueidentifier",
    ValueType.INT64: "bigint",
    ValueType.BYTES: "binary",
    ValueType.BOOLEAN: "bit",
    ValueType.DATETIME: "datetime",
    ValueType.DECIMAL: "decimal",
    ValueType.FLOAT64: "float",
    ValueType.INT32: "int",
    ValueType.FLOAT32: "real",
    ValueType.INT16: "smallint",
    ValueType.INT8: "tinyint",
    ValueType.GENERIC: "nvarchar(512)",
    ValueType.DATETIME_OFFSET: "datetimeoffset",
})


def map_to_sql_type(value_type: ValueType) -> str:
    """
    Look up the SQL type name for a value type.

    Args:
        value_type (ValueType): Declared value type of a column

    Returns:
        str: SQL type name without size suffix

    Raises:
        UnsupportedColumnType: If the value type has no mapping
    """
    try:
        return SQL_TYPE_NAMES[value_type]
    except (KeyError, TypeError):
        raise UnsupportedColumnType(
            f"No SQL type mapping for value type: {getattr(value_type, 'value', value_type)}",
            {"value_type": str(getattr(value_type, "value", value_type))},
        ) from None
