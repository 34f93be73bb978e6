"""
excel2sql: infer SQL Server table definitions from Excel workbooks.
"""

from .schema import (
    Column, Table, ValueType, DecimalInfo, ColumnDecision, RenderOptions,
    analyze_decimal, map_to_sql_type, profile_column, profile_table, render,
)

__version__ = "1.0.0"

__all__ = [
    "Column", "Table", "ValueType", "DecimalInfo", "ColumnDecision", "RenderOptions",
    "analyze_decimal", "map_to_sql_type", "profile_column", "profile_table", "render",
]
