"""
Schema inference and DDL rendering.
"""

from .type_mapper import ValueType, SQL_TYPE_NAMES, map_to_sql_type
from .dataset import Column, Table
from .decimal_info import DecimalInfo, analyze_decimal
from .column_profiler import ColumnDecision, is_null_like, text_size_bucket, profile_column, profile_table
from .ddl_builder import RenderOptions, render

__all__ = [
    "ValueType", "SQL_TYPE_NAMES", "map_to_sql_type",
    "Column", "Table",
    "DecimalInfo", "analyze_decimal",
    "ColumnDecision", "is_null_like", "text_size_bucket", "profile_column", "profile_table",
    "RenderOptions", "render",
]
