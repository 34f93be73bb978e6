"""
Read Excel workbooks into in-memory tables.

Every worksheet becomes one Table. Each column's declared value type is
inferred from the Python types of its non-empty cells: a column whose cells
all share one kind gets that kind, anything mixed is generic.

Module Input:
    - Path to an .xlsx/.xlsm/.xls workbook
    - Whether the first row holds column names

Module Output:
    - List of Table objects, in worksheet order
"""

from __future__ import annotations

import datetime as dt
import uuid
import zipfile
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Set

import pandas as pd

from excel2sql.core.exceptions import InputLocked, InputUnreadable
from excel2sql.core.logging_config import get_logger
from excel2sql.schema.dataset import Column, Table
from excel2sql.schema.type_mapper import ValueType

logger = get_logger(__name__)

_NUMERIC = {ValueType.INT64, ValueType.FLOAT64}


def _value_kind(value: Any) -> ValueType:
    """Classify a single non-null cell."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, int):
        return ValueType.INT64
    if isinstance(value, float):
        return ValueType.FLOAT64
    if isinstance(value, Decimal):
        return ValueType.DECIMAL
    if isinstance(value, dt.datetime):
        return ValueType.DATETIME_OFFSET if value.tzinfo is not None else ValueType.DATETIME
    if isinstance(value, dt.date):
        return ValueType.DATETIME
    if isinstance(value, (dt.time, dt.timedelta)):
        return ValueType.DURATION
    if isinstance(value, str):
        return ValueType.TEXT
    if isinstance(value, uuid.UUID):
        return ValueType.GUID
    if isinstance(value, (bytes, bytearray)):
        return ValueType.BYTES
    return ValueType.GENERIC


def infer_value_type(kinds: Set[ValueType]) -> ValueType:
    """
    Collapse the set of cell kinds seen in a column into one value type.

    Integers mixed with floats are floats (Excel stores both as doubles);
    anything else mixed, or an empty column, is generic.
    """
    if not kinds:
        return ValueType.GENERIC
    if len(kinds) == 1:
        return next(iter(kinds))
    if kinds <= _NUMERIC:
        return ValueType.FLOAT64
    if kinds <= {ValueType.INT64, ValueType.DECIMAL}:
        return ValueType.DECIMAL
    return ValueType.GENERIC


def _clean_cell(value: Any) -> Any:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    # numpy scalars -> python scalars
    if hasattr(value, "item") and type(value).__module__ == "numpy":
        return value.item()
    return value


def _column_name(raw: Any, index: int, first_row_headers: bool) -> str:
    if not first_row_headers or raw is None:
        return f"Column{index}"
    name = str(raw).strip()
    if not name or name.lower().startswith("unnamed:"):
        return f"Column{index}"
    return name


def frame_to_table(
    name: str,
    df: pd.DataFrame,
    first_row_headers: bool = False,
    numbers_as_decimal: bool = False,
) -> Table:
    """
    Convert one worksheet DataFrame into a Table.

    Args:
        name (str): Table (worksheet) name
        df (pd.DataFrame): Sheet contents read with dtype=object
        first_row_headers (bool): Whether df's columns came from a header row
        numbers_as_decimal (bool): Convert float cells to exact Decimal values

    Returns:
        Table: Columns with inferred value types and cleaned rows
    """
    rows: List[List[Any]] = [
        [_clean_cell(v) for v in record]
        for record in df.itertuples(index=False, name=None)
    ]

    columns: List[Column] = []
    for idx, raw_name in enumerate(df.columns):
        if numbers_as_decimal:
            for row in rows:
                if isinstance(row[idx], float):
                    row[idx] = Decimal(repr(row[idx]))
        kinds = {_value_kind(row[idx]) for row in rows if row[idx] is not None}
        value_type = infer_value_type(kinds)
        if value_type is ValueType.DECIMAL:
            for row in rows:
                if isinstance(row[idx], int) and not isinstance(row[idx], bool):
                    row[idx] = Decimal(row[idx])
        columns.append(Column(_column_name(raw_name, idx, first_row_headers), idx, value_type))
        logger.debug("Sheet %s column %d -> %s", name, idx, value_type.value)

    return Table(name=name, columns=columns, rows=rows)


def read_workbook(
    path: Path,
    first_row_headers: bool = False,
    numbers_as_decimal: bool = False,
) -> List[Table]:
    """
    Read every worksheet of a workbook as a Table.

    Args:
        path (Path): Workbook file
        first_row_headers (bool): Use the first row as column names
        numbers_as_decimal (bool): Read fractional numbers as exact decimals

    Returns:
        List[Table]: One table per worksheet, in workbook order

    Raises:
        InputLocked: If the file is held by another process or not permitted
        InputUnreadable: If the file cannot be opened or decoded
    """
    path = Path(path)
    logger.info(f"Reading workbook: {path}")
    try:
        sheets: Dict[str, pd.DataFrame] = pd.read_excel(
            path,
            sheet_name=None,
            header=0 if first_row_headers else None,
            dtype=object,
        )
    except PermissionError as exc:
        raise InputLocked(
            "The file is open in another process, please check for open Excel windows.",
            {"path": str(path), "error": str(exc)},
        ) from exc
    except (OSError, ValueError, ImportError, zipfile.BadZipFile) as exc:
        raise InputUnreadable(
            f"Could not read workbook: {path}",
            {"path": str(path), "error": str(exc)},
        ) from exc

    tables = [
        frame_to_table(str(sheet), df, first_row_headers, numbers_as_decimal)
        for sheet, df in sheets.items()
    ]
    logger.info(f"Read {len(tables)} sheet(s) from {path.name}")
    return tables
