"""
Shared fixtures for excel2sql tests.
"""

import os
import sys
import tempfile
from pathlib import Path

# Keep test runs from writing logs/ into the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="excel2sql-logs-"))

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from openpyxl import Workbook

from excel2sql.schema.dataset import Table
from excel2sql.schema.type_mapper import ValueType


@pytest.fixture
def person_table() -> Table:
    return Table.from_records(
        "Person",
        [("Name", ValueType.TEXT), ("Age", ValueType.INT32)],
        [("Ann", 30), ("", None)],
    )


@pytest.fixture
def make_workbook(tmp_path):
    """Write {sheet_name: rows} to an .xlsx file and return its path."""

    def _make(sheets, name="input.xlsx"):
        wb = Workbook()
        wb.remove(wb.active)
        for title, rows in sheets.items():
            ws = wb.create_sheet(title)
            for row in rows:
                ws.append(list(row))
        path = tmp_path / name
        wb.save(path)
        return path

    return _make
