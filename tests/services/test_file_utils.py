"""
Test cases for input validation and SQL output writing.
"""

import pytest

from excel2sql.core.exceptions import OutputWriteFailure
from excel2sql.services.file_utils import validate_input_file, write_sql


def test_validate_input_file(tmp_path):
    existing = tmp_path / "data.xlsx"
    existing.write_bytes(b"")

    assert validate_input_file(existing)
    assert not validate_input_file(tmp_path / "missing.xlsx")
    assert not validate_input_file(tmp_path)
    assert not validate_input_file(None)


def test_write_sql_creates_parents_and_overwrites(tmp_path):
    target = tmp_path / "out" / "schema.sql"
    write_sql(target, "CREATE TABLE [dbo].[A] ([X] int)")
    write_sql(target, "CREATE TABLE [dbo].[B] ([Y] int)")

    assert target.read_text(encoding="utf-8") == "CREATE TABLE [dbo].[B] ([Y] int)"


def test_write_sql_keeps_unicode(tmp_path):
    target = tmp_path / "unicode.sql"
    write_sql(target, "CREATE TABLE [dbo].[Café] ([Größe] int)")
    assert target.read_text(encoding="utf-8") == "CREATE TABLE [dbo].[Café] ([Größe] int)"


def test_write_sql_to_directory_fails(tmp_path):
    with pytest.raises(OutputWriteFailure) as exc_info:
        write_sql(tmp_path, "CREATE TABLE [dbo].[A] ([X] int)")
    assert exc_info.value.details["path"] == str(tmp_path)
