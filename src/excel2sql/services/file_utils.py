"""
File handling utilities around the conversion.

Validates the source workbook path and writes the generated SQL document.

Module Input:
    - Input workbook path
    - Output path and SQL text

Module Output:
    - Validation results
    - Written .sql file
"""

from pathlib import Path
from typing import Optional

from ..core.exceptions import OutputWriteFailure
from ..core.logging_config import get_logger

logger = get_logger(__name__)

WORKBOOK_EXTENSIONS = {".xlsx", ".xlsm", ".xls"}


def validate_input_file(path: Optional[Path]) -> bool:
    """
    Check that the input path points to an existing regular file.

    Args:
        path (Optional[Path]): Candidate input path

    Returns:
        bool: True if the file exists and is a file
    """
    if path is None or not str(path).strip():
        return False
    path = Path(path)
    if not path.is_file():
        logger.debug(f"Input file not found: {path}")
        return False
    if path.suffix.lower() not in WORKBOOK_EXTENSIONS:
        logger.warning(f"Unexpected workbook extension: {path.suffix}")
    return True


def write_sql(path: Path, sql: str, encoding: str = "utf-8") -> Path:
    """
    Write the SQL document in one go, replacing any existing file.

    Args:
        path (Path): Destination file
        sql (str): Complete SQL text
        encoding (str): Text encoding of the file

    Returns:
        Path: The path written

    Raises:
        OutputWriteFailure: If the destination cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=encoding, newline="") as fh:
            fh.write(sql)
    except (OSError, LookupError) as exc:
        raise OutputWriteFailure(
            f"Could not write output file: {path}",
            {"path": str(path), "error": str(exc)},
        ) from exc
    logger.info(f"Wrote {len(sql)} characters to {path}")
    return path
