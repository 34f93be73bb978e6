"""
Command-line interface for converting Excel workbooks to CREATE TABLE scripts.

Reads every worksheet of the input workbook, infers each column's SQL Server
type, nullability and size, and writes one CREATE TABLE statement per sheet
to the output file.

Both GNU-style options and the legacy slash switches are accepted.

Usage:
    excel2sql --input input-file.xlsx --output input-file.sql
    excel2sql /I input-file.xlsx /O input-file.sql /H /K /D sales
    excel2sql -i data.xlsx -o data.sql --headers --decimal --workers 4
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from excel2sql.core.settings import settings
from excel2sql.core.logging_config import get_logger, setup_root_logger
from excel2sql.core.exceptions import ConfigError, Excel2SqlError
from excel2sql.schema.ddl_builder import RenderOptions, render
from excel2sql.services.file_utils import validate_input_file, write_sql
from excel2sql.services.workbook_reader import read_workbook

logger = get_logger(__name__)

USAGE_EXIT_CODE = 2

# Legacy switches, matched case-insensitively
LEGACY_SWITCHES = {
    "/i": "--input",
    "/o": "--output",
    "/h": "--headers",
    "/k": "--identity",
    "/d": "--schema",
}


def translate_legacy_switches(argv: List[str]) -> List[str]:
    """Rewrite `/I x /O y /H` style switches to their long-option equivalents."""
    return [LEGACY_SWITCHES.get(arg.lower(), arg) for arg in argv]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser (legacy switches are translated beforehand)."""
    parser = argparse.ArgumentParser(
        prog="excel2sql",
        description="Generate SQL Server CREATE TABLE statements from an Excel workbook.",
        epilog="Example: excel2sql /I input-file.xlsx /O input-file.sql",
    )

    # Paths
    parser.add_argument(
        "-i", "--input",
        dest="input",
        type=Path,
        help="Workbook to read (.xlsx, .xlsm, .xls)"
    )
    parser.add_argument(
        "-o", "--output",
        dest="output",
        type=Path,
        help="SQL file to write"
    )

    # Conversion options
    parser.add_argument(
        "--headers",
        dest="headers",
        action="store_true",
        default=settings.first_row_headers,
        help="Include this if the first row contains headers"
    )
    parser.add_argument(
        "--identity",
        dest="identity",
        action="store_true",
        default=settings.include_identity_column,
        help="Include an integer identity column as primary key"
    )
    parser.add_argument(
        "-s", "--schema",
        dest="schema",
        default=None,
        help=f"Schema ({settings.default_schema} is used by default)"
    )
    parser.add_argument(
        "--decimal",
        action="store_true",
        default=settings.numbers_as_decimal,
        help="Read fractional numbers as exact decimals (decimal(p,s) columns)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.profile_workers,
        help=f"Threads used to profile columns (default: {settings.profile_workers})"
    )

    return parser


def convert(
    input_file: Path,
    output_file: Path,
    first_row_headers: bool = False,
    options: Optional[RenderOptions] = None,
    numbers_as_decimal: bool = False,
) -> str:
    """
    Run the full conversion: read workbook, render DDL, write output.

    Nothing is written unless every sheet renders successfully.

    Args:
        input_file (Path): Source workbook
        output_file (Path): Destination SQL file
        first_row_headers (bool): First row holds column names
        options (Optional[RenderOptions]): Schema / identity / worker options
        numbers_as_decimal (bool): Read fractional numbers as exact decimals

    Returns:
        str: The SQL text that was written

    Raises:
        InputUnreadable: If the workbook cannot be read
        UnsupportedColumnType: If a column type has no SQL mapping
        OutputWriteFailure: If the output cannot be written
    """
    options = options or RenderOptions(schema_name=settings.default_schema)
    tables = read_workbook(
        input_file,
        first_row_headers=first_row_headers,
        numbers_as_decimal=numbers_as_decimal,
    )
    sql = render(tables, options)
    write_sql(output_file, sql, encoding=settings.output_encoding)
    return sql


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the excel2sql console script.

    Args:
        argv (Optional[List[str]]): Arguments (defaults to sys.argv[1:])

    Returns:
        int: 0 on success, 1 on conversion failure, 2 on usage errors
    """
    setup_root_logger()

    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(translate_legacy_switches(list(argv)))

    if not args.input or not args.output or not validate_input_file(args.input):
        parser.print_help()
        return USAGE_EXIT_CODE

    schema = (args.schema or "").strip() or settings.default_schema

    try:
        if args.workers < 1:
            raise ConfigError("--workers must be at least 1", {"workers": args.workers})

        logger.info(
            f"Converting {args.input} -> {args.output} "
            f"(schema={schema}, headers={args.headers}, identity={args.identity})"
        )
        convert(
            args.input,
            args.output,
            first_row_headers=args.headers,
            options=RenderOptions(
                schema_name=schema,
                include_identity_column=args.identity,
                max_workers=args.workers,
            ),
            numbers_as_decimal=args.decimal,
        )
    except Excel2SqlError as e:
        logger.error(f"Conversion failed: {e.message}", extra={"details": e.details})
        print(e.message, file=sys.stderr)
        return 1

    print("File successfully created.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
