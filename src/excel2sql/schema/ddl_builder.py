"""
Render T-SQL CREATE TABLE statements from profiled tables.

Module Input:
    - Ordered tables (from a workbook or built in memory)
    - Render options (schema name, identity column, profiling workers)

Module Output:
    - One CREATE TABLE statement per table, concatenated without separators
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from excel2sql.core.logging_config import get_logger
from excel2sql.schema.column_profiler import ColumnDecision, profile_table
from excel2sql.schema.dataset import Column, Table

logger = get_logger(__name__)

IDENTITY_COLUMN_SQL = "[Id] [int] IDENTITY(1,1) NOT NULL"

PRIMARY_KEY_SQL = (
    "CONSTRAINT [PK_{table}] PRIMARY KEY CLUSTERED ( [Id] ASC ) WITH "
    "(PAD_INDEX = OFF, STATISTICS_NORECOMPUTE = OFF, IGNORE_DUP_KEY = OFF, "
    "ALLOW_ROW_LOCKS = ON, ALLOW_PAGE_LOCKS = ON) ON [PRIMARY] ) ON [PRIMARY]"
)


def quote_name(name: str) -> str:
    """Bracket-quote an identifier, doubling any closing bracket."""
    return "[" + str(name).replace("]", "]]") + "]"


@dataclass(frozen=True)
class RenderOptions:
    schema_name: str = "dbo"
    include_identity_column: bool = False
    max_workers: int = 1


def column_sql(column: Column, decision: ColumnDecision) -> str:
    """Format one column definition, e.g. `[Name] nvarchar(255) NULL`."""
    sql = f"{quote_name(column.name)} {decision.sql_type}"
    return f"{sql} NULL" if decision.nullable else sql


def table_sql(
    table: Table,
    decisions: Sequence[ColumnDecision],
    options: RenderOptions,
) -> str:
    """
    Build the CREATE TABLE statement for one already-profiled table.

    Args:
        table (Table): Table being declared
        decisions (Sequence[ColumnDecision]): Decisions in ordinal order
        options (RenderOptions): Schema and identity settings

    Returns:
        str: Complete statement, without a terminating semicolon

    Example Output:
        CREATE TABLE [dbo].[Person] ([Name] nvarchar(255) NULL,[Age] int NULL)
    """
    parts: List[str] = []
    if options.include_identity_column:
        parts.append(IDENTITY_COLUMN_SQL)
    parts.extend(column_sql(c, d) for c, d in zip(table.ordered_columns, decisions))

    head = f"CREATE TABLE {quote_name(options.schema_name)}.{quote_name(table.name)} ("
    if not options.include_identity_column:
        return head + ",".join(parts) + ")"
    parts.append(PRIMARY_KEY_SQL.format(table=table.name.replace("]", "]]")))
    return head + ",".join(parts)


def render(tables: Iterable[Table], options: RenderOptions | None = None) -> str:
    """
    Render CREATE TABLE statements for every table, in input order.

    All tables are profiled before any text is produced, so an unsupported
    column type anywhere aborts the whole render with nothing returned.

    Args:
        tables (Iterable[Table]): Tables in output order
        options (RenderOptions | None): Render options (defaults: dbo, no identity)

    Returns:
        str: Concatenated statements with no separators between them

    Raises:
        UnsupportedColumnType: If any column's value type has no SQL mapping
    """
    options = options or RenderOptions()
    tables = list(tables)

    profiled = [(t, profile_table(t, options.max_workers)) for t in tables]

    buf = io.StringIO()
    for table, decisions in profiled:
        buf.write(table_sql(table, decisions, options))
        logger.info(
            "Rendered [%s].[%s] with %d column(s)",
            options.schema_name, table.name, len(decisions),
        )
    return buf.getvalue()
