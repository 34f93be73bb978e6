"""
In-memory tabular dataset consumed by the schema inference engine.

A dataset is an ordered list of Table objects. Each table exposes its
columns (name, ordinal, declared value type) and its rows, one cell per
column. The engine only reads these structures, never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence, Tuple

from .type_mapper import ValueType


@dataclass(frozen=True)
class Column:
    name: str
    ordinal: int
    value_type: ValueType


@dataclass(frozen=True)
class Table:
    """
    A named table with ordered columns and rows.

    Attributes:
        name (str): Table name (a worksheet name when read from a workbook)
        columns (Tuple[Column, ...]): Column definitions
        rows (Tuple[Tuple[Any, ...], ...]): Row cells, positionally aligned
            with column ordinals
    """
    name: str
    columns: Tuple[Column, ...] = field(default_factory=tuple)
    rows: Tuple[Tuple[Any, ...], ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence but store tuples so the table stays read-only
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(tuple(r) for r in self.rows))

    @property
    def ordered_columns(self) -> Tuple[Column, ...]:
        return tuple(sorted(self.columns, key=lambda c: c.ordinal))

    def column_values(self, column: Column) -> Iterator[Any]:
        """Yield the column's cells in row order (missing trailing cells read as None)."""
        for row in self.rows:
            yield row[column.ordinal] if column.ordinal < len(row) else None

    @classmethod
    def from_records(
        cls,
        name: str,
        columns: Sequence[Tuple[str, ValueType]],
        rows: Sequence[Sequence[Any]] = (),
    ) -> "Table":
        """Build a table from (name, value_type) pairs, assigning ordinals in order."""
        cols = tuple(Column(col_name, i, vtype) for i, (col_name, vtype) in enumerate(columns))
        return cls(name=name, columns=cols, rows=tuple(tuple(r) for r in rows))
