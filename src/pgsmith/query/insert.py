"""
INSERT statement builder.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..dialects.base import Dialect
from ..dialects.postgres import PostgresDialect
from ..errors import IncompleteStatementError, InvalidArgument, require_name

ROW_SEPARATOR = ", \n"
MISSING_VALUE = "DEFAULT"


class Insert:
    """
    Renders single or multi-row ``INSERT`` statements.

    Values are rendered with ``Dialect.render_value``: ``None`` becomes
    ``NULL``, booleans become ``TRUE``/``FALSE`` and every other scalar is
    emitted unquoted. Quote and escape string values (``quote_literal``)
    before passing them to ``set``.

    Setting a key twice in the same row overwrites the earlier value, and a
    key missing from a row renders as ``DEFAULT`` so every row lines up with
    the column list.
    """

    def __init__(self, table: str | None = None, *, dialect: Dialect | None = None) -> None:
        self.dialect = dialect or PostgresDialect()
        self.table: str | None = None
        self.keys: List[str] = []
        self.rows: Dict[int, Dict[str, str]] = {}
        if table is not None:
            self.set_table(table)

    def set_table(self, table: str) -> "Insert":
        self.table = require_name(table, what="Table name")
        return self

    def set(self, key: str, value: Any, row: int = 0) -> "Insert":
        require_name(key, what="Column name")
        if not isinstance(row, int) or isinstance(row, bool):
            raise InvalidArgument(f"Row index must be an integer, got {row!r}.")
        rendered = self.dialect.render_value(value)
        if key not in self.keys:
            self.keys.append(key)
        self.rows.setdefault(row, {})[key] = rendered
        return self

    def render(self) -> str:
        if self.table is None:
            raise IncompleteStatementError("INSERT requires a table name.")
        if not self.keys:
            raise IncompleteStatementError("INSERT requires at least one value.")
        columns = ", ".join(self.dialect.quote_identifier(key) for key in self.keys)
        values = ROW_SEPARATOR.join(
            "(" + ", ".join(row.get(key, MISSING_VALUE) for key in self.keys) + ")"
            for row in self.rows.values()
        )
        table = self.dialect.format_table(self.table)
        return f"INSERT INTO {table} ({columns}) VALUES {values};"

    def __str__(self) -> str:
        return self.render()
