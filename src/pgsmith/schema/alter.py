"""
ALTER TABLE statement builder.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..dialects.base import Dialect
from ..dialects.postgres import PostgresDialect
from ..errors import IncompleteStatementError, require_name
from .columns import ColumnSpec, render_column

CLAUSE_SEPARATOR = ", \n"


class AlterTable:
    """
    Renders ``ALTER TABLE`` from column and primary key change lists.

    Clauses are emitted in a fixed order: dropped columns, added columns,
    changed columns, dropped primary keys, then one ``ADD PRIMARY KEY``.
    """

    def __init__(self, name: str | None = None, *, dialect: Dialect | None = None) -> None:
        self.dialect = dialect or PostgresDialect()
        self.name: str | None = None
        self.add_fields: Dict[str, ColumnSpec] = {}
        self.change_fields: Dict[str, ColumnSpec] = {}
        self.remove_fields: List[str] = []
        self.add_primary_keys: List[str] = []
        self.remove_primary_keys: List[str] = []
        if name is not None:
            self.set_name(name)

    def set_name(self, name: str) -> "AlterTable":
        self.name = require_name(name, what="Table name")
        return self

    def add_field(self, name: str, attributes: ColumnSpec | Mapping[str, Any]) -> "AlterTable":
        require_name(name, what="Column name")
        self.add_fields[name] = ColumnSpec.coerce(attributes)
        return self

    def change_field(self, name: str, attributes: ColumnSpec | Mapping[str, Any]) -> "AlterTable":
        require_name(name, what="Column name")
        self.change_fields[name] = ColumnSpec.coerce(attributes)
        return self

    def remove_field(self, name: str) -> "AlterTable":
        self.remove_fields.append(require_name(name, what="Column name"))
        return self

    def add_primary_key(self, name: str) -> "AlterTable":
        self.add_primary_keys.append(require_name(name, what="Primary key"))
        return self

    def remove_primary_key(self, name: str) -> "AlterTable":
        self.remove_primary_keys.append(require_name(name, what="Primary key"))
        return self

    def render(self) -> str:
        if self.name is None:
            raise IncompleteStatementError("ALTER TABLE requires a table name.")
        quote = self.dialect.quote_identifier
        clauses: List[str] = [f"DROP COLUMN {quote(name)}" for name in self.remove_fields]
        clauses.extend(
            render_column(name, spec, self.dialect, prefix="ADD ")
            for name, spec in self.add_fields.items()
        )
        for name, spec in self.change_fields.items():
            if spec.rename:
                prefix = f"CHANGE {quote(name)} "
                clauses.append(render_column(spec.rename, spec, self.dialect, prefix=prefix))
            else:
                clauses.append(render_column(name, spec, self.dialect, prefix="ALTER COLUMN "))
        clauses.extend(f"DROP PRIMARY KEY {quote(key)}" for key in self.remove_primary_keys)
        if self.add_primary_keys:
            keys = ", ".join(quote(key) for key in self.add_primary_keys)
            clauses.append(f"ADD PRIMARY KEY ({keys})")
        table = self.dialect.format_table(self.name)
        return f"ALTER TABLE {table} {CLAUSE_SEPARATOR.join(clauses)};"

    def __str__(self) -> str:
        return self.render()
