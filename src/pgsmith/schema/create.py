"""
CREATE TABLE statement builder.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from ..dialects.base import Dialect
from ..dialects.postgres import PostgresDialect
from ..errors import IncompleteStatementError, InvalidArgument, require_name
from ..utils import get_logger
from .columns import ColumnSpec, render_column


class CreateTable:
    """
    Renders ``CREATE TABLE`` from a table name, ordered columns and primary keys.
    """

    def __init__(self, name: str | None = None, *, dialect: Dialect | None = None) -> None:
        self.dialect = dialect or PostgresDialect()
        self.name: str | None = None
        self.fields: Dict[str, ColumnSpec] = {}
        self.primary_keys: List[str] = []
        self.oids = False
        self.logger = get_logger("schema.create")
        if name is not None:
            self.set_name(name)

    def set_name(self, name: str) -> "CreateTable":
        self.name = require_name(name, what="Table name")
        return self

    def add_field(self, name: str, attributes: ColumnSpec | Mapping[str, Any]) -> "CreateTable":
        require_name(name, what="Column name")
        self.fields[name] = ColumnSpec.coerce(attributes)
        return self

    def set_fields(self, fields: Mapping[str, ColumnSpec | Mapping[str, Any]]) -> "CreateTable":
        if not isinstance(fields, Mapping):
            raise InvalidArgument(f"Fields must be a mapping, got {type(fields).__name__}.")
        replacement: Dict[str, ColumnSpec] = {}
        for name, attributes in fields.items():
            require_name(name, what="Column name")
            replacement[name] = ColumnSpec.coerce(attributes)
        self.fields = replacement
        return self

    def add_primary_key(self, name: str) -> "CreateTable":
        self.primary_keys.append(require_name(name, what="Primary key"))
        return self

    def set_primary_keys(self, names: Iterable[str]) -> "CreateTable":
        if isinstance(names, str):
            raise InvalidArgument("Primary keys must be a list of names, not a string.")
        self.primary_keys = [require_name(name, what="Primary key") for name in names]
        return self

    def with_oids(self, oids: bool) -> "CreateTable":
        if not isinstance(oids, bool):
            raise InvalidArgument(f"with_oids expects a bool, got {oids!r}.")
        self.oids = oids
        return self

    def render(self) -> str:
        if self.name is None:
            raise IncompleteStatementError("CREATE TABLE requires a table name.")
        table = self.dialect.format_table(self.name)
        body = [render_column(name, spec, self.dialect) for name, spec in self.fields.items()]
        if self.primary_keys:
            keys = ", ".join(self.dialect.quote_identifier(key) for key in self.primary_keys)
            body.append(f"PRIMARY KEY ({keys})")
        if not self.fields:
            self.logger.debug("CREATE TABLE %s rendered without columns", table)
        oids = "WITH OIDS" if self.oids else ""
        return f"CREATE TABLE {table} ({', '.join(body)}) {oids};"

    def __str__(self) -> str:
        return self.render()
