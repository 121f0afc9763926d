"""
Single-statement administrative commands.
"""

from __future__ import annotations

from ..dialects.base import Dialect
from ..dialects.postgres import PostgresDialect
from ..errors import IncompleteStatementError, InvalidArgument, require_name
from ..utils import get_logger


class Utility:
    """
    Holds one administrative statement; each command replaces the previous one.
    """

    def __init__(self, *, dialect: Dialect | None = None) -> None:
        self.dialect = dialect or PostgresDialect()
        self.statement: str | None = None
        self.logger = get_logger("schema.utility")

    def drop_table(self, table: str) -> "Utility":
        name = self.dialect.format_table(require_name(table, what="Table name"))
        self.logger.warning(
            "DROP TABLE generated for %s; confirm destructive statement before executing.",
            name,
        )
        self.statement = f"DROP TABLE {name}"
        return self

    def truncate(self, table: str) -> "Utility":
        name = self.dialect.format_table(require_name(table, what="Table name"))
        self.logger.warning(
            "TRUNCATE generated for %s; confirm destructive statement before executing.",
            name,
        )
        self.statement = f"TRUNCATE {name}"
        return self

    def rename_table(self, table: str, new_name: str) -> "Utility":
        old = self.dialect.format_table(require_name(table, what="Table name"))
        new = self.dialect.format_table(require_name(new_name, what="New table name"))
        self.statement = f"RENAME TABLE {old} TO {new}"
        return self

    def set_schema(self, *schemas: str) -> "Utility":
        if not schemas:
            raise InvalidArgument("set_schema requires at least one schema name.")
        for schema in schemas:
            require_name(schema, what="Schema name")
        self.statement = f"SET search_path TO {','.join(schemas)}"
        return self

    def render(self) -> str:
        if self.statement is None:
            raise IncompleteStatementError("No utility statement has been built.")
        return f"{self.statement};"

    def __str__(self) -> str:
        return self.render()
