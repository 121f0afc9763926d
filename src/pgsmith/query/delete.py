"""
DELETE statement builder.
"""

from __future__ import annotations

from typing import Iterable, List

from ..dialects.base import Dialect
from ..dialects.postgres import PostgresDialect
from ..errors import IncompleteStatementError, require_name
from ..utils import get_logger
from .predicates import collect_expressions


class Delete:
    """
    Renders ``DELETE FROM`` with AND-combined predicates.
    """

    def __init__(self, table: str | None = None, *, dialect: Dialect | None = None) -> None:
        self.dialect = dialect or PostgresDialect()
        self.table: str | None = None
        self.filters: List[str] = []
        self.logger = get_logger("query.delete")
        if table is not None:
            self.set_table(table)

    def set_table(self, table: str) -> "Delete":
        self.table = require_name(table, what="Table name")
        return self

    def where(self, predicate: str | Iterable[str]) -> "Delete":
        self.filters.extend(collect_expressions(predicate, what="Predicate"))
        return self

    def render(self) -> str:
        if self.table is None:
            raise IncompleteStatementError("DELETE requires a table name.")
        table = self.dialect.format_table(self.table)
        if not self.filters:
            self.logger.warning(
                "DELETE on %s has no predicates and removes every row.", table
            )
            return f"DELETE FROM {table};"
        return f"DELETE FROM {table} WHERE {' AND '.join(self.filters)};"

    def __str__(self) -> str:
        return self.render()
