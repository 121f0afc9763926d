"""
UPDATE statement builder.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..dialects.base import Dialect
from ..dialects.postgres import PostgresDialect
from ..errors import IncompleteStatementError, require_name
from ..utils import get_logger
from .predicates import collect_expressions


class Update:
    """
    Renders ``UPDATE ... SET ... WHERE``; values follow the same rules as ``Insert``.
    """

    def __init__(self, table: str | None = None, *, dialect: Dialect | None = None) -> None:
        self.dialect = dialect or PostgresDialect()
        self.table: str | None = None
        self.assignments: Dict[str, str] = {}
        self.filters: List[str] = []
        self.logger = get_logger("query.update")
        if table is not None:
            self.set_table(table)

    def set_table(self, table: str) -> "Update":
        self.table = require_name(table, what="Table name")
        return self

    def set(self, key: str, value: Any) -> "Update":
        require_name(key, what="Column name")
        self.assignments[key] = self.dialect.render_value(value)
        return self

    def where(self, predicate: str | Iterable[str]) -> "Update":
        self.filters.extend(collect_expressions(predicate, what="Predicate"))
        return self

    def render(self) -> str:
        if self.table is None:
            raise IncompleteStatementError("UPDATE requires a table name.")
        if not self.assignments:
            raise IncompleteStatementError("UPDATE requires at least one assignment.")
        table = self.dialect.format_table(self.table)
        assignments = ", ".join(
            f"{self.dialect.quote_identifier(key)} = {value}"
            for key, value in self.assignments.items()
        )
        if not self.filters:
            self.logger.warning(
                "UPDATE on %s has no predicates and touches every row.", table
            )
            return f"UPDATE {table} SET {assignments};"
        return f"UPDATE {table} SET {assignments} WHERE {' AND '.join(self.filters)};"

    def __str__(self) -> str:
        return self.render()
