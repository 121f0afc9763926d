"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Final

from ..errors import InvalidArgument
from .base import Dialect

SCALAR_TYPES = (str, int, float, Decimal)


class PostgresDialect:
    """
    PostgreSQL quoting rules shared by every builder.
    """

    name: Final[str] = "postgresql"
    param_style: Final[str] = "pyformat"

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(table)}"
        return self.quote_identifier(table_name)

    def quote_literal(self, value: str) -> str:
        escaped = value.replace("'", "''")
        return f"'{escaped}'"

    def render_value(self, value: Any) -> str:
        """
        Render a value for a VALUES or SET list.

        Strings are emitted as given: callers quote them with ``quote_literal``
        before handing them over.
        """

        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, SCALAR_TYPES):
            return str(value)
        raise InvalidArgument(f"Value must be a scalar or None, got {type(value).__name__}.")

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)


def get_postgres_dialect() -> Dialect:
    return PostgresDialect()
