"""
Dialect strategy interface describing quoting and clause rendering.
"""

from __future__ import annotations

from typing import Any, Protocol


class Dialect(Protocol):
    """
    Strategy interface consumed by the statement builders and the catalog inspector.
    """

    @property
    def name(self) -> str: ...

    @property
    def param_style(self) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def quote_literal(self, value: str) -> str: ...

    def render_value(self, value: Any) -> str: ...

    def limit_clause(self, limit: int | None, offset: int | None) -> str: ...
