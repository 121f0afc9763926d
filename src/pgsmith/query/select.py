"""
SELECT statement builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from ..dialects.base import Dialect
from ..dialects.postgres import PostgresDialect
from ..errors import IncompleteStatementError, InvalidArgument, require_name
from .predicates import collect_expressions

JOIN_KINDS = ("INNER", "LEFT", "RIGHT", "OUTER", "FULL")
SORT_DIRECTIONS = ("ASC", "DESC")
# PostgreSQL has no bare OUTER JOIN.
JOIN_RENDERED_AS = {"OUTER": "FULL OUTER"}


@dataclass(frozen=True)
class Join:
    kind: str
    target: str
    predicate: str
    using: bool = True

    def render(self) -> str:
        linkage = f"USING ({self.predicate})" if self.using else f"ON ({self.predicate})"
        return f"{self.kind} JOIN {self.target} {linkage}"


class Select:
    """
    Renders ``SELECT`` statements.

    The source table, join targets and predicates are raw SQL fragments and
    are emitted as given, so catalog aliases such as ``pg_class AS c`` work.
    """

    def __init__(
        self,
        columns: str | Iterable[str] = "*",
        *,
        dialect: Dialect | None = None,
    ) -> None:
        self.dialect = dialect or PostgresDialect()
        self.columns: List[str] = []
        self.table: str | None = None
        self.joins: List[Join] = []
        self.filters: List[str] = []
        self.groups: List[str] = []
        self.sorts: List[str] = []
        self.offset: int | None = None
        self.length: int | None = None
        self.select(columns)

    def select(self, *columns: str | Iterable[str]) -> "Select":
        projection: List[str] = []
        for column in columns:
            projection.extend(collect_expressions(column, what="Column"))
        self.columns = projection or ["*"]
        return self

    def from_(self, table: str) -> "Select":
        self.table = require_name(table, what="Table")
        return self

    def join(self, kind: str, target: str, predicate: str, using: bool = True) -> "Select":
        if not isinstance(kind, str) or kind.upper() not in JOIN_KINDS:
            raise InvalidArgument(f"Join kind must be one of {', '.join(JOIN_KINDS)}, got {kind!r}.")
        require_name(target, what="Join target")
        require_name(predicate, what="Join predicate")
        kind = kind.upper()
        self.joins.append(Join(JOIN_RENDERED_AS.get(kind, kind), target, predicate, bool(using)))
        return self

    def inner_join(self, target: str, predicate: str, using: bool = True) -> "Select":
        return self.join("INNER", target, predicate, using)

    def left_join(self, target: str, predicate: str, using: bool = True) -> "Select":
        return self.join("LEFT", target, predicate, using)

    def right_join(self, target: str, predicate: str, using: bool = True) -> "Select":
        return self.join("RIGHT", target, predicate, using)

    def outer_join(self, target: str, predicate: str, using: bool = True) -> "Select":
        return self.join("OUTER", target, predicate, using)

    def where(self, predicate: str | Iterable[str]) -> "Select":
        self.filters.extend(collect_expressions(predicate, what="Predicate"))
        return self

    def group_by(self, expression: str | Iterable[str]) -> "Select":
        self.groups.extend(collect_expressions(expression, what="Group expression"))
        return self

    def sort_by(self, expression: str, direction: str = "ASC") -> "Select":
        require_name(expression, what="Sort expression")
        if not isinstance(direction, str) or direction.upper() not in SORT_DIRECTIONS:
            raise InvalidArgument(f"Sort direction must be ASC or DESC, got {direction!r}.")
        self.sorts.append(f"{expression} {direction.upper()}")
        return self

    def page(self, offset: int, length: int) -> "Select":
        self.offset = _non_negative(offset, what="offset")
        self.length = _non_negative(length, what="length")
        return self

    def limit(self, length: int) -> "Select":
        self.length = _non_negative(length, what="length")
        return self

    def render(self) -> str:
        if self.table is None:
            raise IncompleteStatementError("SELECT requires a source table.")
        parts: List[str] = [f"SELECT {', '.join(self.columns)}", f"FROM {self.table}"]
        parts.extend(join.render() for join in self.joins)
        if self.filters:
            parts.append("WHERE " + " AND ".join(self.filters))
        if self.groups:
            parts.append("GROUP BY " + ", ".join(self.groups))
        if self.sorts:
            parts.append("ORDER BY " + ", ".join(self.sorts))
        if self.offset is not None:
            parts.append(self.dialect.limit_clause(self.length, self.offset))
        return " ".join(parts) + ";"

    def __str__(self) -> str:
        return self.render()


def _non_negative(value: int, *, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidArgument(f"{what} must be a non-negative integer, got {value!r}.")
    return value
