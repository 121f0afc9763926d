"""
Catalog introspection queries for an existing table.

Each query joins ``pg_attribute`` to the table's ``pg_class`` row, to
``information_schema.columns`` and, through ``pg_index``, to the ``pg_class``
row of every index covering the column. The projected aliases
(``column_name``, ``data_type``, ``index_type`` ...) are what callers read.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..adapters.base import Executor, QueryError, Rows
from ..dialects.base import Dialect
from ..dialects.postgres import PostgresDialect
from ..errors import require_name
from ..query.select import Select
from ..utils import get_logger

COLUMN_FIELDS = (
    "columns.table_schema",
    "columns.column_name",
    "columns.ordinal_position",
    "columns.column_default",
    "columns.is_nullable",
    "columns.data_type",
    "columns.character_maximum_length",
    "columns.character_octet_length",
    "pg_class2.relname AS index_type",
)
INDEX_FIELDS = ("columns.column_name", "pg_class2.relname AS index_type")
PRIMARY_KEY_FIELDS = ("columns.column_name",)

PRIMARY = "PRIMARY"
UNIQUE = "UNIQUE"


def classify_index(index_name: Optional[str]) -> Optional[str]:
    """
    Map a backing index name to a key kind using PostgreSQL's naming convention.
    """

    if not index_name:
        return None
    if index_name.endswith("_pkey"):
        return PRIMARY
    if index_name.endswith("_key"):
        return UNIQUE
    return None


class CatalogInspector:
    """
    Builds and runs the catalog queries describing a table's columns and keys.
    """

    def __init__(self, executor: Executor, *, dialect: Dialect | None = None) -> None:
        self.executor = executor
        self.dialect = dialect or getattr(executor, "dialect", None) or PostgresDialect()
        self.logger = get_logger("catalog.inspector")

    # Query builders ---------------------------------------------------
    def columns_query(self, table: str, schema: str | None = None) -> Select:
        return self._catalog_select(COLUMN_FIELDS, table, schema, index_join="LEFT")

    def indexes_query(self, table: str, schema: str | None = None) -> Select:
        return self._catalog_select(INDEX_FIELDS, table, schema, index_join="INNER")

    def primary_key_query(self, table: str, schema: str | None = None) -> Select:
        query = self._catalog_select(PRIMARY_KEY_FIELDS, table, schema, index_join="INNER")
        return query.where(f"pg_class2.relname LIKE {self.dialect.quote_literal('%_pkey')}")

    def tables_query(self) -> Select:
        return (
            Select("tablename", dialect=self.dialect)
            .from_("pg_tables")
            .where(r"tablename NOT LIKE 'pg\_%'")
            .where(r"tablename NOT LIKE 'sql\_%'")
        )

    # Execution --------------------------------------------------------
    def list_columns(self, table: str, schema: str | None = None) -> List[Dict[str, Any]]:
        rows = self._run(self.columns_query(table, schema))
        columns: List[Dict[str, Any]] = []
        for row in rows:
            entry = dict(row)
            entry["key"] = classify_index(row.get("index_type"))
            columns.append(entry)
        return columns

    def list_indexes(self, table: str, schema: str | None = None) -> Rows:
        return self._run(self.indexes_query(table, schema))

    def list_primary_key(self, table: str, schema: str | None = None) -> Rows:
        return self._run(self.primary_key_query(table, schema))

    def list_tables(self) -> Rows:
        return self._run(self.tables_query())

    # Helpers ----------------------------------------------------------
    def _catalog_select(
        self,
        fields: tuple[str, ...],
        table: str,
        schema: str | None,
        *,
        index_join: str,
    ) -> Select:
        require_name(table, what="Table name")
        literal = self.dialect.quote_literal
        columns_link = (
            "columns.column_name = pg_attribute.attname "
            "AND columns.table_name = pg_class1.relname"
        )
        if schema is not None:
            require_name(schema, what="Schema name")
            columns_link += f" AND columns.table_schema = {literal(schema)}"
        return (
            Select(list(fields), dialect=self.dialect)
            .from_("pg_attribute")
            .inner_join(
                "pg_class AS pg_class1",
                f"pg_attribute.attrelid = pg_class1.oid AND pg_class1.relname = {literal(table)}",
                using=False,
            )
            .inner_join("information_schema.columns AS columns", columns_link, using=False)
            .join(
                index_join,
                "pg_index",
                "pg_class1.oid = pg_index.indrelid AND pg_attribute.attnum = ANY(pg_index.indkey)",
                using=False,
            )
            .join(
                index_join,
                "pg_class AS pg_class2",
                "pg_class2.oid = pg_index.indexrelid",
                using=False,
            )
        )

    def _run(self, query: Select) -> Rows:
        sql = query.render()
        self.logger.debug("Running catalog query", extra={"sql": sql})
        result = self.executor.execute(sql)
        if isinstance(result, int):
            raise QueryError("Catalog query returned no result set.", sql=sql)
        return result
