"""
Database facade handing out statement builders and running them through an executor.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, Union

from .adapters.base import ConnectionConfig, ExecutionResult, Executor, Params, Rows
from .adapters.postgres import PostgresAdapter
from .catalog import CatalogInspector
from .dialects.base import Dialect
from .dialects.postgres import PostgresDialect
from .errors import InvalidArgument
from .query import Delete, Insert, Select, Update
from .schema import AlterTable, CreateTable, Utility
from .utils import get_logger


class Renderable(Protocol):
    def render(self) -> str: ...


Statement = Union[str, Renderable]


class Database:
    """
    Entry point pairing the builders with an executor.

    ``Database(dsn="postgresql://...")`` connects a ``PostgresAdapter``; any
    object implementing ``Executor`` can be passed instead.
    """

    def __init__(
        self,
        executor: Optional[Executor] = None,
        *,
        dsn: Optional[str] = None,
        connection_config: Optional[ConnectionConfig] = None,
    ) -> None:
        if dsn is not None and connection_config is not None:
            raise ValueError("Provide either dsn or connection_config, not both.")
        if dsn is not None:
            connection_config = ConnectionConfig.from_dsn(dsn)
        if executor is None:
            if connection_config is None:
                raise ValueError("Database requires an executor, a dsn or a connection_config.")
            executor = PostgresAdapter()
        if connection_config is not None:
            connect = getattr(executor, "connect", None)
            if connect is None:
                raise ValueError("Executor does not accept a connection configuration.")
            connect(connection_config)
        self.executor = executor
        self.connection_config = connection_config
        self.dialect: Dialect = getattr(executor, "dialect", None) or PostgresDialect()
        self.inspector = CatalogInspector(executor, dialect=self.dialect)
        self.logger = get_logger("database")

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "Database":
        return cls(connection_config=ConnectionConfig.from_env(env_var, **kwargs))

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self.executor, "close", None)
        if close is not None:
            close()

    # Builders ---------------------------------------------------------
    def create(self, name: str | None = None) -> CreateTable:
        return CreateTable(name, dialect=self.dialect)

    def alter(self, name: str | None = None) -> AlterTable:
        return AlterTable(name, dialect=self.dialect)

    def select(self, columns: str | Iterable[str] = "*") -> Select:
        return Select(columns, dialect=self.dialect)

    def insert(self, table: str | None = None) -> Insert:
        return Insert(table, dialect=self.dialect)

    def update(self, table: str | None = None) -> Update:
        return Update(table, dialect=self.dialect)

    def delete(self, table: str | None = None) -> Delete:
        return Delete(table, dialect=self.dialect)

    def utility(self) -> Utility:
        return Utility(dialect=self.dialect)

    # Execution --------------------------------------------------------
    def query(self, statement: Statement, params: Params | None = None) -> ExecutionResult:
        """
        Run a SQL string or anything exposing ``render()``.
        """

        if isinstance(statement, str):
            sql = statement
        elif hasattr(statement, "render"):
            sql = statement.render()
        else:
            raise InvalidArgument(
                f"query expects a SQL string or a builder, got {type(statement).__name__}."
            )
        return self.executor.execute(sql, params)

    def set_schema(self, *schemas: str) -> "Database":
        self.query(self.utility().set_schema(*schemas))
        self.logger.info("search_path set to %s", ",".join(schemas))
        return self

    # Introspection ----------------------------------------------------
    def list_columns(self, table: str, schema: str | None = None) -> Rows:
        return self.inspector.list_columns(table, schema)

    def list_indexes(self, table: str, schema: str | None = None) -> Rows:
        return self.inspector.list_indexes(table, schema)

    def list_primary_key(self, table: str, schema: str | None = None) -> Rows:
        return self.inspector.list_primary_key(table, schema)

    def list_tables(self) -> Rows:
        return self.inspector.list_tables()
