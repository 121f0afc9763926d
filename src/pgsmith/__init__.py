"""
pgsmith public package initialization.

Builders render PostgreSQL statements as plain strings; ``Database`` runs them
through a psycopg-backed executor and exposes catalog introspection.
"""

from .adapters import (  # noqa: F401
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    ConnectionConfig,
    PostgresAdapter,
    QueryError,
)
from .catalog import CatalogInspector  # noqa: F401
from .database import Database  # noqa: F401
from .dialects import PostgresDialect  # noqa: F401
from .errors import IncompleteStatementError, InvalidArgument, PgSmithError  # noqa: F401
from .query import Delete, Insert, Select, Update  # noqa: F401
from .schema import AlterTable, ColumnSpec, CreateTable, Utility  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "AdapterError",
    "AlterTable",
    "CatalogInspector",
    "ColumnSpec",
    "ConnectionConfig",
    "CreateTable",
    "Database",
    "Delete",
    "IncompleteStatementError",
    "Insert",
    "InvalidArgument",
    "PgSmithError",
    "PostgresAdapter",
    "PostgresDialect",
    "QueryError",
    "Select",
    "Update",
    "Utility",
]
