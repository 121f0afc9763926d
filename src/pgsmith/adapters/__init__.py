"""
Executor protocol and the psycopg-backed PostgreSQL adapter.
"""

from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    ConnectionConfig,
    ExecutionResult,
    Executor,
    Params,
    QueryError,
    Rows,
    SSLConfig,
)
from .postgres import PostgresAdapter

__all__ = [
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "AdapterError",
    "ConnectionConfig",
    "ExecutionResult",
    "Executor",
    "Params",
    "PostgresAdapter",
    "QueryError",
    "Rows",
    "SSLConfig",
]
