"""
Dialect strategy registry.
"""

from .base import Dialect
from .postgres import PostgresDialect, get_postgres_dialect

__all__ = ["Dialect", "PostgresDialect", "get_postgres_dialect"]
