"""
PostgreSQL executor backed by psycopg.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

from ..dialects.postgres import PostgresDialect
from ..utils import get_logger, resolve_slow_query_ms, time_call
from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    ConnectionConfig,
    ExecutionResult,
    Params,
    QueryError,
    Rows,
)

_NAMED_PLACEHOLDER = re.compile(r"%\((\w+)\)s")


def _load_driver():
    try:
        import psycopg

        return psycopg
    except ImportError:
        return None


@dataclass
class PostgresConnectionState:
    connection: Any
    config: ConnectionConfig
    driver: Any


class PostgresAdapter:
    """
    Runs rendered statements on a single psycopg connection.
    """

    def __init__(self, slow_query_ms: int | None = None) -> None:
        self.dialect = PostgresDialect()
        self._state: PostgresConnectionState | None = None
        self.logger = get_logger("adapters.postgres")
        self.slow_query_ms = resolve_slow_query_ms(default=100, override=slow_query_ms)

    @property
    def connected(self) -> bool:
        return self._state is not None

    def connect(self, config: ConnectionConfig) -> Any:
        driver = _load_driver()
        if driver is None:
            raise AdapterConfigurationError("psycopg is required to use PostgresAdapter.")

        options = dict(config.options or {})
        if config.ssl:
            for key, value in config.ssl.options().items():
                options.setdefault(key, value)
        if config.timeout and "connect_timeout" not in options:
            options["connect_timeout"] = int(config.timeout)

        self.logger.info(
            "Connecting to PostgreSQL %s (autocommit=%s)",
            config.descriptive_label(),
            config.autocommit,
        )

        try:
            connection = driver.connect(config.connect_url(), **options)
        except Exception as exc:
            raise AdapterConnectionError(
                f"Failed to connect to PostgreSQL at {config.redacted_dsn()}."
            ) from exc
        connection.autocommit = bool(config.autocommit)

        self._state = PostgresConnectionState(connection, config, driver)
        return connection

    def close(self) -> None:
        if self._state:
            try:
                self._state.connection.close()
            finally:
                self._state = None

    def _ensure_connection(self):
        if not self._state:
            raise AdapterConnectionError("PostgresAdapter is not connected.")
        conn = self._state.connection
        if getattr(conn, "closed", False):
            self.logger.warning("PostgreSQL connection closed; reconnecting.")
            conn = self.connect(self._state.config)
        return conn

    def execute(self, sql: str, params: Params | None = None) -> ExecutionResult:
        connection = self._ensure_connection()
        driver_error = getattr(self._state.driver, "Error", Exception)
        if params:
            self._validate_params(sql, params)
        with connection.cursor() as cursor:
            try:
                with time_call(
                    "postgres.execute",
                    self.logger,
                    sql=sql,
                    params=self._redact(params or ()),
                    threshold_ms=self.slow_query_ms,
                ):
                    cursor.execute(sql, params or None)
            except driver_error as exc:
                raise QueryError(f"PostgreSQL rejected statement: {exc}", sql=sql) from exc
            if getattr(cursor, "description", None):
                return self._rows(cursor)
            return cursor.rowcount

    @staticmethod
    def _rows(cursor) -> Rows:
        columns = [col[0] for col in cursor.description]
        rows: Rows = []
        for row in cursor.fetchall():
            if hasattr(row, "keys"):
                rows.append(dict(row))
            else:
                rows.append({col: row[idx] for idx, col in enumerate(columns)})
        return rows

    @staticmethod
    def _redact_value(value: Any) -> Any:
        if isinstance(value, str) and any(
            token in value.lower() for token in ("password", "secret", "token")
        ):
            return "***"
        return value

    @classmethod
    def _redact(cls, params: Params) -> Params:
        if isinstance(params, Mapping):
            return {key: cls._redact_value(value) for key, value in params.items()}
        return [cls._redact_value(value) for value in params]

    @staticmethod
    def _count_placeholders(sql: str) -> int:
        count = 0
        idx = 0
        while idx < len(sql) - 1:
            if sql[idx] == "%" and sql[idx + 1] == "s":
                count += 1
                idx += 2
                continue
            if sql[idx] == "%" and sql[idx + 1] == "%":
                idx += 2
                continue
            idx += 1
        return count

    @staticmethod
    def _placeholder_names(sql: str) -> set[str]:
        return set(_NAMED_PLACEHOLDER.findall(sql.replace("%%", "")))

    def _validate_params(self, sql: str, params: Params) -> None:
        if isinstance(params, Mapping):
            missing = sorted(self._placeholder_names(sql) - set(params))
            if missing:
                raise QueryError(
                    f"Missing named parameters: {', '.join(missing)}.",
                    sql=sql,
                )
            return
        placeholder_count = self._count_placeholders(sql)
        if placeholder_count != len(params):
            raise QueryError(
                f"Parameter count mismatch: expected {placeholder_count}, received {len(params)}.",
                sql=sql,
            )
