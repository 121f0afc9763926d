"""
Executor protocol, adapter errors and connection configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Protocol, Sequence, Union

from ..dialects.base import Dialect
from ..security.dsns import DSNConfig, parse_dsn

Rows = List[Dict[str, Any]]
ExecutionResult = Union[Rows, int]
Params = Union[Sequence[Any], Mapping[str, Any]]


class AdapterError(RuntimeError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Raised when configuration or required dependencies are invalid."""


class AdapterConnectionError(AdapterError):
    """Raised when establishing or using a connection fails."""


class QueryError(AdapterError):
    """Raised when the server rejects a statement or parameters do not match."""

    def __init__(self, message: str, *, sql: str | None = None) -> None:
        super().__init__(message)
        self.sql = sql


@dataclass
class SSLConfig:
    mode: str | None = None
    rootcert: str | None = None
    cert: str | None = None
    key: str | None = None

    def options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.mode:
            options["sslmode"] = self.mode
        if self.rootcert:
            options["sslrootcert"] = self.rootcert
        if self.cert:
            options["sslcert"] = self.cert
        if self.key:
            options["sslkey"] = self.key
        return options


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_SSL_KEYS = {"sslmode": "mode", "sslrootcert": "rootcert", "sslcert": "cert", "sslkey": "key"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise AdapterConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_number(value: str, *, key: str, cast: type) -> Any:
    try:
        return cast(value)
    except ValueError as exc:
        raise AdapterConfigurationError(
            f"Invalid {cast.__name__} value for '{key}': {value!r}"
        ) from exc


def _parse_ssl(query: dict[str, str]) -> SSLConfig | None:
    found = {attr: query.pop(key) for key, attr in _SSL_KEYS.items() if key in query}
    if not found:
        return None
    return SSLConfig(**found)


@dataclass
class ConnectionConfig:
    """
    Normalized connection configuration for the PostgreSQL adapter.

    Statements run in autocommit mode unless the DSN or caller says otherwise;
    the builders do not manage transactions.
    """

    url: str
    autocommit: bool = True
    timeout: float | None = None
    options: dict[str, Any] | None = None
    ssl: SSLConfig | None = None
    dsn: DSNConfig | None = None
    source: str | None = None

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a connection config by parsing the DSN string.
        """

        parsed = parse_dsn(dsn)
        if not parsed.is_postgres:
            raise AdapterConfigurationError(
                f"Unsupported DSN scheme '{parsed.driver}'; expected postgresql://"
            )
        query = dict(parsed.query)

        parsed_autocommit = None
        if "autocommit" in query:
            parsed_autocommit = _parse_bool(query.pop("autocommit"), key="autocommit")
        parsed_timeout = None
        if "timeout" in query:
            parsed_timeout = _parse_number(query.pop("timeout"), key="timeout", cast=float)
        parsed_ssl = _parse_ssl(query)
        if "connect_timeout" in query:
            query["connect_timeout"] = _parse_number(
                query["connect_timeout"], key="connect_timeout", cast=int
            )

        options: dict[str, Any] = dict(query)
        options.update(kwargs.pop("options", None) or {})

        autocommit = kwargs.pop("autocommit", parsed_autocommit)
        if autocommit is None:
            autocommit = True

        return cls(
            url=dsn,
            dsn=parsed,
            autocommit=autocommit,
            timeout=kwargs.pop("timeout", parsed_timeout),
            options=options or None,
            ssl=kwargs.pop("ssl", parsed_ssl),
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from an environment variable containing a DSN.
        """

        value = os.getenv(env_var)
        if not value:
            raise AdapterConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_dsn(value, source=env_var, **kwargs)

    def connect_url(self) -> str:
        """
        DSN handed to the driver, without the options consumed here.
        """

        if self.dsn is None:
            return self.url
        return self.url.split("?", 1)[0]

    def redacted_dsn(self) -> str:
        if self.dsn:
            return self.dsn.redacted()
        return self.url

    def descriptive_label(self) -> str:
        redacted = self.redacted_dsn()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted


class Executor(Protocol):
    """
    Anything able to run a rendered statement.

    ``execute`` returns rows as dictionaries for statements producing a result
    set and the affected row count otherwise.
    """

    dialect: Dialect

    def execute(self, sql: str, params: Params | None = None) -> ExecutionResult: ...
