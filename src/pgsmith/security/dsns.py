"""DSN parsing and redaction utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlparse

POSTGRES_SCHEMES = ("postgres", "postgresql")

REDACTED_VALUE = "***"

_SENSITIVE_QUERY_KEYS = ("password", "passfile", "sslkey", "sslpassword")


@dataclass
class DSNConfig:
    driver: str
    username: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[int]
    database: Optional[str]
    path: str
    query: dict[str, str]

    @property
    def is_postgres(self) -> bool:
        return self.driver.split("+", 1)[0] in POSTGRES_SCHEMES

    def redacted(self) -> str:
        """
        Return the DSN with credentials and secret query options masked.
        """

        netloc = ""
        if self.username:
            netloc += self.username
            if self.password:
                netloc += f":{REDACTED_VALUE}"
            netloc += "@"
        if self.host:
            netloc += self.host
        if self.port:
            netloc += f":{self.port}"

        query = {
            key: REDACTED_VALUE if key.lower() in _SENSITIVE_QUERY_KEYS else value
            for key, value in self.query.items()
        }
        query_string = urlencode(query, safe="*/") if query else ""

        result = f"{self.driver}://"
        if netloc:
            result += netloc
        result += self.path or ""
        if query_string:
            result += f"?{query_string}"
        return result


def parse_dsn(dsn: str) -> DSNConfig:
    parsed = urlparse(dsn)
    query = {k: v[0] for k, v in parse_qs(parsed.query).items()}
    return DSNConfig(
        driver=parsed.scheme,
        username=parsed.username,
        password=parsed.password,
        host=parsed.hostname,
        port=parsed.port,
        database=parsed.path.lstrip("/") or None,
        path=parsed.path or "",
        query=query,
    )
