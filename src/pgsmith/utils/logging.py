"""Structured logging helpers for pgsmith."""

from __future__ import annotations

import logging
import os
import time
import uuid
from contextvars import ContextVar
from typing import Any, Iterable, Optional

LOG_LEVEL_ENV = "PGSMITH_LOG_LEVEL"

_correlation_id: ContextVar[str | None] = ContextVar("pgsmith_correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def _level_from_env(default: int) -> int:
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger("pgsmith")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(_level_from_env(level))


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"pgsmith.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    token = value or str(uuid.uuid4())
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = set_correlation_id()
    return cid


def abbreviate_sql(sql: str, max_length: int = 120) -> str:
    """
    Collapse whitespace and cut long statements for single-line log output.
    """

    flat = " ".join(sql.split())
    if len(flat) <= max_length:
        return flat
    return flat[: max_length - 3] + "..."


def time_call(
    name: str,
    logger: logging.Logger,
    *,
    sql: str | None = None,
    params: Iterable[Any] | None = None,
    threshold_ms: int = 100,
):
    start = time.monotonic()

    class Timer:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            elapsed_ms = (time.monotonic() - start) * 1000
            level = logging.WARNING if elapsed_ms >= threshold_ms else logging.DEBUG
            extra = {"sql": sql, "params": params, "elapsed_ms": elapsed_ms}
            if sql:
                logger.log(
                    level,
                    "%s took %.2fms: %s",
                    name,
                    elapsed_ms,
                    abbreviate_sql(sql),
                    extra=extra,
                )
            else:
                logger.log(level, "%s took %.2fms", name, elapsed_ms, extra=extra)

    return Timer()
