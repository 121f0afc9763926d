"""
Slow statement threshold resolution.
"""

from __future__ import annotations

import os

SLOW_QUERY_ENV = "PGSMITH_SLOW_QUERY_MS"


def resolve_slow_query_ms(*, default: int, override: int | None = None) -> int:
    """
    Pick the slow-statement threshold: explicit override, then environment, then default.
    """

    if override is not None:
        return int(override)
    raw = os.getenv(SLOW_QUERY_ENV)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{SLOW_QUERY_ENV} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{SLOW_QUERY_ENV} must be non-negative, got {value}")
    return value
