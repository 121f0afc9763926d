"""
Error hierarchy for statement builders.
"""

from __future__ import annotations

from typing import Any


class PgSmithError(Exception):
    """Base error for pgsmith failures."""


class InvalidArgument(PgSmithError, TypeError):
    """
    Raised when a configuration method receives a value of the wrong type or shape.
    """


class IncompleteStatementError(PgSmithError, ValueError):
    """
    Raised when a statement is rendered before its required parts were configured.
    """


def require_name(value: Any, *, what: str = "name") -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgument(f"{what} must be a non-empty string, got {value!r}.")
    return value
