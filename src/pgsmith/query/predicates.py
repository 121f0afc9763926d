"""
Helpers for the raw SQL fragments accepted by the query builders.
"""

from __future__ import annotations

from typing import Iterable, List

from ..errors import InvalidArgument


def collect_expressions(value: str | Iterable[str], *, what: str) -> List[str]:
    """
    Accept one fragment or an iterable of fragments and return them as a list.
    """

    if isinstance(value, str):
        items = [value]
    else:
        try:
            items = list(value)
        except TypeError:
            raise InvalidArgument(
                f"{what} must be a string or a list of strings, got {type(value).__name__}."
            ) from None
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise InvalidArgument(f"{what} must be a non-empty string, got {item!r}.")
    return items
