"""
Utility helpers shared across pgsmith packages.
"""

from .logging import abbreviate_sql, configure_logging, get_logger, time_call
from .performance import resolve_slow_query_ms

__all__ = [
    "abbreviate_sql",
    "configure_logging",
    "get_logger",
    "resolve_slow_query_ms",
    "time_call",
]
