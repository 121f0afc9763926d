"""
Data manipulation statement builders.
"""

from .delete import Delete
from .insert import Insert
from .select import Join, Select
from .update import Update

__all__ = ["Delete", "Insert", "Join", "Select", "Update"]
