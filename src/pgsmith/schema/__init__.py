"""
Schema definition statement builders.
"""

from .alter import AlterTable
from .columns import ColumnSpec
from .create import CreateTable
from .utility import Utility

__all__ = ["AlterTable", "ColumnSpec", "CreateTable", "Utility"]
