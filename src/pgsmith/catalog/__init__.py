"""
System catalog introspection.
"""

from .inspector import PRIMARY, UNIQUE, CatalogInspector, classify_index

__all__ = ["CatalogInspector", "PRIMARY", "UNIQUE", "classify_index"]
