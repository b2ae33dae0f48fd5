"""
Scheme Catalog Module.

Static lookup of raw label spellings to schemes and canonical labels,
plus the fixed level order and colour palette of each scheme.
"""

from functools import lru_cache

from gradechart.catalog.entries import OUT_OF_SCHEME_COLOUR, UNKNOWN_COLOUR
from gradechart.catalog.lookup import SchemeCatalog


@lru_cache()
def get_catalog() -> SchemeCatalog:
    """
    Get the shared catalog instance.

    Uses LRU cache so the index is only built once per process.
    """
    return SchemeCatalog()


__all__ = [
    "OUT_OF_SCHEME_COLOUR",
    "UNKNOWN_COLOUR",
    "SchemeCatalog",
    "get_catalog",
]
