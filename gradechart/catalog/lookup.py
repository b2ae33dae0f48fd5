"""
Scheme catalog lookup.

Wraps the static catalog rows in a read-only, multi-valued index:
one raw value can map to entries in several schemes.
"""

from collections import defaultdict
from types import MappingProxyType
from typing import ClassVar

from gradechart.catalog.entries import (
    CATALOG_ROWS,
    DERIVED_SCHEMES,
    SCHEME_COLOURS,
    SCHEME_LEVELS,
)
from gradechart.models import CatalogEntry, SchemeId


class SchemeCatalog:
    """
    Read-only access to the scheme catalog.

    The index is built once at construction and never mutated, so a
    single instance can be shared freely.
    """

    # Schemes that carry their own catalog rows, in catalog order
    CATALOG_SCHEMES: ClassVar[tuple[SchemeId, ...]] = (
        SchemeId.UBSE,
        SchemeId.CIDK,
        SchemeId.CNINC,
        SchemeId.PFE,
        SchemeId.GENDER,
        SchemeId.ETHNICITY,
        SchemeId.DISABILITY,
    )

    def __init__(self, rows: tuple[tuple[str, SchemeId, str], ...] = CATALOG_ROWS):
        entries = tuple(
            CatalogEntry(raw_value=raw, scheme=scheme, canonical_label=label)
            for raw, scheme, label in rows
        )

        index: dict[str, set[CatalogEntry]] = defaultdict(set)
        for entry in entries:
            index[entry.raw_value].add(entry)

        self._entries = entries
        self._index = MappingProxyType({k: frozenset(v) for k, v in index.items()})

    def entries(self) -> tuple[CatalogEntry, ...]:
        """Return every catalog entry in catalog order."""
        return self._entries

    def schemes(self) -> tuple[SchemeId, ...]:
        """Return the schemes that are scored during inference."""
        return self.CATALOG_SCHEMES

    def lookup(self, raw_value: str) -> frozenset[CatalogEntry]:
        """
        Find every entry for a raw value.

        Args:
            raw_value: The value as text. Matching is exact and case-sensitive.

        Returns:
            Matching entries, possibly from several schemes; empty if unknown.
        """
        return self._index.get(raw_value, frozenset())

    def is_known(self, raw_value: str) -> bool:
        """Check if a raw value has at least one catalog entry."""
        return raw_value in self._index

    def canonical_label(self, raw_value: str, scheme: SchemeId) -> str | None:
        """
        Get the canonical label of a raw value within one scheme.

        Reduced schemes (USE, UBS, PF) resolve through their parent
        scheme, excluding the level they drop.

        Args:
            raw_value: The value as text.
            scheme: Scheme to interpret the value in.

        Returns:
            The canonical label, or None if the value isn't part of the scheme.
        """
        lookup_scheme = scheme
        dropped: str | None = None
        if scheme in DERIVED_SCHEMES:
            lookup_scheme, dropped = DERIVED_SCHEMES[scheme]

        for entry in self.lookup(raw_value):
            if entry.scheme == lookup_scheme and entry.canonical_label != dropped:
                return entry.canonical_label
        return None

    def levels_of(self, scheme: SchemeId) -> tuple[str, ...]:
        """Return the ordered canonical levels of a scheme."""
        if scheme not in SCHEME_LEVELS:
            raise KeyError(f"Scheme {scheme.value} has no fixed levels")
        return SCHEME_LEVELS[scheme]

    def colours_of(self, scheme: SchemeId) -> tuple[str, ...]:
        """Return the display colours of a scheme, aligned with levels_of()."""
        if scheme not in SCHEME_COLOURS:
            raise KeyError(f"Scheme {scheme.value} has no fixed colours")
        return SCHEME_COLOURS[scheme]

    def reduction_of(self, scheme: SchemeId) -> tuple[SchemeId, str] | None:
        """
        Describe how a reduced scheme is derived.

        Returns:
            Tuple of (parent scheme, level the reduced scheme drops), or
            None for schemes that carry their own entries.
        """
        return DERIVED_SCHEMES.get(scheme)
