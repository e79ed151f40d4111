"""
ULD width resolution.

Maps a ULD identifier to the number of contiguous deck slots it occupies.
"""

from collections.abc import Iterable

from loadplanner.domain import CatalogEntry

DEFAULT_WIDTH_SLOTS = 1


class WidthResolver:
    """
    Prefix lookup against an ordered ULD catalog.

    The first entry whose prefix starts the identifier wins, so catalog order
    matters. Unknown identifiers (or an empty catalog) occupy a single slot.

    Usage:
        resolver = WidthResolver(DEFAULT_ULD_CATALOG)
        resolver.resolve("AKE12345DL")  # -> 1
    """

    def __init__(self, catalog: Iterable[CatalogEntry] | None = None):
        self.catalog: tuple[CatalogEntry, ...] = tuple(catalog or ())

    def lookup(self, uld_id: str) -> CatalogEntry | None:
        """Get the first catalog entry matching the identifier."""
        for entry in self.catalog:
            if entry.matches(uld_id):
                return entry
        return None

    def resolve(self, uld_id: str) -> int:
        """Get the slot width for a ULD identifier."""
        entry = self.lookup(uld_id)
        return entry.width_slots if entry else DEFAULT_WIDTH_SLOTS

    def type_label(self, uld_id: str) -> str:
        """Get the catalog type label (e.g., "LD3") or an empty string."""
        entry = self.lookup(uld_id)
        return entry.uld_type if entry else ""
