"""Selected-location state with the first-location default rule."""

import logging
from collections.abc import Sequence

from climacr.models.location import Location

logger = logging.getLogger(__name__)


class SelectionState:
    def __init__(self):
        self.selected: Location | None = None
        self._catalog: tuple[Location, ...] = ()

    @property
    def coordinates(self) -> tuple[float | None, float | None]:
        if self.selected is None:
            return (None, None)
        return self.selected.coordinates

    def apply_catalog(self, locations: Sequence[Location]) -> Location | None:
        """Reconcile the selection with a (possibly refreshed) catalog.

        A selection whose slug is still listed is kept; one whose slug
        disappeared is cleared. With no selection, the first entry is chosen.
        """
        self._catalog = tuple(locations)
        if self.selected is not None:
            current = self._lookup(self.selected.slug)
            if current is None:
                logger.info(
                    "Selected location %s left the catalog, clearing",
                    self.selected.slug,
                )
            self.selected = current
        if self.selected is None and self._catalog:
            self.selected = self._catalog[0]
            logger.debug("Default selection: %s", self.selected.slug)
        return self.selected

    def select(self, slug: str) -> Location:
        """Select a catalog entry by slug. Raises KeyError if not listed."""
        loc = self._lookup(slug)
        if loc is None:
            raise KeyError(f"Unknown location: {slug}")
        self.selected = loc
        return loc

    def is_selected(self, slug: str) -> bool:
        return self.selected is not None and self.selected.slug == slug

    def _lookup(self, slug: str) -> Location | None:
        for loc in self._catalog:
            if loc.slug == slug:
                return loc
        return None
