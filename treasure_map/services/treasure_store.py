"""
In-memory treasure collection with a category-filtered visible view.

`visible` is recomputed synchronously after every mutation or filter change
and subscribers are notified with the new view before the call returns.
"""
import logging
from typing import Callable, Iterable, List, Optional, Tuple

from treasure_map.core.exceptions import OutOfRangeError
from treasure_map.models.treasure import (
    CategoryFilter,
    Coordinate,
    PointOfInterest,
    default_treasures,
)

logger = logging.getLogger(__name__)

VisibleListener = Callable[[Tuple[PointOfInterest, ...]], None]


class TreasureStore:
    """Ordered treasures plus the active category filter."""

    def __init__(
        self,
        treasures: Optional[Iterable[PointOfInterest]] = None,
        category: CategoryFilter = CategoryFilter.ALL,
    ):
        self._all: List[PointOfInterest] = list(treasures or [])
        self._category = category
        self._visible: Tuple[PointOfInterest, ...] = ()
        self._listeners: List[VisibleListener] = []
        self._recompute()

    @classmethod
    def with_defaults(cls) -> "TreasureStore":
        return cls(default_treasures())

    @property
    def all(self) -> Tuple[PointOfInterest, ...]:
        return tuple(self._all)

    @property
    def visible(self) -> Tuple[PointOfInterest, ...]:
        return self._visible

    @property
    def active_filter(self) -> CategoryFilter:
        return self._category

    def subscribe(self, listener: VisibleListener) -> None:
        """Register a callback invoked with `visible` after every change."""
        self._listeners.append(listener)

    def add(
        self,
        name: str,
        coordinate: Coordinate,
        image_tag: Optional[str] = None,
    ) -> Optional[PointOfInterest]:
        """
        Append a treasure. Blank names are ignored.

        Returns:
            The new treasure, or None when the name was rejected
        """
        if not name or not name.strip():
            logger.debug("Ignoring treasure with empty name")
            return None

        poi = PointOfInterest(name=name, coordinate=coordinate, image_tag=image_tag)
        self._all.append(poi)
        logger.info(f"Added treasure '{poi.name}'", extra={"treasure_id": poi.id})
        self._changed()
        return poi

    def remove_at(self, visible_index: int) -> PointOfInterest:
        """
        Remove the treasure shown at `visible_index`.

        Raises:
            OutOfRangeError: If the index does not address a visible row
        """
        target = self.item_at(visible_index)
        self._all = [poi for poi in self._all if poi.id != target.id]
        logger.info(f"Removed treasure '{target.name}'", extra={"treasure_id": target.id})
        self._changed()
        return target

    def set_filter(self, category: CategoryFilter) -> None:
        self._category = CategoryFilter(category)
        logger.debug(f"Filter set to {self._category.value}")
        self._changed()

    def item_at(self, visible_index: int) -> PointOfInterest:
        if not 0 <= visible_index < len(self._visible):
            raise OutOfRangeError(visible_index, len(self._visible))
        return self._visible[visible_index]

    def get(self, treasure_id: str) -> Optional[PointOfInterest]:
        for poi in self._all:
            if poi.id == treasure_id:
                return poi
        return None

    def index_of(self, treasure_id: str) -> Optional[int]:
        """Position of a treasure within `visible`, or None if filtered out."""
        for index, poi in enumerate(self._visible):
            if poi.id == treasure_id:
                return index
        return None

    def _recompute(self) -> None:
        self._visible = tuple(poi for poi in self._all if self._category.matches(poi))

    def _changed(self) -> None:
        self._recompute()
        for listener in self._listeners:
            listener(self._visible)
