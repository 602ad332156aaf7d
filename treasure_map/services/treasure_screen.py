"""
Treasure screen controller.

Connects the treasure store to the list and map presenters and routes user
gestures (filter, map tap, row tap, swipe delete, search, share) to them.
Indexes coming from the outside are validated against the current rows
before the store sees them. Errors from the location provider, the place
search service and the navigation launcher end the operation and are logged.
"""

import logging
from typing import Optional

from treasure_map.config.settings import MapSettings
from treasure_map.core import metrics
from treasure_map.core.exceptions import (
    EmptyInputError,
    LocationDeniedError,
    LocationFailedError,
    NoSelectionError,
    SearchFailedError,
    TreasureNotFoundError,
)
from treasure_map.models.treasure import (
    CategoryFilter,
    Coordinate,
    PointOfInterest,
    Region,
    SearchResult,
)
from treasure_map.services.list_presenter import ListPresenter
from treasure_map.services.location_provider import LocationProvider
from treasure_map.services.map_presenter import MapPresenter
from treasure_map.services.navigation_launcher import LaunchResult, NavigationLauncher, share_text
from treasure_map.services.place_search_client import PlaceSearchClient
from treasure_map.services.treasure_store import TreasureStore

logger = logging.getLogger(__name__)


class TreasureScreen:
    """Single-screen state: treasures, list rows, map layers and selection."""

    def __init__(
        self,
        store: TreasureStore,
        search_client: PlaceSearchClient,
        location_provider: LocationProvider,
        launcher: NavigationLauncher,
        map_settings: MapSettings,
    ):
        self.store = store
        self.search_client = search_client
        self.location_provider = location_provider
        self.launcher = launcher
        self.map_settings = map_settings

        self.list = ListPresenter()
        self.map = MapPresenter(
            Region(
                center=Coordinate(map_settings.default_latitude, map_settings.default_longitude),
                span_meters=map_settings.default_span_m,
            )
        )
        self._selected_id: Optional[str] = None
        self._search_generation = 0

        store.subscribe(self._render)
        self._render(store.visible)

    def _render(self, visible) -> None:
        self.list.render_rows(visible)
        self.map.render_annotations(visible)

    # Selection

    @property
    def selected(self) -> Optional[PointOfInterest]:
        """The selected treasure, if it is still visible."""
        if self._selected_id is None:
            return None
        index = self.store.index_of(self._selected_id)
        if index is None:
            return None
        return self.store.visible[index]

    def select_row(self, index: int) -> LaunchResult:
        """Row tap: select the treasure and start navigation to it."""
        row = self.list.row_at(index)
        poi = self.store.item_at(row.index)
        self._selected_id = poi.id
        return self.launcher.launch(poi.coordinate)

    def select_treasure(self, treasure_id: str) -> PointOfInterest:
        """Annotation tap: select a saved treasure by id."""
        index = self.store.index_of(treasure_id)
        if index is None:
            raise TreasureNotFoundError(treasure_id)
        self._selected_id = treasure_id
        return self.store.visible[index]

    def share_selected(self) -> str:
        poi = self.selected
        if poi is None:
            raise NoSelectionError("share")
        return share_text(poi)

    def save_selected(self) -> PointOfInterest:
        poi = self.selected
        if poi is None:
            raise NoSelectionError("save")
        logger.info(
            f"Location saved: {poi.name} at {poi.coordinate.latitude}, {poi.coordinate.longitude}",
            extra={"treasure_id": poi.id},
        )
        return poi

    # Store mutations

    def change_filter(self, category: CategoryFilter) -> None:
        self.store.set_filter(category)

    def handle_map_tap(
        self,
        coordinate: Coordinate,
        name: str,
        image_tag: Optional[str] = None,
    ) -> PointOfInterest:
        """Confirm a name for a tapped map position and save it."""
        if not name or not name.strip():
            raise EmptyInputError("name")
        poi = self.store.add(name, coordinate, image_tag or self.map_settings.tap_image_tag)
        return poi

    def delete_row(self, index: int) -> PointOfInterest:
        row = self.list.row_at(index)
        return self.store.remove_at(row.index)

    def show_saved(self) -> None:
        """Leave search results and show the saved treasures again."""
        self.map.show_saved()

    # Search and location

    async def search(self, query: str) -> Optional[SearchResult]:
        """
        Search places and show them as transient annotations.

        Returns:
            The result, or None if the search failed or was superseded
        """
        if not query or not query.strip():
            raise EmptyInputError("query")
        result = await self._run_search(query.strip(), self.map.region)
        if result is not None and result.region is not None:
            self.map.recenter(result.region.center, self.map_settings.search_span_m)
        return result

    async def locate(self) -> Optional[SearchResult]:
        """Ask the location provider for a fix and show what is nearby."""
        try:
            if not self.location_provider.authorized:
                raise LocationDeniedError()
            coordinate = await self.location_provider.request_location()
        except (LocationDeniedError, LocationFailedError) as e:
            logger.warning(
                f"Failed to get user location: {e.message}",
                extra={"error_code": e.error_code.value},
            )
            return None
        return await self.handle_location_update(coordinate)

    async def handle_location_update(self, coordinate: Coordinate) -> Optional[SearchResult]:
        self.map.recenter(coordinate, self.map_settings.location_span_m)
        return await self._run_search(self.map_settings.nearby_query, self.map.region)

    async def _run_search(self, query: str, bias_region: Region) -> Optional[SearchResult]:
        self._search_generation += 1
        generation = self._search_generation

        try:
            with metrics.record_search_latency():
                result = await self.search_client.search(query, bias_region)
            if not result.places:
                raise SearchFailedError(query, "no results")
        except SearchFailedError as e:
            metrics.record_search_failure()
            logger.warning(
                f"Search error: {e.message}",
                extra={"error_code": e.error_code.value, "query": query},
            )
            return None

        if generation != self._search_generation:
            metrics.record_stale_response()
            logger.info(f"Dropping superseded results for '{query}'")
            return None

        self.map.show_transient(result.places)
        return result
