"""
Unit tests for the treasure screen controller: list/map synchronization,
selection, search and location flows
"""
import asyncio
import logging

import pytest

from treasure_map.core.exceptions import (
    EmptyInputError,
    NoSelectionError,
    OutOfRangeError,
    TreasureNotFoundError,
)
from treasure_map.core.metrics import snapshot_metrics
from treasure_map.models.treasure import (
    CategoryFilter,
    Coordinate,
    Place,
    SearchResult,
)
from treasure_map.services.location_provider import StaticLocationProvider
from treasure_map.services.map_presenter import AnnotationLayer
from treasure_map.services.place_search_client import MockPlaceSearchClient, PlaceSearchClient

TORONTO = Coordinate(43.6532, -79.3832)


def row_titles(screen):
    return [r.title for r in screen.list.rows]


def map_titles(screen):
    return [a.title for a in screen.map.annotations]


def test_initial_render(screen):
    assert row_titles(screen) == ["McDonald's", "Starbucks", "Tim Hortons"]
    assert map_titles(screen) == row_titles(screen)
    assert screen.map.region.center == Coordinate(56.1304, -106.3468)
    assert screen.map.region.span_meters == 2_000_000.0


def test_filter_updates_list_and_map(screen):
    screen.change_filter(CategoryFilter.CAFE)
    assert row_titles(screen) == ["Starbucks", "Tim Hortons"]
    assert map_titles(screen) == ["Starbucks", "Tim Hortons"]


def test_map_tap_adds_treasure_with_default_image(screen):
    poi = screen.handle_map_tap(Coordinate(43.64, -79.38), "Union Station")
    assert poi.image_tag == "default.jpg"
    assert row_titles(screen)[-1] == "Union Station"
    assert map_titles(screen)[-1] == "Union Station"


def test_map_tap_blank_name_rejected(screen):
    with pytest.raises(EmptyInputError):
        screen.handle_map_tap(Coordinate(43.64, -79.38), "  ")
    assert len(screen.store.all) == 3


def test_delete_row_under_filter(screen):
    screen.change_filter(CategoryFilter.CAFE)
    removed = screen.delete_row(1)
    assert removed.name == "Tim Hortons"
    assert [p.name for p in screen.store.all] == ["McDonald's", "Starbucks"]
    assert row_titles(screen) == ["Starbucks"]
    assert map_titles(screen) == ["Starbucks"]


def test_delete_stale_row_rejected(screen):
    screen.change_filter(CategoryFilter.FOOD)
    with pytest.raises(OutOfRangeError):
        screen.delete_row(2)
    assert len(screen.store.all) == 3


def test_select_row_launches_navigation(screen, opener):
    result = screen.select_row(1)
    assert screen.selected.name == "Starbucks"
    assert result.opened
    assert opener.opened == ["externalmaps:?destination=43.65107,-79.39744&mode=driving"]


def test_select_row_out_of_range(screen, opener):
    with pytest.raises(OutOfRangeError):
        screen.select_row(3)
    assert screen.selected is None
    assert opener.opened == []


def test_selection_follows_identity_across_filter(screen):
    screen.select_row(2)
    screen.change_filter(CategoryFilter.CAFE)
    assert screen.selected.name == "Tim Hortons"
    screen.change_filter(CategoryFilter.FOOD)
    assert screen.selected is None
    screen.change_filter(CategoryFilter.ALL)
    assert screen.selected.name == "Tim Hortons"


def test_selection_cleared_when_entry_deleted(screen):
    screen.select_row(0)
    screen.delete_row(0)
    assert screen.selected is None
    with pytest.raises(NoSelectionError):
        screen.share_selected()


def test_share_uses_visible_selection(screen):
    screen.change_filter(CategoryFilter.CAFE)
    screen.select_row(0)
    assert screen.share_selected() == "Check out this place: Starbucks at 43.65107, -79.39744"


def test_share_without_selection(screen):
    with pytest.raises(NoSelectionError):
        screen.share_selected()


def test_save_selected_logs(screen, caplog):
    screen.select_row(0)
    with caplog.at_level(logging.INFO):
        poi = screen.save_selected()
    assert poi.name == "McDonald's"
    assert "Location saved: McDonald's at 43.6628917, -79.3835274" in caplog.text


def test_select_treasure_by_id(screen):
    tim = screen.store.all[2]
    assert screen.select_treasure(tim.id) is tim
    screen.change_filter(CategoryFilter.FOOD)
    with pytest.raises(TreasureNotFoundError):
        screen.select_treasure(tim.id)


@pytest.mark.asyncio
async def test_search_shows_transient_layer_and_recenters(screen, search_client):
    result = await screen.search("  pizza ")

    assert search_client.queries == ["pizza"]
    assert screen.map.active_layer is AnnotationLayer.TRANSIENT
    assert map_titles(screen) == [p.name for p in result.places]
    assert screen.map.region.center == result.region.center
    assert screen.map.region.span_meters == 1000.0
    # search results never enter the store
    assert len(screen.store.all) == 3
    assert row_titles(screen) == ["McDonald's", "Starbucks", "Tim Hortons"]


@pytest.mark.asyncio
async def test_empty_search_rejected(screen, search_client):
    with pytest.raises(EmptyInputError):
        await screen.search("")
    assert search_client.queries == []


@pytest.mark.asyncio
async def test_search_failure_is_logged_and_map_untouched(screen, caplog):
    screen.search_client = MockPlaceSearchClient(fail_with="offline")
    region_before = screen.map.region

    with caplog.at_level(logging.WARNING):
        result = await screen.search("pizza")

    assert result is None
    assert screen.map.active_layer is AnnotationLayer.SAVED
    assert screen.map.region == region_before
    assert "Search error" in caplog.text
    assert snapshot_metrics()["search_failures"] == 1


@pytest.mark.asyncio
async def test_store_change_restores_saved_layer(screen):
    await screen.search("pizza")
    screen.change_filter(CategoryFilter.FOOD)
    assert screen.map.active_layer is AnnotationLayer.SAVED
    assert map_titles(screen) == ["McDonald's"]


@pytest.mark.asyncio
async def test_show_saved_after_search(screen):
    await screen.search("pizza")
    screen.show_saved()
    assert map_titles(screen) == ["McDonald's", "Starbucks", "Tim Hortons"]


@pytest.mark.asyncio
async def test_locate_recenters_and_runs_nearby_search(screen, search_client):
    result = await screen.locate()

    assert search_client.queries == ["restaurant"]
    assert screen.map.region.center == TORONTO
    assert screen.map.region.span_meters == 5000.0
    assert screen.map.active_layer is AnnotationLayer.TRANSIENT
    assert result.query == "restaurant"


@pytest.mark.asyncio
async def test_locate_denied_is_logged(screen, search_client, caplog):
    screen.location_provider = StaticLocationProvider(TORONTO, authorized=False)
    with caplog.at_level(logging.WARNING):
        result = await screen.locate()
    assert result is None
    assert search_client.queries == []
    assert "Failed to get user location" in caplog.text


class GatedSearchClient(PlaceSearchClient):
    """Holds each response until the test releases it."""

    def __init__(self):
        self.gates = {}

    async def search(self, query, bias_region=None):
        gate = self.gates.setdefault(query, asyncio.Event())
        await gate.wait()
        return SearchResult(query=query, places=(Place(query, Coordinate(43.0, -79.0)),))


@pytest.mark.asyncio
async def test_superseded_search_response_is_dropped(screen):
    client = GatedSearchClient()
    screen.search_client = client

    first = asyncio.create_task(screen.search("first"))
    await asyncio.sleep(0)
    second = asyncio.create_task(screen.search("second"))
    await asyncio.sleep(0)

    client.gates["second"].set()
    assert (await second).query == "second"
    client.gates["first"].set()
    assert await first is None

    assert map_titles(screen) == ["second"]
    assert snapshot_metrics()["stale_responses"] == 1


class EmptySearchClient(PlaceSearchClient):
    async def search(self, query, bias_region=None):
        return SearchResult(query=query, places=(), region=None)


@pytest.mark.asyncio
async def test_search_without_results_leaves_saved_layer(screen, caplog):
    screen.search_client = EmptySearchClient()
    region_before = screen.map.region

    with caplog.at_level(logging.WARNING):
        result = await screen.search("zzzz no such place")

    assert result is None
    assert screen.map.active_layer is AnnotationLayer.SAVED
    assert len(screen.map.annotations) == 3
    assert screen.map.region == region_before
    assert "no results" in caplog.text
    assert snapshot_metrics()["search_failures"] == 1


class UnauthorizedLocationProvider(StaticLocationProvider):
    """Counts fix requests so the test can assert none were made."""

    def __init__(self):
        super().__init__(TORONTO, authorized=False)
        self.requests = 0

    async def request_location(self):
        self.requests += 1
        return await super().request_location()


@pytest.mark.asyncio
async def test_locate_checks_authorization_before_requesting_fix(screen, search_client):
    provider = UnauthorizedLocationProvider()
    screen.location_provider = provider

    assert await screen.locate() is None
    assert provider.requests == 0
    assert search_client.queries == []
