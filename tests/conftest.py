"""
Shared fixtures for treasure screen tests.
"""
import pytest
from fastapi.testclient import TestClient

from treasure_map.config.settings import MapSettings, NavigationSettings
from treasure_map.core.dependencies import get_treasure_screen
from treasure_map.core.metrics import reset_metrics
from treasure_map.main import app
from treasure_map.models.treasure import Coordinate
from treasure_map.services.location_provider import StaticLocationProvider
from treasure_map.services.navigation_launcher import NavigationLauncher
from treasure_map.services.place_search_client import MockPlaceSearchClient
from treasure_map.services.treasure_store import TreasureStore
from treasure_map.services.treasure_screen import TreasureScreen

TORONTO = Coordinate(43.6532, -79.3832)


class RecordingOpener:
    """Stands in for the host's URI opener."""

    def __init__(self, result: bool = True):
        self.result = result
        self.opened: list[str] = []

    def __call__(self, uri: str) -> bool:
        self.opened.append(uri)
        return self.result


@pytest.fixture(autouse=True)
def _clean_metrics():
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture
def store():
    return TreasureStore.with_defaults()


@pytest.fixture
def opener():
    return RecordingOpener()


@pytest.fixture
def search_client():
    return MockPlaceSearchClient()


@pytest.fixture
def location_provider():
    return StaticLocationProvider(coordinate=TORONTO)


@pytest.fixture
def screen(store, search_client, location_provider, opener):
    return TreasureScreen(
        store=store,
        search_client=search_client,
        location_provider=location_provider,
        launcher=NavigationLauncher(NavigationSettings(), opener=opener),
        map_settings=MapSettings(),
    )


@pytest.fixture
def client(screen):
    async def _screen_override():
        return screen

    app.dependency_overrides[get_treasure_screen] = _screen_override
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
