"""
Service layer: the treasure store, its presenters, the screen controller
and the external collaborators they talk to.
"""

from .treasure_store import TreasureStore
from .map_presenter import Annotation, AnnotationLayer, MapPresenter
from .list_presenter import ListPresenter, Row
from .place_search_client import (
    MockPlaceSearchClient,
    NominatimPlaceSearchClient,
    PlaceSearchClient,
    create_place_search_client,
)
from .location_provider import LocationProvider, StaticLocationProvider
from .navigation_launcher import LaunchResult, NavigationLauncher, share_text
from .treasure_screen import TreasureScreen

__all__ = [
    "TreasureStore",
    "Annotation",
    "AnnotationLayer",
    "MapPresenter",
    "ListPresenter",
    "Row",
    "MockPlaceSearchClient",
    "NominatimPlaceSearchClient",
    "PlaceSearchClient",
    "create_place_search_client",
    "LocationProvider",
    "StaticLocationProvider",
    "LaunchResult",
    "NavigationLauncher",
    "share_text",
    "TreasureScreen",
]
