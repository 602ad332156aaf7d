"""
Dependency injection setup for FastAPI.
Provides the treasure screen and its collaborators with lifecycle management.
"""

from typing import Optional
import logging

from treasure_map.config.settings import Settings, get_settings
from treasure_map.services.location_provider import StaticLocationProvider
from treasure_map.services.navigation_launcher import NavigationLauncher
from treasure_map.services.place_search_client import create_place_search_client
from treasure_map.services.treasure_screen import TreasureScreen
from treasure_map.services.treasure_store import TreasureStore


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Owns the single treasure screen for the process lifetime.
    Built lazily so the app also works when no lifespan runs.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._screen: Optional[TreasureScreen] = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def initialize_services(self) -> None:
        if self._screen is not None:
            return

        logger.info("Initializing service container")
        settings = self.settings
        self._screen = TreasureScreen(
            store=TreasureStore.with_defaults(),
            search_client=create_place_search_client(settings.search),
            location_provider=StaticLocationProvider.from_settings(settings.location),
            launcher=NavigationLauncher(settings.navigation),
            map_settings=settings.map,
        )
        logger.info(
            "Service container initialization completed",
            extra={"search_provider": settings.search.provider.value},
        )

    def cleanup_services(self) -> None:
        logger.info("Cleaning up service container")
        self._screen = None

    def get_treasure_screen(self) -> TreasureScreen:
        if self._screen is None:
            self.initialize_services()
        return self._screen


# Global service container instance
service_container = ServiceContainer()


async def get_treasure_screen() -> TreasureScreen:
    """Dependency provider for the treasure screen."""
    return service_container.get_treasure_screen()
