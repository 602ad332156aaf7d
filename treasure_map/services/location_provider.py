"""Device location providers."""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from treasure_map.config.settings import LocationSettings
from treasure_map.core.exceptions import LocationDeniedError, LocationFailedError
from treasure_map.models.treasure import Coordinate

logger = logging.getLogger(__name__)


class LocationProvider(ABC):
    @property
    @abstractmethod
    def authorized(self) -> bool:
        ...

    @abstractmethod
    async def request_location(self) -> Coordinate:
        """
        Deliver one position fix.

        Raises:
            LocationDeniedError: If location access is not authorized
            LocationFailedError: If no fix is available
        """


class StaticLocationProvider(LocationProvider):
    """Serves a fixed position, e.g. one configured for a kiosk deployment."""

    def __init__(self, coordinate: Optional[Coordinate] = None, authorized: bool = True):
        self._coordinate = coordinate
        self._authorized = authorized

    @classmethod
    def from_settings(cls, settings: LocationSettings) -> "StaticLocationProvider":
        coordinate = None
        if settings.latitude is not None and settings.longitude is not None:
            coordinate = Coordinate(settings.latitude, settings.longitude)
        return cls(coordinate=coordinate, authorized=settings.authorized)

    @property
    def authorized(self) -> bool:
        return self._authorized

    async def request_location(self) -> Coordinate:
        if not self._authorized:
            raise LocationDeniedError()
        if self._coordinate is None:
            raise LocationFailedError("No location fix configured")
        logger.debug(f"Location fix {self._coordinate.latitude}, {self._coordinate.longitude}")
        return self._coordinate
