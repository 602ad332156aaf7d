"""External navigation hand-off and share text."""
import logging
import webbrowser
from dataclasses import dataclass
from typing import Callable, Optional

from treasure_map.config.settings import NavigationSettings
from treasure_map.core.exceptions import LaunchFailedError
from treasure_map.models.treasure import Coordinate, PointOfInterest

logger = logging.getLogger(__name__)

UriOpener = Callable[[str], bool]


@dataclass(frozen=True)
class LaunchResult:
    uri: str
    opened: bool


def share_text(poi: PointOfInterest) -> str:
    return (
        f"Check out this place: {poi.name} at "
        f"{poi.coordinate.latitude}, {poi.coordinate.longitude}"
    )


class NavigationLauncher:
    """Builds destination URIs and asks the host to open them."""

    def __init__(self, settings: NavigationSettings, opener: Optional[UriOpener] = None):
        self.scheme = settings.uri_scheme
        self.mode = settings.mode
        self._opener = opener or webbrowser.open

    def destination_uri(self, coordinate: Coordinate) -> str:
        return (
            f"{self.scheme}:?destination={coordinate.latitude},{coordinate.longitude}"
            f"&mode={self.mode}"
        )

    def launch(self, coordinate: Coordinate) -> LaunchResult:
        """Open turn-by-turn navigation. Failures are logged, never raised."""
        uri = self.destination_uri(coordinate)
        try:
            opened = bool(self._opener(uri))
            failure = None if opened else LaunchFailedError(uri)
        except (OSError, webbrowser.Error) as e:
            opened = False
            failure = LaunchFailedError(uri, str(e))

        if failure is not None:
            logger.warning(
                failure.message,
                extra={"error_code": failure.error_code.value, "uri": uri},
            )
        else:
            logger.info(f"Opened maps app: {uri}")
        return LaunchResult(uri=uri, opened=opened)
