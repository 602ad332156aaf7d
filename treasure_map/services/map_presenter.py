"""
Map view model with two annotation layers.

`saved` mirrors the store's visible treasures, `transient` holds the latest
search or nearby results. Only the active layer is shown and the two are
never merged into one annotation set.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from treasure_map.models.treasure import Coordinate, Place, PointOfInterest, Region

logger = logging.getLogger(__name__)


class AnnotationLayer(str, Enum):
    SAVED = "saved"
    TRANSIENT = "transient"


@dataclass(frozen=True)
class Annotation:
    title: str
    coordinate: Coordinate
    layer: AnnotationLayer
    treasure_id: Optional[str] = None


class MapPresenter:
    """Holds what the map surface currently draws."""

    def __init__(self, region: Region):
        self._layers: Dict[AnnotationLayer, List[Annotation]] = {
            AnnotationLayer.SAVED: [],
            AnnotationLayer.TRANSIENT: [],
        }
        self._active = AnnotationLayer.SAVED
        self._region = region

    @property
    def region(self) -> Region:
        return self._region

    @property
    def active_layer(self) -> AnnotationLayer:
        return self._active

    @property
    def annotations(self) -> Tuple[Annotation, ...]:
        """Annotations currently on screen."""
        return tuple(self._layers[self._active])

    def layer(self, layer: AnnotationLayer) -> Tuple[Annotation, ...]:
        return tuple(self._layers[layer])

    def render_annotations(self, points: Iterable[PointOfInterest]) -> None:
        """Replace the saved layer and show it; pending search results are dropped."""
        saved = self._layers[AnnotationLayer.SAVED]
        saved.clear()
        saved.extend(
            Annotation(p.name, p.coordinate, AnnotationLayer.SAVED, p.id) for p in points
        )
        self._layers[AnnotationLayer.TRANSIENT].clear()
        self._active = AnnotationLayer.SAVED
        logger.debug(f"Rendered {len(saved)} saved annotations")

    def show_transient(self, places: Iterable[Place]) -> None:
        """Replace the transient layer with search results and show it."""
        transient = self._layers[AnnotationLayer.TRANSIENT]
        transient.clear()
        transient.extend(
            Annotation(p.name, p.coordinate, AnnotationLayer.TRANSIENT) for p in places
        )
        self._active = AnnotationLayer.TRANSIENT
        logger.debug(f"Rendered {len(transient)} transient annotations")

    def show_saved(self) -> None:
        """Return to the saved layer as last rendered."""
        self._layers[AnnotationLayer.TRANSIENT].clear()
        self._active = AnnotationLayer.SAVED

    def recenter(self, coordinate: Coordinate, span_meters: float) -> None:
        self._region = Region(center=coordinate, span_meters=span_meters)
