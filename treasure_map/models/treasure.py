"""
Domain models for treasures (named points of interest) and map geometry.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple
import math
import uuid


def _new_treasure_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Coordinate:
    """WGS84 position in decimal degrees."""
    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude {self.latitude} out of range (must be -90 to 90)")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude {self.longitude} out of range (must be -180 to 180)")


@dataclass(frozen=True)
class Region:
    """A square map viewport centred on a coordinate."""
    center: Coordinate
    span_meters: float

    def __post_init__(self):
        if self.span_meters <= 0:
            raise ValueError("span_meters must be positive")

    @property
    def half_span_degrees(self) -> Tuple[float, float]:
        """Approximate (lat, lon) half extents in degrees."""
        half_lat = (self.span_meters / 2.0) / 111_320.0
        cos_lat = max(math.cos(math.radians(self.center.latitude)), 1e-6)
        half_lon = (self.span_meters / 2.0) / (111_320.0 * cos_lat)
        return half_lat, min(half_lon, 180.0)


@dataclass(frozen=True)
class PointOfInterest:
    """A saved treasure. `id` is assigned once and never reused."""
    name: str
    coordinate: Coordinate
    image_tag: Optional[str] = None
    id: str = field(default_factory=_new_treasure_id)


@dataclass(frozen=True)
class Place:
    """A place returned by a search; never stored as a treasure."""
    name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class SearchResult:
    """Places returned for one query and the region that bounds them."""
    query: str
    places: Tuple[Place, ...]
    region: Optional[Region] = None


class CategoryFilter(str, Enum):
    """Exclusive category selector over treasure names."""
    ALL = "all"
    FOOD = "food"
    CAFE = "cafe"
    OTHER = "other"

    def matches(self, poi: PointOfInterest) -> bool:
        if self is CategoryFilter.ALL:
            return True
        if self is CategoryFilter.FOOD:
            return _contains_any(poi.name, FOOD_MARKERS)
        if self is CategoryFilter.CAFE:
            return _contains_any(poi.name, CAFE_MARKERS)
        # OTHER is everything the named categories do not claim
        return not (
            _contains_any(poi.name, FOOD_MARKERS) or _contains_any(poi.name, CAFE_MARKERS)
        )


FOOD_MARKERS: Tuple[str, ...] = ("McDonald's",)
CAFE_MARKERS: Tuple[str, ...] = ("Starbucks", "Tim Hortons")


def _contains_any(name: str, markers: Sequence[str]) -> bool:
    return any(marker in name for marker in markers)


def default_treasures() -> list:
    """Built-in treasures every screen starts with."""
    return [
        PointOfInterest("McDonald's", Coordinate(43.6628917, -79.3835274), "mcdonalds.jpg"),
        PointOfInterest("Starbucks", Coordinate(43.651070, -79.397440), "starbucks.jpg"),
        PointOfInterest("Tim Hortons", Coordinate(43.657703, -79.384209), "timhortons.jpg"),
    ]
