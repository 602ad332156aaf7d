"""
Domain models for the Treasure Map service.
"""

from .treasure import (
    CategoryFilter,
    Coordinate,
    Place,
    PointOfInterest,
    Region,
    SearchResult,
    default_treasures,
)

__all__ = [
    "CategoryFilter",
    "Coordinate",
    "Place",
    "PointOfInterest",
    "Region",
    "SearchResult",
    "default_treasures",
]
