"""
Place search providers.

`NominatimPlaceSearchClient` queries the OpenStreetMap Nominatim API;
`MockPlaceSearchClient` returns canned places around the bias region and is
the default outside production.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import httpx

from treasure_map.config.settings import SearchProvider, SearchSettings
from treasure_map.core.exceptions import SearchFailedError
from treasure_map.models.treasure import Coordinate, Place, Region, SearchResult

logger = logging.getLogger(__name__)

MIN_RESULT_SPAN_M = 1000.0
_METERS_PER_DEGREE = 111_320.0


def bounding_region(places: Sequence[Place]) -> Optional[Region]:
    """Smallest square region (roughly) that contains every place."""
    if not places:
        return None
    lats = [p.coordinate.latitude for p in places]
    lons = [p.coordinate.longitude for p in places]
    center = Coordinate(
        latitude=(min(lats) + max(lats)) / 2.0,
        longitude=(min(lons) + max(lons)) / 2.0,
    )
    lat_span_m = (max(lats) - min(lats)) * _METERS_PER_DEGREE
    lon_span_m = (
        (max(lons) - min(lons)) * _METERS_PER_DEGREE * math.cos(math.radians(center.latitude))
    )
    return Region(center=center, span_meters=max(lat_span_m, lon_span_m, MIN_RESULT_SPAN_M))


class PlaceSearchClient(ABC):
    """Free-text place search, optionally biased towards a region."""

    @abstractmethod
    async def search(self, query: str, bias_region: Optional[Region] = None) -> SearchResult:
        """
        Search for places matching `query`.

        Raises:
            SearchFailedError: If the upstream service fails
        """


class MockPlaceSearchClient(PlaceSearchClient):
    """Deterministic offline results placed around the bias centre."""

    DEFAULT_CENTER = Coordinate(43.6532, -79.3832)

    def __init__(self, fail_with: Optional[str] = None):
        self.fail_with = fail_with
        self.queries: List[str] = []

    async def search(self, query: str, bias_region: Optional[Region] = None) -> SearchResult:
        self.queries.append(query)
        if self.fail_with:
            raise SearchFailedError(query, self.fail_with)

        center = bias_region.center if bias_region else self.DEFAULT_CENTER
        lat, lon = center.latitude, center.longitude
        places = (
            Place(f"{query.title()} Central", Coordinate(_clamp_lat(lat + 0.001), _clamp_lon(lon + 0.001))),
            Place(f"{query.title()} Corner", Coordinate(_clamp_lat(lat - 0.001), _clamp_lon(lon))),
        )
        return SearchResult(query=query, places=places, region=bounding_region(places))


class NominatimPlaceSearchClient(PlaceSearchClient):
    """Place search backed by the Nominatim `/search` endpoint."""

    def __init__(
        self,
        settings: SearchSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = settings.api_url.rstrip("/")
        self.timeout = settings.timeout_seconds
        self.max_results = settings.max_results
        self.user_agent = settings.user_agent
        self._transport = transport

    def _build_params(self, query: str, bias_region: Optional[Region]) -> dict:
        params = {
            "q": query,
            "format": "jsonv2",
            "limit": self.max_results,
        }
        if bias_region is not None:
            half_lat, half_lon = bias_region.half_span_degrees
            c = bias_region.center
            # left,top,right,bottom
            params["viewbox"] = ",".join(
                f"{v:.6f}" for v in (
                    _clamp_lon(c.longitude - half_lon),
                    _clamp_lat(c.latitude + half_lat),
                    _clamp_lon(c.longitude + half_lon),
                    _clamp_lat(c.latitude - half_lat),
                )
            )
            params["bounded"] = 0
        return params

    async def search(self, query: str, bias_region: Optional[Region] = None) -> SearchResult:
        url = f"{self.api_url}/search"
        params = self._build_params(query, bias_region)
        logger.info(f"Searching places for: {query}")

        try:
            async with httpx.AsyncClient(
                headers={"User-Agent": self.user_agent, "Accept": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            raise SearchFailedError(query, "timeout") from e
        except httpx.HTTPError as e:
            raise SearchFailedError(query, f"transport error: {e}") from e

        if response.status_code != 200:
            raise SearchFailedError(
                query,
                f"upstream returned {response.status_code}",
                {"status_code": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise SearchFailedError(query, "invalid JSON payload") from e
        if not isinstance(payload, list):
            raise SearchFailedError(query, "unexpected payload shape")

        places = []
        for item in payload:
            place = _parse_place(item)
            if place is not None:
                places.append(place)

        logger.info(f"Found {len(places)} places for '{query}'")
        return SearchResult(query=query, places=tuple(places), region=bounding_region(places))


def _parse_place(item: dict) -> Optional[Place]:
    try:
        coordinate = Coordinate(float(item["lat"]), float(item["lon"]))
    except (KeyError, TypeError, ValueError):
        logger.debug(f"Skipping malformed search item: {item!r}")
        return None
    name = item.get("name") or (item.get("display_name") or "").split(",")[0].strip()
    if not name:
        return None
    return Place(name=name, coordinate=coordinate)


def _clamp_lat(lat: float) -> float:
    return max(-90.0, min(90.0, lat))


def _clamp_lon(lon: float) -> float:
    return max(-180.0, min(180.0, lon))


def create_place_search_client(settings: SearchSettings) -> PlaceSearchClient:
    """Build the configured place search client."""
    if settings.provider == SearchProvider.NOMINATIM:
        return NominatimPlaceSearchClient(settings)
    return MockPlaceSearchClient()
