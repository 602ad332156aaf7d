from pydantic import BaseModel, Field, field_validator
from typing import Optional

from treasure_map.models.treasure import CategoryFilter, Coordinate, Place, PointOfInterest, Region
from treasure_map.services.list_presenter import Row
from treasure_map.services.map_presenter import Annotation, AnnotationLayer


class CoordinateIn(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class CoordinateRead(BaseModel):
    latitude: float
    longitude: float

    @classmethod
    def from_coordinate(cls, c: Coordinate) -> "CoordinateRead":
        return cls(latitude=c.latitude, longitude=c.longitude)


class TreasureCreate(CoordinateIn):
    """Name confirmed for a tapped map position."""
    name: str
    image_tag: Optional[str] = None


class TreasureRead(BaseModel):
    id: str
    name: str
    latitude: float
    longitude: float
    image_tag: Optional[str] = None

    @classmethod
    def from_poi(cls, poi: PointOfInterest) -> "TreasureRead":
        return cls(
            id=poi.id,
            name=poi.name,
            latitude=poi.coordinate.latitude,
            longitude=poi.coordinate.longitude,
            image_tag=poi.image_tag,
        )


class RowRead(BaseModel):
    index: int
    treasure_id: str
    title: str
    image_tag: Optional[str] = None

    @classmethod
    def from_row(cls, row: Row) -> "RowRead":
        return cls(index=row.index, treasure_id=row.treasure_id, title=row.title, image_tag=row.image_tag)


class TreasureListResponse(BaseModel):
    filter: CategoryFilter
    rows: list[RowRead]
    selected_id: Optional[str] = None


class FilterUpdate(BaseModel):
    category: CategoryFilter

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v


class RegionRead(BaseModel):
    center: CoordinateRead
    span_meters: float

    @classmethod
    def from_region(cls, region: Region) -> "RegionRead":
        return cls(center=CoordinateRead.from_coordinate(region.center), span_meters=region.span_meters)


class AnnotationRead(BaseModel):
    title: str
    latitude: float
    longitude: float
    layer: AnnotationLayer
    treasure_id: Optional[str] = None

    @classmethod
    def from_annotation(cls, a: Annotation) -> "AnnotationRead":
        return cls(
            title=a.title,
            latitude=a.coordinate.latitude,
            longitude=a.coordinate.longitude,
            layer=a.layer,
            treasure_id=a.treasure_id,
        )


class MapStateRead(BaseModel):
    region: RegionRead
    active_layer: AnnotationLayer
    annotations: list[AnnotationRead]


class SearchRequest(BaseModel):
    query: str


class PlaceRead(BaseModel):
    name: str
    latitude: float
    longitude: float

    @classmethod
    def from_place(cls, place: Place) -> "PlaceRead":
        return cls(name=place.name, latitude=place.coordinate.latitude, longitude=place.coordinate.longitude)


class SearchResponse(BaseModel):
    query: str
    places: list[PlaceRead]


class LaunchRead(BaseModel):
    treasure: TreasureRead
    uri: str
    opened: bool


class ShareRead(BaseModel):
    text: str
