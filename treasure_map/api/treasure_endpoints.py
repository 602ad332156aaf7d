"""
Treasure screen endpoints.

Each route is one gesture on the treasure screen. Handlers are coroutines so
every mutation runs on the event loop thread, one at a time.
"""
from fastapi import APIRouter, Depends

from treasure_map.core.dependencies import get_treasure_screen
from treasure_map.schemas.base import Envelope
from treasure_map.schemas.treasure import (
    AnnotationRead,
    CoordinateIn,
    FilterUpdate,
    LaunchRead,
    MapStateRead,
    PlaceRead,
    RegionRead,
    RowRead,
    SearchRequest,
    SearchResponse,
    ShareRead,
    TreasureCreate,
    TreasureListResponse,
    TreasureRead,
)
from treasure_map.services.treasure_screen import TreasureScreen

router = APIRouter(prefix="/treasures", tags=["treasures"])


def _list_payload(screen: TreasureScreen) -> TreasureListResponse:
    selected = screen.selected
    return TreasureListResponse(
        filter=screen.store.active_filter,
        rows=[RowRead.from_row(r) for r in screen.list.rows],
        selected_id=selected.id if selected else None,
    )


def _map_payload(screen: TreasureScreen) -> MapStateRead:
    return MapStateRead(
        region=RegionRead.from_region(screen.map.region),
        active_layer=screen.map.active_layer,
        annotations=[AnnotationRead.from_annotation(a) for a in screen.map.annotations],
    )


def _search_payload(result) -> Envelope[SearchResponse]:
    if result is None:
        return Envelope(status="error", data=None, error="Search failed or was superseded")
    payload = SearchResponse(
        query=result.query,
        places=[PlaceRead.from_place(p) for p in result.places],
    )
    return Envelope(status="ok", data=payload, error=None)


@router.get("", response_model=Envelope[TreasureListResponse])
async def list_treasures(screen: TreasureScreen = Depends(get_treasure_screen)):
    return Envelope(status="ok", data=_list_payload(screen), error=None)


@router.post("", response_model=Envelope[TreasureRead], status_code=201)
async def add_treasure(
    request: TreasureCreate,
    screen: TreasureScreen = Depends(get_treasure_screen),
):
    """Save a tapped map position under the confirmed name."""
    poi = screen.handle_map_tap(request.to_coordinate(), request.name, request.image_tag)
    return Envelope(status="ok", data=TreasureRead.from_poi(poi), error=None)


@router.put("/filter", response_model=Envelope[TreasureListResponse])
async def change_filter(
    request: FilterUpdate,
    screen: TreasureScreen = Depends(get_treasure_screen),
):
    screen.change_filter(request.category)
    return Envelope(status="ok", data=_list_payload(screen), error=None)


@router.delete("/rows/{index}", response_model=Envelope[TreasureRead])
async def delete_row(index: int, screen: TreasureScreen = Depends(get_treasure_screen)):
    poi = screen.delete_row(index)
    return Envelope(status="ok", data=TreasureRead.from_poi(poi), error=None)


@router.post("/rows/{index}/select", response_model=Envelope[LaunchRead])
async def select_row(index: int, screen: TreasureScreen = Depends(get_treasure_screen)):
    """Select a row and hand its position to the external maps app."""
    launch = screen.select_row(index)
    payload = LaunchRead(
        treasure=TreasureRead.from_poi(screen.selected),
        uri=launch.uri,
        opened=launch.opened,
    )
    return Envelope(status="ok", data=payload, error=None)


@router.get("/selected/share", response_model=Envelope[ShareRead])
async def share_selected(screen: TreasureScreen = Depends(get_treasure_screen)):
    return Envelope(status="ok", data=ShareRead(text=screen.share_selected()), error=None)


@router.post("/selected/save", response_model=Envelope[TreasureRead])
async def save_selected(screen: TreasureScreen = Depends(get_treasure_screen)):
    poi = screen.save_selected()
    return Envelope(status="ok", data=TreasureRead.from_poi(poi), error=None)


@router.get("/map", response_model=Envelope[MapStateRead])
async def get_map(screen: TreasureScreen = Depends(get_treasure_screen)):
    return Envelope(status="ok", data=_map_payload(screen), error=None)


@router.post("/map/saved", response_model=Envelope[MapStateRead])
async def show_saved(screen: TreasureScreen = Depends(get_treasure_screen)):
    screen.show_saved()
    return Envelope(status="ok", data=_map_payload(screen), error=None)


@router.post("/search", response_model=Envelope[SearchResponse])
async def search_places(
    request: SearchRequest,
    screen: TreasureScreen = Depends(get_treasure_screen),
):
    result = await screen.search(request.query)
    return _search_payload(result)


@router.post("/location", response_model=Envelope[SearchResponse])
async def update_location(
    request: CoordinateIn,
    screen: TreasureScreen = Depends(get_treasure_screen),
):
    """Accept a position fix from the device and show nearby places."""
    result = await screen.handle_location_update(request.to_coordinate())
    return _search_payload(result)


@router.post("/locate", response_model=Envelope[SearchResponse])
async def locate(screen: TreasureScreen = Depends(get_treasure_screen)):
    result = await screen.locate()
    return _search_payload(result)


@router.post("/{treasure_id}/select", response_model=Envelope[TreasureRead])
async def select_treasure(treasure_id: str, screen: TreasureScreen = Depends(get_treasure_screen)):
    """Annotation tap on a saved treasure."""
    poi = screen.select_treasure(treasure_id)
    return Envelope(status="ok", data=TreasureRead.from_poi(poi), error=None)
