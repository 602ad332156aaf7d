"""Table view model for the visible treasures."""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from treasure_map.core.exceptions import OutOfRangeError
from treasure_map.models.treasure import PointOfInterest


@dataclass(frozen=True)
class Row:
    index: int
    treasure_id: str
    title: str
    image_tag: Optional[str]


class ListPresenter:
    def __init__(self):
        self._rows: List[Row] = []

    @property
    def rows(self) -> Tuple[Row, ...]:
        return tuple(self._rows)

    def render_rows(self, points: Iterable[PointOfInterest]) -> None:
        self._rows = [
            Row(index=i, treasure_id=p.id, title=p.name, image_tag=p.image_tag)
            for i, p in enumerate(points)
        ]

    def row_at(self, index: int) -> Row:
        if not 0 <= index < len(self._rows):
            raise OutOfRangeError(index, len(self._rows))
        return self._rows[index]
