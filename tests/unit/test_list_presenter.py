import pytest

from treasure_map.core.exceptions import OutOfRangeError
from treasure_map.models.treasure import default_treasures
from treasure_map.services.list_presenter import ListPresenter


def test_render_rows_indexes_in_order():
    presenter = ListPresenter()
    points = default_treasures()
    presenter.render_rows(points)

    assert [r.index for r in presenter.rows] == [0, 1, 2]
    assert [r.title for r in presenter.rows] == ["McDonald's", "Starbucks", "Tim Hortons"]
    assert presenter.rows[2].image_tag == "timhortons.jpg"
    assert presenter.rows[1].treasure_id == points[1].id


def test_render_rows_replaces_previous_rows():
    presenter = ListPresenter()
    presenter.render_rows(default_treasures())
    presenter.render_rows([])
    assert presenter.rows == ()


def test_row_at_rejects_stale_index():
    presenter = ListPresenter()
    presenter.render_rows(default_treasures()[:1])
    with pytest.raises(OutOfRangeError):
        presenter.row_at(1)
