"""
Unit Tests for core models (Item, PaginationMeta, PageWindow).
"""

import pytest

from catalog_picker.core.models import Item, PageResult, PageWindow, PaginationMeta


class TestItem:
    """Tests for Item construction."""

    def test_from_api_when_full_record_then_maps_all_fields(self, api_record):
        item = Item.from_api(api_record)
        assert item.id == 27992
        assert item.place_of_origin == "France"
        assert item.date_start == 1884
        assert item.date_end == 1886
        assert item.inscriptions is None

    def test_from_api_when_attributes_missing_then_defaults(self):
        item = Item.from_api({"id": 5})
        assert item.title == ""
        assert item.artist_display is None
        assert item.date_start is None

    def test_from_api_when_null_title_then_empty_string(self):
        assert Item.from_api({"id": 5, "title": None}).title == ""

    def test_from_api_when_date_not_numeric_then_none(self):
        assert Item.from_api({"id": 5, "date_start": "c. 1900"}).date_start is None

    def test_from_api_when_no_id_then_raises(self):
        with pytest.raises(ValueError, match="no 'id'"):
            Item.from_api({"title": "Untitled"})

    @pytest.mark.parametrize("bad_id", ["12", None, 1.5, True])
    def test_init_when_id_not_int_then_raises(self, bad_id):
        with pytest.raises(ValueError, match="must be an integer"):
            Item(id=bad_id)

    def test_from_api_when_record_not_mapping_then_raises(self):
        with pytest.raises(ValueError, match="must be an object"):
            Item.from_api(["id", 1])

    def test_items_are_hashable(self, make_item):
        assert len({make_item(1), make_item(1), make_item(2)}) == 2


class TestPaginationMeta:
    """Tests for PaginationMeta validation."""

    def test_negative_total_raises(self):
        with pytest.raises(ValueError):
            PaginationMeta(total=-1, total_pages=0, page_size=10)

    def test_zero_page_size_raises(self):
        with pytest.raises(ValueError):
            PaginationMeta(total=0, total_pages=0, page_size=0)


class TestPageWindow:
    """Tests for PageWindow navigation helpers."""

    def _window(self, make_item, index, total=30, page_size=12, count=12):
        items = tuple(make_item(i) for i in range(1, count + 1))
        meta = PaginationMeta(total=total, total_pages=-(-total // page_size), page_size=page_size)
        return PageWindow(index=index, page_size=page_size, items=items, pagination=meta)

    def test_ids_in_display_order(self, make_item):
        window = self._window(make_item, 0, count=3)
        assert window.ids == (1, 2, 3)

    def test_first_page_has_next_not_previous(self, make_item):
        window = self._window(make_item, 0)
        assert window.page_count == 3
        assert window.has_next and not window.has_previous

    def test_last_page_has_previous_not_next(self, make_item):
        window = self._window(make_item, 2, count=6)
        assert window.has_previous and not window.has_next

    def test_without_pagination_uses_page_itself(self, make_item):
        window = PageWindow(index=0, page_size=12, items=(make_item(1),))
        assert window.total_records == 1
        assert window.page_count == 1
        assert not window.has_next

    def test_page_result_ids(self, make_item):
        result = PageResult(items=(make_item(4), make_item(2)))
        assert result.ids == (4, 2)
