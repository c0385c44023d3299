"""
Unit tests for MemorySource pagination.
"""

import pytest

from catalog_picker.source import MemorySource


class TestMemorySource:

    def test_pages_slice_in_order(self, source_30):
        assert source_30.fetch_page(1, 12).ids == tuple(range(1, 13))
        assert source_30.fetch_page(3, 12).ids == tuple(range(25, 31))

    def test_pagination_matches_requested_page_size(self, source_30):
        """Different page sizes report their own totals."""
        assert source_30.fetch_page(1, 12).pagination.total_pages == 3
        assert source_30.fetch_page(1, 100).pagination.total_pages == 1
        assert source_30.fetch_page(1, 100).pagination.total == 30

    def test_page_past_end_is_empty(self, source_30):
        assert source_30.fetch_page(4, 12).items == ()

    def test_records_calls(self, source_30):
        source_30.fetch_page(1, 12)
        source_30.fetch_page(2, 100)
        assert source_30.calls == [(1, 12), (2, 100)]

    def test_pagination_can_be_suppressed(self):
        source = MemorySource.numbered(5, report_pagination=False)
        assert source.fetch_page(1, 2).pagination is None

    def test_empty_source_reports_zero_pages(self):
        result = MemorySource([]).fetch_page(1, 10)
        assert result.items == ()
        assert result.pagination.total_pages == 0

    def test_invalid_page_raises(self, source_30):
        with pytest.raises(ValueError):
            source_30.fetch_page(0, 12)
