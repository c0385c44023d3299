"""
Module: pages

Purpose:
    Page-level data passed between a paginated source and its consumers.

Key Classes:
    - PaginationMeta: Totals reported by the source for one page size
    - PageResult: One fetched page (items + optional pagination)
    - PageWindow: The page currently shown in the table

Dependencies:
    - dataclasses (std)
    - .items.Item

Used By:
    - catalog_picker.source: Produces PageResult
    - catalog_picker.bulk.selector: Walks PageResults
    - catalog_picker.gui.controller: Publishes PageWindow
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .items import Item


@dataclass(frozen=True)
class PaginationMeta:
    """
    Pagination totals for the page size used in a specific request.

    Advisory only: used to stop bulk fetching and to render the paginator.

    Attributes:
        total: Total item count across all pages
        total_pages: Page count for page_size
        page_size: Page size the totals were computed for
    """

    total: int
    total_pages: int
    page_size: int

    def __post_init__(self) -> None:
        if self.total < 0:
            raise ValueError(f"total must be non-negative: {self.total}")
        if self.total_pages < 0:
            raise ValueError(f"total_pages must be non-negative: {self.total_pages}")
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive: {self.page_size}")


@dataclass(frozen=True)
class PageResult:
    """
    One page returned by a PaginatedSource.

    Attributes:
        items: Items in source order
        pagination: Totals, or None when the source reported none
    """

    items: Tuple[Item, ...]
    pagination: Optional[PaginationMeta] = None

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(item.id for item in self.items)


@dataclass(frozen=True)
class PageWindow:
    """
    The page currently displayed.

    Transient: replaced wholesale on every navigation.

    Attributes:
        index: 0-based display page index
        page_size: Fixed display page size
        items: Items on the page
        pagination: Totals from the source, if reported
    """

    index: int
    page_size: int
    items: Tuple[Item, ...]
    pagination: Optional[PaginationMeta] = None

    @property
    def ids(self) -> Tuple[int, ...]:
        """Identifiers on this page, in display order."""
        return tuple(item.id for item in self.items)

    @property
    def total_records(self) -> int:
        """Total item count (falls back to the page's own size)."""
        if self.pagination is None:
            return len(self.items)
        return self.pagination.total

    @property
    def page_count(self) -> int:
        """Number of display pages (at least 1 so the paginator has a page)."""
        if self.pagination is None or self.pagination.total_pages <= 0:
            return max(1, self.index + 1)
        return self.pagination.total_pages

    @property
    def has_previous(self) -> bool:
        return self.index > 0

    @property
    def has_next(self) -> bool:
        return self.index + 1 < self.page_count
