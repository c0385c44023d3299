"""
Module: source.base

Purpose:
    Abstract interface for a paginated remote collection.

Key Classes:
    - PaginatedSource: Abstract base class for page fetching
    - SourceError: Exception for fetch failures (transport or malformed data)

Dependencies:
    - catalog_picker.core.models: PageResult

Used By:
    - catalog_picker.bulk.selector: Bulk selection loop
    - catalog_picker.gui.controller: Page navigation
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog_picker.core.models import PageResult


class SourceError(Exception):
    """A page could not be fetched or its response could not be understood."""
    pass


class PaginatedSource(ABC):
    """
    Abstract interface for a paginated collection.

    Implementations must accept any page size and report pagination
    totals for the page size used in that specific request.
    """

    @abstractmethod
    def fetch_page(self, page: int, page_size: int) -> PageResult:
        """
        Fetch one page.

        Args:
            page: 1-based page index
            page_size: Items per page

        Returns:
            PageResult with items in source order

        Raises:
            SourceError: If the page cannot be fetched or parsed
        """

    def close(self) -> None:
        """Release any held resources. Default is a no-op."""
