"""
Module: source.memory

Purpose:
    In-memory PaginatedSource. Used for offline runs and tests.

Key Classes:
    - MemorySource: Slices a fixed list of Items into pages
"""

from __future__ import annotations

import math
import threading
from typing import Iterable, List, Optional, Tuple

from catalog_picker.core.models import Item, PageResult, PaginationMeta

from .base import PaginatedSource


class MemorySource(PaginatedSource):
    """
    Serve pages from a list of Items.

    Attributes:
        calls: (page, page_size) of every fetch_page() call, in order
        report_pagination: If False, pages come back with pagination=None

    Example:
        >>> source = MemorySource.numbered(30)
        >>> source.fetch_page(3, 12).ids
        (25, 26, 27, 28, 29, 30)
    """

    def __init__(self, items: Iterable[Item], report_pagination: bool = True) -> None:
        self._items: List[Item] = list(items)
        self.report_pagination = report_pagination
        self.calls: List[Tuple[int, int]] = []
        self._lock = threading.Lock()

    @classmethod
    def numbered(cls, count: int, start: int = 1, **kwargs) -> "MemorySource":
        """Source with ``count`` items whose ids run from ``start``."""
        return cls(
            (Item(id=i, title=f"Item {i}") for i in range(start, start + count)),
            **kwargs,
        )

    def __len__(self) -> int:
        return len(self._items)

    def fetch_page(self, page: int, page_size: int) -> PageResult:
        if page < 1:
            raise ValueError(f"page must be >= 1: {page}")
        if page_size <= 0:
            raise ValueError(f"page_size must be positive: {page_size}")

        with self._lock:
            self.calls.append((page, page_size))

        start = (page - 1) * page_size
        items = tuple(self._items[start:start + page_size])
        pagination: Optional[PaginationMeta] = None
        if self.report_pagination:
            total = len(self._items)
            pagination = PaginationMeta(
                total=total,
                total_pages=math.ceil(total / page_size),
                page_size=page_size,
            )
        return PageResult(items=items, pagination=pagination)
