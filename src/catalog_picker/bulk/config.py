"""
Module: bulk.config

Purpose:
    Configuration for the bulk selection fetch loop.

Key Classes:
    - BulkSelectConfig: Page size and optional page cap (immutable)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_BULK_PAGE_SIZE = 100


@dataclass(frozen=True)
class BulkSelectConfig:
    """
    Configuration for select_first_n (immutable).

    Attributes:
        page_size: Page size used to walk the collection; independent of
            (and normally larger than) the display page size
        max_pages: Hard cap on pages fetched; None means walk until the
            target is met or the source is exhausted
    """

    page_size: int = DEFAULT_BULK_PAGE_SIZE
    max_pages: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive: {self.page_size}")
        if self.max_pages is not None and self.max_pages <= 0:
            raise ValueError(f"max_pages must be positive or None: {self.max_pages}")
