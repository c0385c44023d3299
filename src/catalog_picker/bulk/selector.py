"""
Module: bulk.selector

Purpose:
    Materialize "the first N items of the collection" by walking a
    PaginatedSource page by page, one request at a time.

Key Functions:
    - select_first_n(): Main entry point
    - parse_count(): Validate user-entered counts

Key Classes:
    - BulkSelectResult: Selected identifiers plus fetch statistics

Dependencies:
    - catalog_picker.source: PaginatedSource
    - .config: BulkSelectConfig
    - .cancellation: CancelToken

Used By:
    - catalog_picker.gui.controller: Bulk-count requests

Algorithm:
    Pages are fetched from page 1 with config.page_size. Items are
    scanned in source order; each unseen id is kept until N are held.
    The loop stops after a page when the target is met, the source
    reports no pagination, the last reported page was reached, the page
    came back empty, or config.max_pages pages were fetched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from catalog_picker.source import PaginatedSource

from .cancellation import CancelToken
from .config import BulkSelectConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BulkSelectResult:
    """
    Outcome of a completed bulk selection (immutable).

    Attributes:
        ordered_ids: Selected identifiers in source order (page, then item)
        requested: The N that was asked for
        pages_fetched: Number of fetch_page() calls made
        exhausted: True if the source ran out before N unique ids were found

    Example:
        >>> result = select_first_n(MemorySource.numbered(30), 150)
        >>> (len(result), result.exhausted)
        (30, True)
    """

    ordered_ids: Tuple[int, ...]
    requested: int
    pages_fetched: int
    exhausted: bool

    @property
    def ids(self) -> FrozenSet[int]:
        return frozenset(self.ordered_ids)

    def __len__(self) -> int:
        return len(self.ordered_ids)


def parse_count(text: object) -> Optional[int]:
    """
    Parse a user-entered bulk count.

    Accepts a base-10 integer greater than zero, surrounded by optional
    whitespace. Everything else (empty, non-numeric, decimals, zero,
    negatives) yields None.

    Example:
        >>> parse_count(" 25 ")
        25
        >>> parse_count("0") is None
        True
    """
    if isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text if text > 0 else None
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    # ASCII only: int() would otherwise accept other scripts' digits
    if not (stripped.isascii() and stripped.isdigit()):
        return None
    value = int(stripped)
    return value if value > 0 else None


def select_first_n(
    source: PaginatedSource,
    n: int,
    config: Optional[BulkSelectConfig] = None,
    cancel_token: Optional[CancelToken] = None,
) -> BulkSelectResult:
    """
    Collect the first n unique identifiers of the collection.

    Requests are issued sequentially; each waits for the previous response.
    Nothing is published while the loop runs; the caller decides what to
    do with the result.

    Args:
        source: Collection to walk
        n: Number of identifiers wanted (positive)
        config: Page size and page cap (defaults to BulkSelectConfig())
        cancel_token: Checked before every request

    Returns:
        BulkSelectResult with min(n, distinct available) identifiers

    Raises:
        ValueError: If n is not a positive integer
        BulkSelectCancelled: If cancel_token was cancelled before the loop ended
        SourceError: If a page fetch fails (propagated from the source)
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise ValueError(f"n must be a positive integer: {n!r}")
    config = config or BulkSelectConfig()

    seen: set[int] = set()
    ordered: List[int] = []
    remaining = n
    page = 1
    pages_fetched = 0
    exhausted = False

    logger.info(f"Bulk selecting first {n} items (page_size={config.page_size})")

    while True:
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        result = source.fetch_page(page, config.page_size)
        pages_fetched += 1

        for item in result.items:
            if item.id not in seen:
                seen.add(item.id)
                ordered.append(item.id)
                remaining -= 1
            if remaining <= 0:
                break

        if remaining <= 0:
            break

        meta = result.pagination
        if meta is None or not meta.total_pages or page >= meta.total_pages:
            exhausted = True
            break
        if not result.items:
            logger.warning(f"Page {page} was empty although {meta.total_pages} pages were reported")
            exhausted = True
            break
        if config.max_pages is not None and pages_fetched >= config.max_pages:
            logger.warning(f"Stopped after max_pages={config.max_pages} with {len(ordered)}/{n} selected")
            break

        logger.debug(f"Page {page}/{meta.total_pages}: {len(ordered)}/{n} selected")
        page += 1

    logger.info(f"Bulk selection collected {len(ordered)}/{n} ids in {pages_fetched} page(s)")
    return BulkSelectResult(
        ordered_ids=tuple(ordered),
        requested=n,
        pages_fetched=pages_fetched,
        exhausted=exhausted,
    )
