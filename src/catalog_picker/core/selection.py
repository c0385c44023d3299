"""
Module: selection

Purpose:
    Cross-page selection state. Holds the set of globally selected item
    identifiers and reconciles page-scoped selection events into it.

Key Classes:
    - SelectionTracker: Owner of the global identifier set

Dependencies:
    - logging, typing (std)

Used By:
    - catalog_picker.gui.controller: Display adapter glue

Invariants:
    - The set stores identifiers only, never Items
    - Rows rendered as checked == visible_selection(page_ids)
    - reconcile_page() never touches identifiers outside the given page,
      except for adding stray selected ids
"""

from __future__ import annotations

import logging
from typing import Callable, FrozenSet, Iterable, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)


class SelectionTracker:
    """
    Durable set of selected item identifiers spanning page loads.

    Not thread-safe: mutate it from one thread (the GUI thread). Bulk
    selection builds its set elsewhere and hands it to replace().

    Example:
        >>> tracker = SelectionTracker()
        >>> tracker.reconcile_page([1, 2, 3], {1, 3})
        frozenset({1, 3})
        >>> tracker.reconcile_page([4, 5], set())
        frozenset({1, 3})
        >>> tracker.visible_selection([3, 2, 1])
        [3, 1]
    """

    def __init__(
        self,
        ids: Iterable[int] = (),
        on_change: Optional[Callable[[int], None]] = None,
    ) -> None:
        """
        Args:
            ids: Initial selection
            on_change: Called with the new count after every mutation
        """
        self._ids: set[int] = set(ids)
        self._on_change = on_change

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __iter__(self) -> Iterator[int]:
        return iter(self.snapshot())

    def count(self) -> int:
        """Number of globally selected identifiers."""
        return len(self._ids)

    def snapshot(self) -> FrozenSet[int]:
        """Immutable copy of the current selection."""
        return frozenset(self._ids)

    def visible_selection(self, page_item_ids: Sequence[int]) -> List[int]:
        """
        Identifiers of the given page that are globally selected.

        Pure read. Preserves page order.

        Args:
            page_item_ids: Identifiers on the displayed page

        Returns:
            page_item_ids ∩ selection, in page order
        """
        return [item_id for item_id in page_item_ids if item_id in self._ids]

    def reconcile_page(
        self,
        page_item_ids: Sequence[int],
        selected_on_page: Iterable[int],
    ) -> FrozenSet[int]:
        """
        Merge a page-scoped selection event into the global set.

        Every page identifier missing from selected_on_page is removed;
        every identifier in selected_on_page is added. Identifiers that
        are not on the page keep their current membership. Idempotent.

        Args:
            page_item_ids: Identifiers on the displayed page
            selected_on_page: Identifiers the user has checked on that page

        Returns:
            Snapshot of the updated selection
        """
        selected = set(selected_on_page)
        stray = selected.difference(page_item_ids)
        if stray:
            logger.debug(f"Selection event carried {len(stray)} id(s) not on the page: {sorted(stray)}")

        before = len(self._ids)
        self._ids.difference_update(i for i in page_item_ids if i not in selected)
        self._ids.update(selected)

        logger.debug(f"Reconciled page of {len(page_item_ids)}: {before} -> {len(self._ids)} selected")
        self._notify()
        return self.snapshot()

    def replace(self, ids: Iterable[int]) -> FrozenSet[int]:
        """
        Replace the whole selection in one step.

        Used by bulk selection; the previous selection is discarded, not merged.

        Returns:
            Snapshot of the new selection
        """
        self._ids = set(ids)
        logger.info(f"Selection replaced: {len(self._ids)} selected")
        self._notify()
        return self.snapshot()

    def clear(self) -> None:
        """Deselect everything."""
        self._ids.clear()
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(len(self._ids))
