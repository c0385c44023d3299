"""
Module: gui.controller

Purpose:
    Glue between the catalog window and the core. Fetches pages and runs
    bulk selections on worker threads, then applies the results to the
    SelectionTracker on the GUI thread.

Key Classes:
    - CatalogController: QObject exposing page/selection signals

Dependencies:
    - PySide6: Signals (queued across threads)
    - catalog_picker.core: SelectionTracker, PageWindow
    - catalog_picker.source: PaginatedSource, SourceError
    - catalog_picker.bulk: select_first_n, parse_count, CancelToken

Used By:
    - catalog_picker.gui.main_window: MainWindow

Failure policy:
    - Page fetch failure: previous page and selection are kept; no
      reconciliation happens; page_load_failed is emitted.
    - Bulk fetch failure: the run is aborted and nothing is published;
      the previous selection is kept; bulk_select_failed is emitted.
    - Invalid bulk count: silently rejected (logged at DEBUG).
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, List, Optional

from PySide6.QtCore import QObject, Signal

from catalog_picker.bulk import (
    BulkSelectCancelled,
    BulkSelectConfig,
    BulkSelectResult,
    CancelToken,
    parse_count,
    select_first_n,
)
from catalog_picker.core import PageResult, PageWindow, SelectionTracker
from catalog_picker.source import PaginatedSource, SourceError

logger = logging.getLogger(__name__)


class CatalogController(QObject):
    """
    Display adapter logic, free of widgets.

    Public signals are always emitted on the GUI thread.
    """

    # PageWindow, checked ids for that page (tracker.visible_selection)
    page_loaded = Signal(object, list)
    page_load_failed = Signal(str)
    loading_changed = Signal(bool)
    selection_count_changed = Signal(int)
    # Checked ids of the current page after a wholesale replace
    visible_selection_changed = Signal(list)
    bulk_select_started = Signal(int)
    bulk_select_finished = Signal(object)  # BulkSelectResult
    bulk_select_failed = Signal(str)
    bulk_select_cancelled = Signal()

    # Worker -> GUI thread
    _page_fetched = Signal(int, int, object)  # seq, index, PageResult
    _page_fetch_failed = Signal(int, int, str)  # seq, index, message
    _bulk_done = Signal(object, object)  # token, BulkSelectResult
    _bulk_error = Signal(object, str)  # token, message

    def __init__(
        self,
        source: PaginatedSource,
        display_page_size: int = 12,
        bulk_config: Optional[BulkSelectConfig] = None,
        threaded: bool = True,
        parent: Optional[QObject] = None,
    ):
        """
        Args:
            source: Collection to page through
            display_page_size: Rows per table page
            bulk_config: Page size / cap for bulk selection
            threaded: Run fetches on worker threads; False runs them inline
                (used by tests and scripted use)
        """
        super().__init__(parent)
        if display_page_size <= 0:
            raise ValueError(f"display_page_size must be positive: {display_page_size}")

        self.source = source
        self.display_page_size = display_page_size
        self.bulk_config = bulk_config or BulkSelectConfig()
        self.threaded = threaded
        self.tracker = SelectionTracker(on_change=self.selection_count_changed.emit)

        self.page: Optional[PageWindow] = None
        self._page_seq = 0
        self._loading = False
        self._bulk_token: Optional[CancelToken] = None
        self._shut_down = False

        self._page_fetched.connect(self._on_page_fetched)
        self._page_fetch_failed.connect(self._on_page_fetch_failed)
        self._bulk_done.connect(self._on_bulk_done)
        self._bulk_error.connect(self._on_bulk_error)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def selection_count(self) -> int:
        return self.tracker.count()

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_bulk_running(self) -> bool:
        return self._bulk_token is not None

    # ------------------------------------------------------------------
    # Page navigation
    # ------------------------------------------------------------------

    def load_page(self, index: int) -> None:
        """
        Fetch display page ``index`` (0-based).

        A newer request supersedes older ones still in flight; their
        responses are dropped.
        """
        if index < 0:
            raise ValueError(f"page index must be non-negative: {index}")

        self._page_seq += 1
        seq = self._page_seq
        self._set_loading(True)
        logger.debug(f"Loading page {index} (request {seq})")

        def _fetch() -> None:
            try:
                result = self.source.fetch_page(index + 1, self.display_page_size)
            except SourceError as e:
                logger.warning(f"Failed to load page {index + 1}: {e}")
                self._post(self._page_fetch_failed, seq, index, str(e))
            except Exception as e:
                if self._shut_down:
                    logger.debug(f"Page {index + 1} worker stopped after shutdown: {e}")
                    return
                logger.exception(f"Unexpected error loading page {index + 1}")
                self._post(self._page_fetch_failed, seq, index, f"Unexpected error: {e}")
            else:
                self._post(self._page_fetched, seq, index, result)

        self._run(_fetch, name=f"page-{index}")

    def next_page(self) -> None:
        if self.page is not None and self.page.has_next:
            self.load_page(self.page.index + 1)

    def previous_page(self) -> None:
        if self.page is not None and self.page.has_previous:
            self.load_page(self.page.index - 1)

    def _on_page_fetched(self, seq: int, index: int, result: PageResult) -> None:
        if seq != self._page_seq:
            logger.debug(f"Dropping stale page {index} (request {seq}, latest {self._page_seq})")
            return
        self._set_loading(False)
        self.page = PageWindow(
            index=index,
            page_size=self.display_page_size,
            items=result.items,
            pagination=result.pagination,
        )
        self.page_loaded.emit(self.page, self.tracker.visible_selection(self.page.ids))

    def _on_page_fetch_failed(self, seq: int, index: int, message: str) -> None:
        if seq != self._page_seq:
            return
        self._set_loading(False)
        self.page_load_failed.emit(f"Could not load page {index + 1}: {message}")

    # ------------------------------------------------------------------
    # Page-scoped selection
    # ------------------------------------------------------------------

    def on_page_selection_changed(self, selected_on_page: Iterable[int]) -> List[int]:
        """
        Reconcile a page-scoped selection event into the global set.

        Args:
            selected_on_page: Ids the user has checked on the current page

        Returns:
            Checked ids for the current page after reconciliation
        """
        if self.page is None:
            logger.debug("Selection event with no page displayed; ignored")
            return []
        self.tracker.reconcile_page(self.page.ids, selected_on_page)
        return self.tracker.visible_selection(self.page.ids)

    def visible_selection(self) -> List[int]:
        if self.page is None:
            return []
        return self.tracker.visible_selection(self.page.ids)

    def clear_selection(self) -> None:
        self.tracker.clear()
        self.visible_selection_changed.emit(self.visible_selection())

    # ------------------------------------------------------------------
    # Bulk selection
    # ------------------------------------------------------------------

    def request_bulk_select(self, text: object) -> bool:
        """
        Start selecting the first N items of the collection.

        Invalid input is rejected silently: nothing runs and the current
        selection is untouched. A run already in flight is cancelled.

        Args:
            text: User input (str) or an int

        Returns:
            True if a run was started
        """
        count = parse_count(text)
        if count is None:
            logger.debug(f"Ignoring invalid bulk count {text!r}")
            return False

        if self._bulk_token is not None:
            logger.info("Cancelling previous bulk selection")
            self._bulk_token.cancel()

        token = CancelToken()
        self._bulk_token = token
        self.bulk_select_started.emit(count)

        def _select() -> None:
            try:
                result = select_first_n(self.source, count, self.bulk_config, token)
            except BulkSelectCancelled:
                logger.info(f"Bulk selection of {count} cancelled")
                self._post(self._bulk_error, token, "Cancelled")
            except SourceError as e:
                logger.warning(f"Bulk selection of {count} aborted: {e}")
                self._post(self._bulk_error, token, str(e))
            except Exception as e:
                if self._shut_down:
                    logger.debug(f"Bulk selection of {count} stopped after shutdown: {e}")
                    return
                logger.exception(f"Unexpected error during bulk selection of {count}")
                self._post(self._bulk_error, token, f"Unexpected error: {e}")
            else:
                self._post(self._bulk_done, token, result)

        self._run(_select, name=f"bulk-{count}")
        return True

    def cancel_bulk_select(self) -> bool:
        """
        Cancel the running bulk selection, if any.

        The run stops at its next page boundary and never publishes.

        Returns:
            True if a run was cancelled
        """
        token = self._bulk_token
        if token is None:
            return False
        token.cancel()
        self._bulk_token = None
        self.bulk_select_cancelled.emit()
        return True

    def shutdown(self) -> None:
        """
        Cancel background work and ignore any late results.

        Workers still blocked in the source finish quietly: their results
        and errors are dropped instead of being emitted, so the source can
        be closed right after this returns.
        """
        self._shut_down = True
        self.cancel_bulk_select()
        self._page_seq += 1
        self._set_loading(False)

    def _on_bulk_done(self, token: CancelToken, result: BulkSelectResult) -> None:
        if token is not self._bulk_token or token.cancelled:
            logger.debug("Dropping result of a superseded bulk selection")
            return
        self._bulk_token = None
        self.tracker.replace(result.ids)
        self.bulk_select_finished.emit(result)
        self.visible_selection_changed.emit(self.visible_selection())

    def _on_bulk_error(self, token: CancelToken, message: str) -> None:
        if token is not self._bulk_token:
            return
        self._bulk_token = None
        self.bulk_select_failed.emit(f"Bulk selection failed: {message}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _set_loading(self, loading: bool) -> None:
        if loading != self._loading:
            self._loading = loading
            self.loading_changed.emit(loading)

    def _post(self, signal, *args) -> None:
        # Called from worker threads
        if self._shut_down:
            logger.debug("Dropping worker result after shutdown")
            return
        signal.emit(*args)

    def _run(self, fn: Callable[[], None], name: str) -> None:
        if not self.threaded:
            fn()
            return
        thread = threading.Thread(target=fn, name=name, daemon=True)
        thread.start()
