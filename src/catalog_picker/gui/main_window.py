"""
Main Window for Catalog Picker.
"""
import queue
from typing import List, Optional

from PySide6.QtCore import Qt, QSortFilterProxyModel, QTimer, QPoint
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QTableView, QHeaderView, QStatusBar, QAbstractItemView,
)

from catalog_picker.bulk import BulkSelectResult
from catalog_picker.core import PageWindow
from catalog_picker.gui.controller import CatalogController
from catalog_picker.gui.models import CatalogTableModel, SORT_ROLE
from catalog_picker.gui.models.catalog_table_model import CHECK_COLUMN
from catalog_picker.gui.utils.logging_utils import drain_queue
from catalog_picker.gui.widgets import PaginatorBar, SelectCountPopup

STATUS_TIMEOUT_MS = 6000


class MainWindow(QMainWindow):
    def __init__(
        self,
        controller: CatalogController,
        log_queue: Optional[queue.Queue] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.controller = controller
        self.log_queue = log_queue

        self.setWindowTitle("Catalog Picker")
        self.resize(1100, 720)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        title = QLabel("Artworks Table with Input-Based Global Selection")
        title.setStyleSheet("font-size: 18px; font-weight: 600;")
        layout.addWidget(title)

        self.count_label = QLabel()
        layout.addWidget(self.count_label)

        # --- Table ---
        self.table_model = CatalogTableModel(self)
        self.proxy = QSortFilterProxyModel(self)
        self.proxy.setSourceModel(self.table_model)
        self.proxy.setSortRole(SORT_ROLE)

        self.table = QTableView()
        self.table.setModel(self.proxy)
        self.table.setSortingEnabled(True)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(CHECK_COLUMN, QHeaderView.ResizeMode.Fixed)
        header.resizeSection(CHECK_COLUMN, 36)
        self.table.sortByColumn(-1, Qt.SortOrder.AscendingOrder)
        layout.addWidget(self.table, 1)

        self.paginator = PaginatorBar()
        layout.addWidget(self.paginator)

        # --- Actions ---
        actions = QHBoxLayout()
        self.select_rows_btn = QPushButton("Select Rows")
        self.toggle_page_btn = QPushButton("Toggle Page")
        self.cancel_btn = QPushButton("Cancel Selection")
        self.cancel_btn.setVisible(False)
        self.clear_btn = QPushButton("Clear Selection")
        actions.addWidget(self.select_rows_btn)
        actions.addWidget(self.cancel_btn)
        actions.addWidget(self.toggle_page_btn)
        actions.addStretch()
        actions.addWidget(self.clear_btn)
        layout.addLayout(actions)

        self.setCentralWidget(central)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.popup = SelectCountPopup(self)

        # --- Wiring ---
        self.paginator.pageRequested.connect(self.controller.load_page)
        self.table_model.pageSelectionChanged.connect(self._on_page_selection_changed)
        self.select_rows_btn.clicked.connect(self._on_select_rows_clicked)
        self.toggle_page_btn.clicked.connect(self._on_toggle_page_clicked)
        self.cancel_btn.clicked.connect(self.controller.cancel_bulk_select)
        self.clear_btn.clicked.connect(self.controller.clear_selection)
        self.popup.submitted.connect(self._on_count_submitted)

        self.controller.page_loaded.connect(self._on_page_loaded)
        self.controller.page_load_failed.connect(self._show_error)
        self.controller.loading_changed.connect(self.paginator.set_busy)
        self.controller.selection_count_changed.connect(self._update_count_label)
        self.controller.visible_selection_changed.connect(self.table_model.set_checked_ids)
        self.controller.bulk_select_started.connect(self._on_bulk_started)
        self.controller.bulk_select_finished.connect(self._on_bulk_finished)
        self.controller.bulk_select_failed.connect(self._on_bulk_failed)
        self.controller.bulk_select_cancelled.connect(self._on_bulk_cancelled)

        self._update_count_label(self.controller.selection_count)

        if self.log_queue is not None:
            self._log_timer = QTimer(self)
            self._log_timer.timeout.connect(self._poll_log_queue)
            self._log_timer.start(250)

    # ------------------------------------------------------------------
    # Page display
    # ------------------------------------------------------------------

    def _on_page_loaded(self, page: PageWindow, checked_ids: List[int]) -> None:
        self.table_model.set_page(page.items, checked_ids)
        self.paginator.set_state(page.index, page.page_count, page.total_records)

    def _on_page_selection_changed(self, checked_ids: List[int]) -> None:
        self.controller.on_page_selection_changed(checked_ids)

    def _on_toggle_page_clicked(self) -> None:
        self.table_model.set_all_checked(not self.table_model.all_checked())

    def _update_count_label(self, count: int) -> None:
        self.count_label.setText(f"{count} row(s) globally selected")

    # ------------------------------------------------------------------
    # Bulk selection
    # ------------------------------------------------------------------

    def _on_select_rows_clicked(self) -> None:
        pos = self.select_rows_btn.mapToGlobal(QPoint(0, self.select_rows_btn.height()))
        self.popup.toggle_at(pos)

    def _on_count_submitted(self, text: str) -> None:
        if self.controller.request_bulk_select(text):
            self.popup.reset()

    def _on_bulk_started(self, count: int) -> None:
        self.cancel_btn.setVisible(True)
        self.status_bar.showMessage(f"Selecting first {count} row(s)...")

    def _on_bulk_finished(self, result: BulkSelectResult) -> None:
        self.cancel_btn.setVisible(False)
        message = f"Selected {len(result)} row(s)"
        if result.exhausted and len(result) < result.requested:
            message += f" (collection has only {len(result)} of the {result.requested} requested)"
        self.status_bar.showMessage(message, STATUS_TIMEOUT_MS)

    def _on_bulk_failed(self, message: str) -> None:
        self.cancel_btn.setVisible(False)
        self._show_error(message)

    def _on_bulk_cancelled(self) -> None:
        self.cancel_btn.setVisible(False)
        self.status_bar.showMessage("Bulk selection cancelled", STATUS_TIMEOUT_MS)

    # ------------------------------------------------------------------
    # Status / lifecycle
    # ------------------------------------------------------------------

    def _show_error(self, message: str) -> None:
        self.status_bar.showMessage(message, STATUS_TIMEOUT_MS)

    def _poll_log_queue(self) -> None:
        entries = drain_queue(self.log_queue)
        if entries:
            message, level = entries[-1]
            self.status_bar.showMessage(f"{level}: {message}", STATUS_TIMEOUT_MS)

    def showEvent(self, event):
        super().showEvent(event)
        if self.controller.page is None and not self.controller.is_loading:
            self.controller.load_page(0)

    def closeEvent(self, event):
        self.controller.shutdown()
        super().closeEvent(event)
