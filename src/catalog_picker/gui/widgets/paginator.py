"""
Paginator bar: first / previous / page label / next / last.
"""
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget


class PaginatorBar(QWidget):
    """Navigation controls for a 0-based page index."""

    pageRequested = Signal(int)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._index = 0
        self._page_count = 1
        self._total = 0

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.first_btn = QPushButton("«")
        self.prev_btn = QPushButton("‹")
        self.label = QLabel()
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.next_btn = QPushButton("›")
        self.last_btn = QPushButton("»")

        layout.addStretch()
        for widget in (self.first_btn, self.prev_btn, self.label, self.next_btn, self.last_btn):
            layout.addWidget(widget)
        layout.addStretch()

        self.first_btn.clicked.connect(lambda: self.pageRequested.emit(0))
        self.prev_btn.clicked.connect(lambda: self.pageRequested.emit(self._index - 1))
        self.next_btn.clicked.connect(lambda: self.pageRequested.emit(self._index + 1))
        self.last_btn.clicked.connect(lambda: self.pageRequested.emit(self._page_count - 1))

        self.set_state(0, 1, 0)

    def set_state(self, index: int, page_count: int, total_records: int) -> None:
        self._index = index
        self._page_count = max(1, page_count)
        self._total = total_records
        self.label.setText(f"Page {index + 1} of {self._page_count} ({total_records} records)")
        has_prev = index > 0
        has_next = index + 1 < self._page_count
        self.first_btn.setEnabled(has_prev)
        self.prev_btn.setEnabled(has_prev)
        self.next_btn.setEnabled(has_next)
        self.last_btn.setEnabled(has_next)

    def set_busy(self, busy: bool) -> None:
        """Disable navigation while a page is loading."""
        if busy:
            for btn in (self.first_btn, self.prev_btn, self.next_btn, self.last_btn):
                btn.setEnabled(False)
        else:
            self.set_state(self._index, self._page_count, self._total)
