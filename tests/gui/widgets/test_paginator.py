"""Unit tests for PaginatorBar."""

from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from catalog_picker.gui.widgets import PaginatorBar


class TestPaginatorBar:

    def test_first_page_disables_back_buttons(self, qtbot):
        bar = PaginatorBar()
        qtbot.addWidget(bar)
        bar.set_state(0, 3, 30)
        assert not bar.prev_btn.isEnabled()
        assert bar.next_btn.isEnabled()
        assert bar.label.text() == "Page 1 of 3 (30 records)"

    def test_next_requests_following_page(self, qtbot):
        bar = PaginatorBar()
        qtbot.addWidget(bar)
        bar.set_state(1, 3, 30)
        with qtbot.waitSignal(bar.pageRequested, timeout=1000) as blocker:
            QTest.mouseClick(bar.next_btn, Qt.MouseButton.LeftButton)
        assert blocker.args == [2]

    def test_last_requests_final_page(self, qtbot):
        bar = PaginatorBar()
        qtbot.addWidget(bar)
        bar.set_state(0, 3, 30)
        with qtbot.waitSignal(bar.pageRequested, timeout=1000) as blocker:
            QTest.mouseClick(bar.last_btn, Qt.MouseButton.LeftButton)
        assert blocker.args == [2]

    def test_busy_disables_then_restores(self, qtbot):
        bar = PaginatorBar()
        qtbot.addWidget(bar)
        bar.set_state(1, 3, 30)
        bar.set_busy(True)
        assert not bar.next_btn.isEnabled() and not bar.prev_btn.isEnabled()
        bar.set_busy(False)
        assert bar.next_btn.isEnabled() and bar.prev_btn.isEnabled()
        assert bar.label.text() == "Page 2 of 3 (30 records)"
