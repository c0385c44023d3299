"""
Popup asking how many rows to select across the whole collection.
"""
from typing import Optional

from PySide6.QtCore import Qt, Signal, QPoint
from PySide6.QtWidgets import QFrame, QVBoxLayout, QLineEdit, QPushButton, QWidget


class SelectCountPopup(QFrame):
    """
    Small popup with a text input and a Submit button.

    Emits ``submitted`` with the raw text; validation is the receiver's job.
    Closes itself when it loses focus, like any Qt popup.
    """

    submitted = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent, Qt.WindowType.Popup)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setFixedWidth(220)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        self.input = QLineEdit()
        self.input.setPlaceholderText("Enter number of rows to select")
        self.input.returnPressed.connect(self._on_submit)
        layout.addWidget(self.input)

        self.submit_btn = QPushButton("Submit")
        self.submit_btn.clicked.connect(self._on_submit)
        layout.addWidget(self.submit_btn)

    def toggle_at(self, global_pos: QPoint) -> None:
        """Show below ``global_pos``, or hide if already visible."""
        if self.isVisible():
            self.hide()
            return
        self.move(global_pos)
        self.show()
        self.input.setFocus()

    def reset(self) -> None:
        """Hide and clear the input."""
        self.hide()
        self.input.clear()

    def _on_submit(self) -> None:
        self.submitted.emit(self.input.text())
