"""
Table model for the current catalog page.

Column 0 is a checkbox; the rest are read-only item attributes. Check
states are set programmatically from the global selection and never
emit a selection event. Only user edits (setData) and the page-wide
toggle emit ``pageSelectionChanged``.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt, Signal

from catalog_picker.core.models import Item

# (header, Item attribute); attribute None marks the checkbox column
COLUMNS: Tuple[Tuple[str, Optional[str]], ...] = (
    ("", None),
    ("Title", "title"),
    ("Artist", "artist_display"),
    ("Place of Origin", "place_of_origin"),
    ("Date Start", "date_start"),
    ("Date End", "date_end"),
)

CHECK_COLUMN = 0
SORT_ROLE = Qt.ItemDataRole.UserRole.value + 1
_NUMERIC_ATTRS = {"date_start", "date_end"}


class CatalogTableModel(QAbstractTableModel):
    """Items of the displayed page plus their checked state."""

    # Checked ids on the page, in page order (not a delta, not global state)
    pageSelectionChanged = Signal(list)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._items: List[Item] = []
        self._checked: set[int] = set()

    # ------------------------------------------------------------------
    # Programmatic updates (no selection event)
    # ------------------------------------------------------------------

    def set_page(self, items: Sequence[Item], checked_ids: Iterable[int]) -> None:
        """Replace the rows and their check states."""
        self.beginResetModel()
        self._items = list(items)
        self._checked = set(checked_ids) & {item.id for item in self._items}
        self.endResetModel()

    def set_checked_ids(self, checked_ids: Iterable[int]) -> None:
        """Re-render check states (e.g. after a bulk selection)."""
        self._checked = set(checked_ids) & {item.id for item in self._items}
        if self._items:
            top = self.index(0, CHECK_COLUMN)
            bottom = self.index(len(self._items) - 1, CHECK_COLUMN)
            self.dataChanged.emit(top, bottom, [Qt.ItemDataRole.CheckStateRole])

    # ------------------------------------------------------------------
    # User-driven updates (emit pageSelectionChanged)
    # ------------------------------------------------------------------

    def set_all_checked(self, checked: bool) -> None:
        """Check or uncheck every row on the page, like a header checkbox."""
        if not self._items:
            return
        self._checked = {item.id for item in self._items} if checked else set()
        top = self.index(0, CHECK_COLUMN)
        bottom = self.index(len(self._items) - 1, CHECK_COLUMN)
        self.dataChanged.emit(top, bottom, [Qt.ItemDataRole.CheckStateRole])
        self.pageSelectionChanged.emit(self.checked_ids())

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.ItemDataRole.EditRole) -> bool:
        if not index.isValid() or index.column() != CHECK_COLUMN:
            return False
        if role != Qt.ItemDataRole.CheckStateRole:
            return False

        item_id = self._items[index.row()].id
        if _is_checked(value):
            self._checked.add(item_id)
        else:
            self._checked.discard(item_id)
        self.dataChanged.emit(index, index, [Qt.ItemDataRole.CheckStateRole])
        self.pageSelectionChanged.emit(self.checked_ids())
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def items(self) -> List[Item]:
        return list(self._items)

    def checked_ids(self) -> List[int]:
        """Checked ids in page order."""
        return [item.id for item in self._items if item.id in self._checked]

    def is_checked(self, row: int) -> bool:
        return self._items[row].id in self._checked

    def all_checked(self) -> bool:
        return bool(self._items) and len(self._checked) == len(self._items)

    # ------------------------------------------------------------------
    # QAbstractTableModel interface
    # ------------------------------------------------------------------

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._items)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(COLUMNS)

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        flags = Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
        if index.column() == CHECK_COLUMN:
            flags |= Qt.ItemFlag.ItemIsUserCheckable
        return flags

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole):
        if orientation == Qt.Orientation.Horizontal and role == Qt.ItemDataRole.DisplayRole:
            return COLUMNS[section][0]
        return None

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or index.row() >= len(self._items):
            return None
        item = self._items[index.row()]
        attr = COLUMNS[index.column()][1]

        if attr is None:
            if role == Qt.ItemDataRole.CheckStateRole:
                return Qt.CheckState.Checked if item.id in self._checked else Qt.CheckState.Unchecked
            if role == SORT_ROLE:
                return 1 if item.id in self._checked else 0
            return None

        value = getattr(item, attr)
        if role == Qt.ItemDataRole.DisplayRole:
            return "" if value is None else str(value)
        if role == Qt.ItemDataRole.ToolTipRole and attr == "title" and item.inscriptions:
            return item.inscriptions
        if role == SORT_ROLE:
            if attr in _NUMERIC_ATTRS:
                return float("-inf") if value is None else float(value)
            return (value or "").casefold()
        return None


def _is_checked(value: Any) -> bool:
    # Views pass CheckState enums or plain ints depending on the binding path
    if isinstance(value, Qt.CheckState):
        return value == Qt.CheckState.Checked
    try:
        return int(value) == Qt.CheckState.Checked.value
    except (TypeError, ValueError):
        return bool(value)
