"""Module: item_list_model.py.

Author: Michael Economou
Date: 2026-10-19

Qt list model presenting an ObservableList to a QListView.

The model keeps its own row mirror and applies every Change it receives
as an incremental row insertion or removal, so attached views animate
single rows instead of resetting.
"""

from typing import Any

from listsync.core.pyqt_imports import QAbstractListModel, QModelIndex, Qt, pyqtSignal
from listsync.models.change import Change, DeletedAt, InsertedAt
from listsync.models.observable_list import ObservableList
from listsync.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ItemListModel(QAbstractListModel):
    """List model that tracks an ObservableList through its change channel.

    The model owns its Subscription and releases it in release(); after
    that the rows stay frozen at their last state.
    """

    change_applied = pyqtSignal(object)  # Emitted with the Change after rows are updated

    def __init__(self, items: ObservableList, parent: Any = None) -> None:
        """Initialize the model and subscribe to changes.

        Args:
            items: The list to present
            parent: Optional parent QObject

        """
        super().__init__(parent)
        self._items = items
        self._rows: list[int] = list(items.snapshot())
        self._subscription = items.subscribe(self._on_change)
        logger.debug("ItemListModel tracking %d rows", len(self._rows), extra={"dev_only": True})

    # ==================== Qt model interface ====================

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        """Return number of rows (flat list, so child indexes have none)."""
        if parent.isValid():
            return 0
        return len(self._rows)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        """Return data for given index and role."""
        if not index.isValid() or not 0 <= index.row() < len(self._rows):
            return None

        value = self._rows[index.row()]

        if role == Qt.DisplayRole:
            return str(value)

        if role == Qt.ToolTipRole:
            return f"Row {index.row()}: {value}"

        return None

    # ==================== Subscription ====================

    def rows(self) -> list[int]:
        """Return a copy of the presented rows."""
        return list(self._rows)

    def is_tracking(self) -> bool:
        """True while the model still receives changes."""
        return self._subscription.active

    def release(self) -> None:
        """Stop listening for changes. Safe to call more than once."""
        self._subscription.release()

    def _on_change(self, change: Change) -> None:
        if isinstance(change, InsertedAt):
            for row in change.ascending():
                self.beginInsertRows(QModelIndex(), row, row)
                self._rows.insert(row, self._items[row])
                self.endInsertRows()
        elif isinstance(change, DeletedAt):
            for row in change.descending():
                self.beginRemoveRows(QModelIndex(), row, row)
                del self._rows[row]
                self.endRemoveRows()
        else:
            logger.warning("Unhandled change type: %r", change)
            return

        logger.debug("Applied %r (rows: %d)", change, len(self._rows), extra={"dev_only": True})
        self.change_applied.emit(change)
