"""
Module: main_window.py

Author: Michael Economou
Date: 2026-10-19

main_window.py
Defines MainWindow, the single screen of the application: a list of items
with "Add" and "Delete" actions. The window wires three pieces together:
- ItemListController, which performs the mutations
- ItemListModel, which mirrors the ObservableList into rows
- QListView, which displays the model
"""

from listsync.config import (
    SHORTCUT_ADD_ITEM,
    SHORTCUT_DELETE_ITEM,
    WINDOW_DEFAULT_SIZE,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from listsync.controllers.item_list_controller import ItemListController
from listsync.core.pyqt_imports import (
    QAbstractItemView,
    QAction,
    QCloseEvent,
    QKeySequence,
    QListView,
    QMainWindow,
    Qt,
    QToolBar,
    QWidget,
)
from listsync.models.item_list_model import ItemListModel
from listsync.models.observable_list import ObservableList
from listsync.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class MainWindow(QMainWindow):
    """
    Main window showing the item list.
    The window owns the list model and releases its subscription on close.
    """

    def __init__(
        self,
        items: ObservableList,
        controller: ItemListController | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.items = items
        self.controller = controller or ItemListController(items)
        self.model = ItemListModel(items, self)

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.resize(*WINDOW_DEFAULT_SIZE)

        self._setup_list_view()
        self._setup_actions()
        self._update_action_states()

        logger.debug("MainWindow initialized", extra={"dev_only": True})

    def _setup_list_view(self) -> None:
        self.list_view = QListView(self)
        self.list_view.setModel(self.model)
        self.list_view.setSelectionMode(QAbstractItemView.ExtendedSelection)
        self.list_view.setContextMenuPolicy(Qt.ActionsContextMenu)
        self.setCentralWidget(self.list_view)

    def _setup_actions(self) -> None:
        self.add_action = QAction("Add", self)
        self.add_action.setShortcut(QKeySequence(SHORTCUT_ADD_ITEM))
        self.add_action.setToolTip("Insert a random value at a random row")
        self.add_action.triggered.connect(self.add_item)

        self.delete_action = QAction("Delete", self)
        self.delete_action.setShortcut(QKeySequence(SHORTCUT_DELETE_ITEM))
        self.delete_action.setToolTip("Delete the selected rows")
        self.delete_action.triggered.connect(self.delete_selected_items)

        toolbar = QToolBar("Items", self)
        toolbar.setMovable(False)
        toolbar.addAction(self.add_action)
        toolbar.addAction(self.delete_action)
        self.addToolBar(toolbar)

        self.list_view.addAction(self.delete_action)
        self.list_view.selectionModel().selectionChanged.connect(self._update_action_states)
        self.model.change_applied.connect(self._update_action_states)

    # =====================================
    # User interactions
    # =====================================

    def add_item(self) -> None:
        """Create: insert a random value at a random row."""
        self.controller.add_random_item()

    def selected_rows(self) -> list[int]:
        """Return the selected row numbers in ascending order."""
        return sorted(index.row() for index in self.list_view.selectionModel().selectedRows())

    def delete_selected_items(self) -> None:
        """Delete: remove every selected row."""
        rows = self.selected_rows()
        if not rows:
            return
        self.controller.delete_rows(rows)

    def _update_action_states(self, *_args) -> None:
        self.delete_action.setEnabled(bool(self.list_view.selectionModel().selectedRows()))

    def closeEvent(self, event: QCloseEvent) -> None:
        """Release the model subscription before the window goes away."""
        self.model.release()
        logger.debug("MainWindow closed, subscription released", extra={"dev_only": True})
        super().closeEvent(event)
