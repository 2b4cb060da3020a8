"""
Tests for MainWindow and the boot factory.

Author: Michael Economou
Date: 2026-10-19
"""

import random

import pytest
from PyQt5.QtCore import QItemSelectionModel

from listsync.boot import create_main_window
from listsync.config import WINDOW_TITLE


def _select(window, rows):
    selection = window.list_view.selectionModel()
    selection.clearSelection()
    for row in rows:
        selection.select(window.model.index(row, 0), QItemSelectionModel.Select)


@pytest.mark.gui
class TestMainWindow:
    """Test the window wiring."""

    def test_window_shows_default_items(self, qtbot):
        window = create_main_window()
        qtbot.addWidget(window)

        assert window.windowTitle() == WINDOW_TITLE
        assert window.list_view.model() is window.model
        assert window.model.rowCount() == 10

    def test_add_action_inserts_row(self, qtbot):
        window = create_main_window([0, 1, 2], random.Random(3))
        qtbot.addWidget(window)

        with qtbot.waitSignal(window.model.rowsInserted, timeout=1000):
            window.add_action.trigger()

        assert window.model.rowCount() == 4
        assert window.model.rows() == list(window.items.snapshot())

    def test_delete_action_removes_selected_rows(self, qtbot):
        window = create_main_window([0, 1, 2, 3])
        qtbot.addWidget(window)

        _select(window, [0, 2])
        assert window.selected_rows() == [0, 2]
        assert window.delete_action.isEnabled()

        window.delete_action.trigger()

        assert window.items.snapshot() == (1, 3)
        assert window.model.rows() == [1, 3]

    def test_delete_without_selection_does_nothing(self, qtbot):
        window = create_main_window([0, 1])
        qtbot.addWidget(window)

        window.delete_selected_items()

        assert window.items.snapshot() == (0, 1)
        assert not window.delete_action.isEnabled()

    def test_close_releases_subscription(self, qtbot):
        window = create_main_window([0, 1])
        qtbot.addWidget(window)
        window.show()

        window.close()
        window.items.insert(9, 0)

        assert not window.model.is_tracking()
        assert window.model.rows() == [0, 1]
