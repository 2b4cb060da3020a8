"""
Tests for ItemListModel.

Author: Michael Economou
Date: 2026-10-19

Tests that the Qt list model mirrors its ObservableList through
incremental row insertions and removals.
"""

import pytest
from PyQt5.QtCore import QModelIndex, Qt

from listsync.models import DeletedAt, InsertedAt, ObservableList
from listsync.models.item_list_model import ItemListModel


def _display_rows(model):
    return [model.data(model.index(row, 0), Qt.DisplayRole) for row in range(model.rowCount())]


class TestItemListModelCreation:
    """Test initial state."""

    @pytest.mark.usefixtures("qapp")
    def test_rows_match_initial_snapshot(self):
        items = ObservableList([4, 5, 6])
        model = ItemListModel(items)

        assert model.rowCount() == 3
        assert model.rows() == [4, 5, 6]
        assert _display_rows(model) == ["4", "5", "6"]
        assert model.is_tracking()

    @pytest.mark.usefixtures("qapp")
    def test_child_index_has_no_rows(self):
        model = ItemListModel(ObservableList([1]))
        assert model.rowCount(model.index(0, 0)) == 0

    @pytest.mark.usefixtures("qapp")
    def test_tooltip_and_invalid_index(self):
        model = ItemListModel(ObservableList([7]))

        assert model.data(model.index(0, 0), Qt.ToolTipRole) == "Row 0: 7"
        assert model.data(QModelIndex(), Qt.DisplayRole) is None
        assert model.data(model.index(0, 0), Qt.DecorationRole) is None


class TestItemListModelUpdates:
    """Test incremental updates driven by Change events."""

    def test_insert_emits_rows_inserted(self, qtbot):
        items = ObservableList([0, 1, 2])
        model = ItemListModel(items)

        with qtbot.waitSignal(model.rowsInserted, timeout=1000) as blocker:
            items.insert(9, 1)

        _parent, first, last = blocker.args
        assert (first, last) == (1, 1)
        assert model.rows() == [0, 9, 1, 2]

    def test_delete_emits_rows_removed(self, qtbot):
        items = ObservableList([0, 1, 2])
        model = ItemListModel(items)

        with qtbot.waitSignal(model.rowsRemoved, timeout=1000) as blocker:
            items.delete(2)

        _parent, first, last = blocker.args
        assert (first, last) == (2, 2)
        assert model.rows() == [0, 1]

    def test_change_applied_payload(self, qtbot):
        items = ObservableList([0, 1, 2])
        model = ItemListModel(items)

        with qtbot.waitSignal(model.change_applied, timeout=1000) as blocker:
            items.insert(3, -1)

        assert blocker.args == [InsertedAt({0})]

    def test_ignored_delete_leaves_rows(self, qtbot):
        items = ObservableList([0, 1, 2])
        model = ItemListModel(items)

        with qtbot.assertNotEmitted(model.rowsRemoved):
            items.delete(3)

        assert model.rows() == [0, 1, 2]

    @pytest.mark.usefixtures("qapp")
    def test_mirror_tracks_mixed_operations(self):
        items = ObservableList()
        model = ItemListModel(items)

        items.insert(50, 5)
        items.delete(0)
        items.insert(60, 100)
        items.delete(-1)
        items.insert(70, -8)
        items.delete(4)

        assert model.rows() == list(items.snapshot())
        assert _display_rows(model) == [str(v) for v in items.snapshot()]

    @pytest.mark.usefixtures("qapp")
    def test_multi_position_changes(self):
        items = ObservableList([0, 1, 2, 3])
        model = ItemListModel(items)

        # Bypass the single-row operations to exercise multi-row events
        items._items[:] = [0, 2]
        items.changed.emit(DeletedAt({1, 3}))
        items._items[:] = [8, 0, 9, 2]
        items.changed.emit(InsertedAt({0, 2}))

        assert model.rows() == [8, 0, 9, 2]


class TestItemListModelRelease:
    """Test subscription release."""

    @pytest.mark.usefixtures("qapp")
    def test_release_stops_tracking(self):
        items = ObservableList([0, 1, 2])
        model = ItemListModel(items)

        model.release()
        model.release()
        items.insert(5, 0)

        assert not model.is_tracking()
        assert model.rows() == [0, 1, 2]
        assert items.changed.subscriber_count() == 0
