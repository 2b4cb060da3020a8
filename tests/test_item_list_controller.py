"""
Tests for ItemListController.

Author: Michael Economou
Date: 2026-10-19
"""

import random

from listsync.config import RANDOM_VALUE_MAX, RANDOM_VALUE_MIN
from listsync.controllers import ItemListController
from listsync.models import DeletedAt, InsertedAt, ObservableList


class TestAddRandomItem:
    """Test the "Add" action."""

    def test_inserts_value_at_reported_row(self, recorder):
        items = ObservableList([0, 1, 2])
        items.subscribe(recorder)
        controller = ItemListController(items, random.Random(7))

        value, row = controller.add_random_item()

        assert 0 <= row <= 3
        assert RANDOM_VALUE_MIN <= value <= RANDOM_VALUE_MAX
        assert items[row] == value
        assert items.count == 4
        assert recorder.calls == [InsertedAt({row})]

    def test_seeded_rng_is_reproducible(self):
        first = ItemListController(ObservableList(), random.Random(42))
        second = ItemListController(ObservableList(), random.Random(42))

        for _ in range(5):
            first.add_random_item()
            second.add_random_item()

        assert first.items.snapshot() == second.items.snapshot()
        assert first.items.count == 15

    def test_adds_to_empty_list(self):
        controller = ItemListController(ObservableList([]), random.Random(1))

        value, row = controller.add_random_item()

        assert row == 0
        assert controller.items.snapshot() == (value,)


class TestDelete:
    """Test the "Delete" action."""

    def test_delete_item(self, recorder):
        items = ObservableList([0, 1, 2])
        items.subscribe(recorder)
        controller = ItemListController(items)

        assert controller.delete_item(0) is True
        assert controller.delete_item(5) is False

        assert items.snapshot() == (1, 2)
        assert recorder.calls == [DeletedAt({0})]

    def test_delete_rows_highest_first(self, recorder):
        items = ObservableList([10, 11, 12, 13, 14])
        items.subscribe(recorder)
        controller = ItemListController(items)

        removed = controller.delete_rows([1, 3, 3, 9])

        assert removed == 2
        assert items.snapshot() == (10, 12, 14)
        assert recorder.calls == [DeletedAt({3}), DeletedAt({1})]
