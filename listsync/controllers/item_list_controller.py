"""
Module: item_list_controller.py

Author: Michael Economou
Date: 2026-10-19

ItemListController: Handles the add/delete actions of the item list screen.

The controller translates user intent into ObservableList mutations. It never
touches the view: the view follows the list through ItemListModel.
Randomness for the "Add" action comes from an injectable random.Random so
the behavior is reproducible in tests.
"""

import random
from collections.abc import Iterable

from listsync.config import RANDOM_VALUE_MAX, RANDOM_VALUE_MIN
from listsync.models.observable_list import ObservableList
from listsync.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ItemListController:
    """
    Controller for item list actions.

    Attributes:
        _items: The list being edited
        _rng: Random source for generated values and positions
    """

    def __init__(self, items: ObservableList, rng: random.Random | None = None) -> None:
        """
        Initialize ItemListController.

        Args:
            items: The list to edit (injected)
            rng: Random source (defaults to a fresh random.Random)
        """
        self._items = items
        self._rng = rng or random.Random()
        logger.debug("[ItemListController] Initialized", extra={"dev_only": True})

    @property
    def items(self) -> ObservableList:
        return self._items

    def add_random_item(self) -> tuple[int, int]:
        """
        Insert a random value at a random valid row.

        Returns:
            (value, row) that was inserted
        """
        row = self._rng.randint(0, self._items.count)
        value = self._rng.randint(RANDOM_VALUE_MIN, RANDOM_VALUE_MAX)
        self._items.insert(value, row)
        logger.info("[ItemListController] Added %d at row %d", value, row)
        return value, row

    def delete_item(self, row: int) -> bool:
        """
        Delete the item at row.

        Returns:
            True if an item was removed, False if row was out of range
        """
        before = self._items.count
        self._items.delete(row)
        removed = self._items.count < before
        if removed:
            logger.info("[ItemListController] Deleted row %d", row)
        return removed

    def delete_rows(self, rows: Iterable[int]) -> int:
        """
        Delete several rows, highest first so lower row numbers stay valid.

        Returns:
            Number of items removed
        """
        return sum(1 for row in sorted(set(rows), reverse=True) if self.delete_item(row))
