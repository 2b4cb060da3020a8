"""Module: observable_list.py.

Author: Michael Economou
Date: 2026-10-19

ObservableList - single source of truth for the displayed integers.

Only two operations mutate the collection and each successful mutation
publishes exactly one Change through the `changed` signal:
- insert(value, position): position is clamped into [0, count]; never fails
- delete(position): out-of-range positions are ignored, nothing is emitted

Subscribers are called synchronously after the backing list has been
updated, so reading snapshot() from a handler shows the post-change state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from listsync.config import DEFAULT_ITEMS
from listsync.models.change import Change, DeletedAt, InsertedAt
from listsync.utils.events import Observable, Signal, Subscription
from listsync.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ObservableList(Observable):
    """Ordered collection of integers that reports its own mutations.

    Duplicates are allowed and indices are 0-based and contiguous.
    Not thread-safe: callers must serialize access onto one thread
    (the Qt GUI thread in this application).
    """

    changed = Signal(Change)

    def __init__(self, items: Iterable[int] | None = None) -> None:
        """Initialize the list.

        Args:
            items: Initial contents. Defaults to DEFAULT_ITEMS (0 through 9).

        """
        super().__init__()
        self._items: list[int] = list(DEFAULT_ITEMS if items is None else items)
        logger.debug(
            "ObservableList initialized with %d items", len(self._items), extra={"dev_only": True}
        )

    # =====================================
    # Read access
    # =====================================

    @property
    def count(self) -> int:
        """Number of items."""
        return len(self._items)

    @property
    def items(self) -> tuple[int, ...]:
        """Current contents (same as snapshot())."""
        return self.snapshot()

    def snapshot(self) -> tuple[int, ...]:
        """Return an immutable copy of the current contents."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, row: int) -> int:
        return self._items[row]

    def __iter__(self) -> Iterator[int]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"ObservableList({self._items!r})"

    # =====================================
    # Mutations
    # =====================================

    def insert(self, value: int, position: int) -> None:
        """Insert value at position, clamping position into [0, count].

        Emits InsertedAt with the clamped position.
        """
        row = max(0, min(position, len(self._items)))
        self._items.insert(row, value)

        if row != position:
            logger.debug(
                "Insert position %d clamped to %d", position, row, extra={"dev_only": True}
            )
        logger.debug("Inserted %d at row %d", value, row, extra={"dev_only": True})

        self.changed.emit(InsertedAt({row}))

    def delete(self, position: int) -> None:
        """Remove the item at position.

        Positions outside [0, count - 1] are ignored: the list is left as is
        and no change is emitted. Emits DeletedAt with the pre-removal position.
        """
        if not 0 <= position < len(self._items):
            logger.debug(
                "Delete ignored: row %d out of range (count: %d)",
                position,
                len(self._items),
                extra={"dev_only": True},
            )
            return

        value = self._items.pop(position)
        logger.debug("Deleted %d from row %d", value, position, extra={"dev_only": True})

        self.changed.emit(DeletedAt({position}))

    # =====================================
    # Subscriptions
    # =====================================

    def subscribe(self, handler: Callable[[Change], object]) -> Subscription:
        """Register handler for every future Change.

        Returns:
            Subscription that stops delivery when released

        """
        return self.changed.subscribe(handler)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Release subscription. Safe to call more than once."""
        subscription.release()
