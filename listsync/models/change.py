"""Module: change.py.

Author: Michael Economou
Date: 2026-10-19

Change events published by ObservableList.

A Change names the rows affected by one mutation:
- InsertedAt: rows that now hold newly inserted values
- DeletedAt: rows (pre-removal numbering) whose values were removed
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Change:
    """Base class for list change events. Use InsertedAt or DeletedAt."""

    positions: frozenset[int]

    kind: ClassVar[str] = "change"

    def __init__(self, positions: Iterable[int]) -> None:
        object.__setattr__(self, "positions", frozenset(positions))

    def ascending(self) -> list[int]:
        """Positions in ascending order."""
        return sorted(self.positions)

    def descending(self) -> list[int]:
        """Positions in descending order."""
        return sorted(self.positions, reverse=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({set(self.ascending())})"


@dataclass(frozen=True, init=False, repr=False)
class InsertedAt(Change):
    """Values were inserted; positions are indices after the insertion."""

    kind: ClassVar[str] = "inserted"


@dataclass(frozen=True, init=False, repr=False)
class DeletedAt(Change):
    """Values were removed; positions are indices before the removal."""

    kind: ClassVar[str] = "deleted"
