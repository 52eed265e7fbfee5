"""Bounded best-first candidate list."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar('T')


class TopK(Generic[T]):
    """Keep the ``capacity`` highest-scoring items, best first.

    Insertion is linear from the tail: a new item moves ahead only of
    items whose score it strictly exceeds, so among equal scores the
    earlier-pushed item stays ahead. Items that would land at or beyond
    ``capacity`` are not inserted; otherwise the tail is dropped when the
    list overflows.

    Example:
        >>> top = TopK(2)
        >>> for name, score in [('a', -5.0), ('b', -1.0), ('c', -1.0), ('d', -9.0)]:
        ...     _ = top.push(name, score)
        >>> top.items()
        ['b', 'c']
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._items: list[T] = []
        self._scores: list[float] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T, score: float) -> bool:
        """Offer an item; return True if it was kept."""
        pos = len(self._scores)
        while pos > 0 and score > self._scores[pos - 1]:
            pos -= 1

        if pos >= self.capacity:
            return False

        self._items.insert(pos, item)
        self._scores.insert(pos, score)
        if len(self._items) > self.capacity:
            self._items.pop()
            self._scores.pop()
        return True

    def items(self) -> list[T]:
        return list(self._items)

    def scores(self) -> list[float]:
        return list(self._scores)

    def pairs(self) -> list[tuple[T, float]]:
        return list(zip(self._items, self._scores))
