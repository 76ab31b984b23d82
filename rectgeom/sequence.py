"""Finite, double ended iterators over a fixed index space."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class IndexedIterator(ABC, Generic[T]):
    """Iterator over ``item_at(0) .. item_at(count - 1)`` consumable from both ends.

    The front cursor counts up from zero and the back cursor counts down from
    ``count``; once they meet the iterator is exhausted from either end, so a
    mix of ``next`` and ``next_back`` calls yields every index exactly once.
    """

    count: int = 0

    def __init__(self) -> None:
        self._front = 0
        self._back = self.count

    @abstractmethod
    def item_at(self, index: int) -> Optional[T]:
        """Return the item at ``index`` or ``None`` outside ``0..count-1``."""

    def __iter__(self) -> "IndexedIterator[T]":
        return self

    def __next__(self) -> T:
        if self._front >= self._back:
            raise StopIteration
        item = self.item_at(self._front)
        self._front += 1
        return item

    def next_back(self) -> Optional[T]:
        """Consume and return the last remaining item, or ``None`` when exhausted."""

        if self._front >= self._back:
            return None
        self._back -= 1
        return self.item_at(self._back)

    def __reversed__(self) -> Iterator[T]:
        while True:
            item = self.next_back()
            if item is None:
                return
            yield item

    def __len__(self) -> int:
        return self._back - self._front

    def __length_hint__(self) -> int:
        return len(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(remaining={len(self)})"
