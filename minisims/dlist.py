"""A double-ended list with removal by comparison."""

from __future__ import annotations

import copy as _copy
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyList(Exception):
    """Raised when an item is removed from an empty list."""


class Dlist(Generic[T]):
    """A list that can be grown and shrunk at either end."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: deque[T] = deque() if items is None else deque(items)

    def is_empty(self) -> bool:
        """True if the list holds no items."""
        return not self._items

    def insert_front(self, item: T) -> None:
        """Put ``item`` at the front."""
        self._items.appendleft(item)

    def insert_back(self, item: T) -> None:
        """Put ``item`` at the back."""
        self._items.append(item)

    def remove_front(self) -> T:
        """Remove and return the first item, raising EmptyList if there is none."""
        if not self._items:
            raise EmptyList("list is empty")
        return self._items.popleft()

    def remove_back(self) -> T:
        """Remove and return the last item, raising EmptyList if there is none."""
        if not self._items:
            raise EmptyList("list is empty")
        return self._items.pop()

    def remove(self, cmp: Callable[[T, T], bool], ref: T) -> T | None:
        """Remove and return the first item for which ``cmp(ref, item)`` holds, else None."""
        for index, item in enumerate(self._items):
            if cmp(ref, item):
                del self._items[index]
                return item
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def copy(self) -> Dlist[T]:
        """Return a new list holding a copy of each item."""
        return Dlist(_copy.copy(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Dlist({list(self._items)!r})"