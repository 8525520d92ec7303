"""A simple unbounded FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueEmptyError(Exception):
    """Raised when reading from an empty queue."""


class Queue:
    """First-in first-out container."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def put(self, item: Any) -> None:
        """Append ``item`` at the back."""
        self._items.append(item)

    def get(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate front to back without consuming."""
        return iter(list(self._items))