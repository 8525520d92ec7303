"""A bounded stack whose capacity is measured in bytes.

Every pushed item occupies its declared size plus a fixed-size header,
so a stack of a given capacity holds fewer large items than small ones.
"""

from __future__ import annotations

from typing import Any

DEFAULT_CAPACITY = 100
HEADER_SIZE = 4


class StackFullError(Exception):
    """Raised when an item does not fit in the remaining space."""


class StackEmptyError(Exception):
    """Raised when reading from an empty stack."""


class Stack:
    """LIFO container with a fixed byte budget."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[tuple[Any, int]] = []
        self._used = 0

    @property
    def free(self) -> int:
        """Bytes still available."""
        return self.capacity - self._used

    def push(self, item: Any, size: int) -> None:
        """Push ``item`` declared as ``size`` bytes."""
        if size < 0:
            raise ValueError("size must not be negative")
        if self.is_full(size):
            raise StackFullError(
                f"no room for {size} bytes ({self.free} bytes free)"
            )
        self._items.append((item, size))
        self._used += size + HEADER_SIZE

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        item, size = self._items.pop()
        self._used -= size + HEADER_SIZE
        return item

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1][0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()
        self._used = 0

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self, size: int) -> bool:
        """Whether an item of ``size`` bytes would not fit."""
        return self.free < size + HEADER_SIZE

    def __len__(self) -> int:
        return len(self._items)