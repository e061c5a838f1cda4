"""A last-in, first-out stack that grows by doubling its capacity."""

from __future__ import annotations

import operator
from typing import Any, Iterator


class Stack:
    """LIFO stack of arbitrary objects with a capacity that doubles when full."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[Any] = []
        self._capacity = capacity

    def push(self, obj: Any) -> None:
        """Put ``obj`` on top of the stack, doubling the capacity if it is full."""
        if len(self._items) == self._capacity:
            self._capacity = self._capacity * 2 or 1
        self._items.append(obj)

    def pop(self) -> Any:
        """Remove and return the most recently pushed object."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    @property
    def capacity(self) -> int:
        """Number of slots reserved before the next growth."""
        return self._capacity

    def __repr__(self) -> str:
        return f"Stack(count={len(self._items)}, capacity={self._capacity})"