"""A last-in first-out stack that many threads can push to and pop from."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class ConcurrentStack(Generic[T]):
    """Thread-safe LIFO stack."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._lock = threading.Lock()

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        with self._lock:
            self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item; raise ``IndexError`` when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("pop from empty stack")
            return self._items.pop()

    def empty(self) -> bool:
        """Return whether the stack holds no items."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)