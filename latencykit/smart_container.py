"""A growable sequence that tracks its own capacity like a dynamic array."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from latencykit.cursor import Cursor

T = TypeVar("T")


class SmartContainer(Generic[T]):
    """A dynamic array with explicit capacity.

    Capacity doubles (starting from 1) whenever an append finds the array full.
    A container built from an iterable, or copied, starts with capacity equal
    to its length. :meth:`clear` keeps the capacity, :meth:`shrink_to_fit`
    trims it to the length.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._capacity = len(self._items)

    # Utility -------------------------------------------------------------

    def swap(self, other: SmartContainer[T]) -> None:
        """Exchange contents and capacity with ``other``."""
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def copy(self) -> SmartContainer[T]:
        """Return a new container holding the same elements."""
        return SmartContainer(self._items)

    # Element access --------------------------------------------------------

    def at(self, pos: int) -> T:
        """Return the element at ``pos``; raise ``IndexError`` unless ``0 <= pos < len``."""
        if not 0 <= pos < len(self._items):
            raise IndexError("SmartContainer.at: index out of range")
        return self._items[pos]

    def front(self) -> T:
        """Return the first element; raise ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("SmartContainer.front: container is empty")
        return self._items[0]

    def back(self) -> T:
        """Return the last element; raise ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("SmartContainer.back: container is empty")
        return self._items[-1]

    # Capacity --------------------------------------------------------------

    def empty(self) -> bool:
        """Return whether the container holds no elements."""
        return not self._items

    def capacity(self) -> int:
        """Return how many elements fit before the next growth."""
        return self._capacity

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current length."""
        if self._capacity > len(self._items):
            self._capacity = len(self._items)

    # Modifiers -------------------------------------------------------------

    def push_back(self, value: T) -> None:
        """Append ``value``, doubling the capacity first if the array is full."""
        self._grow_if_full()
        self._items.append(value)

    def emplace_back(self, factory: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Build an element with ``factory(*args, **kwargs)``, append and return it."""
        self._grow_if_full()
        value = factory(*args, **kwargs)
        self._items.append(value)
        return value

    def pop_back(self) -> T:
        """Remove and return the last element; raise ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("SmartContainer.pop_back: container is empty")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    # Iteration -------------------------------------------------------------

    def begin(self) -> Cursor:
        """Return a cursor at the first element."""
        return Cursor(self, 0)

    def end(self) -> Cursor:
        """Return a cursor one past the last element."""
        return Cursor(self, len(self._items))

    # Python protocols ------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, pos: int) -> T:
        return self._items[pos]

    def __setitem__(self, pos: int, value: T) -> None:
        self._items[pos] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SmartContainer):
            return NotImplemented
        return len(self._items) == len(other._items) and all(
            a == b for a, b in zip(self._items, other._items)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SmartContainer({self._items!r})"

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2