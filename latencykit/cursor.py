"""A random-access position inside a mutable sequence."""

from __future__ import annotations

import functools
from typing import Any


@functools.total_ordering
class Cursor:
    """Points at one index of a sequence and moves by whole steps.

    Two cursors compare equal when they point into the same container object
    at the same index. Ordering and distances are only defined between
    cursors over the same container.
    """

    __slots__ = ("_container", "_index")

    def __init__(self, container: Any, index: int = 0) -> None:
        self._container = container
        self._index = index

    @property
    def container(self) -> Any:
        return self._container

    @property
    def index(self) -> int:
        return self._index

    def get(self) -> Any:
        """Return the element under the cursor."""
        self._check_in_range()
        return self._container[self._index]

    def set(self, value: Any) -> None:
        """Replace the element under the cursor."""
        self._check_in_range()
        self._container[self._index] = value

    def __add__(self, n: int) -> Cursor:
        if not isinstance(n, int):
            return NotImplemented
        return Cursor(self._container, self._index + n)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Cursor):
            self._check_same(other)
            return self._index - other._index
        if isinstance(other, int):
            return Cursor(self._container, self._index - other)
        return NotImplemented

    def __iadd__(self, n: int) -> Cursor:
        if not isinstance(n, int):
            return NotImplemented
        self._index += n
        return self

    def __isub__(self, n: int) -> Cursor:
        if not isinstance(n, int):
            return NotImplemented
        self._index -= n
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._container is other._container and self._index == other._index

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_same(other)
        return self._index < other._index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Cursor(index={self._index})"

    def _check_in_range(self) -> None:
        if not 0 <= self._index < len(self._container):
            raise IndexError("cursor out of range")

    def _check_same(self, other: Cursor) -> None:
        if self._container is not other._container:
            raise ValueError("cursors belong to different containers")