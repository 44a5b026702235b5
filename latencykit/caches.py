"""An LRU cache and an open-addressing hash table."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
from typing import Any


class LRUCache:
    """Fixed-capacity map that evicts the least recently used entry."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def get(self, key: Hashable) -> Any | None:
        """Return the value for ``key`` and mark it most recent, or ``None``."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key, last=False)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key`` as most recent, evicting if full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key, last=False)
            return
        if len(self._entries) >= self._capacity:
            self._entries.popitem(last=True)
        self._entries[key] = value
        self._entries.move_to_end(key, last=False)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


class OpenAddressingHashTable:
    """Hash table in one flat list, resolving collisions by linear probing.

    The table doubles whenever it would become half full.
    """

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._table: list[tuple[Hashable, Any] | None] = [None] * capacity
        self._size = 0

    def insert(self, key: Hashable, value: Any) -> bool:
        """Insert or overwrite ``key``; always returns ``True``."""
        if self._size * 2 >= len(self._table):
            self._rehash()
        for idx in self._probe(key):
            cell = self._table[idx]
            if cell is None:
                self._table[idx] = (key, value)
                self._size += 1
                return True
            if cell[0] == key:
                self._table[idx] = (key, value)
                return True
        self._rehash()
        return self.insert(key, value)

    def find(self, key: Hashable) -> Any | None:
        """Return the value stored under ``key``, or ``None``."""
        for idx in self._probe(key):
            cell = self._table[idx]
            if cell is None:
                return None
            if cell[0] == key:
                return cell[1]
        return None

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._table)

    def _probe(self, key: Hashable):
        width = len(self._table)
        start = hash(key) % width
        return ((start + step) % width for step in range(width))

    def _rehash(self) -> None:
        old = self._table
        self._table = [None] * (len(old) * 2)
        self._size = 0
        for cell in old:
            if cell is not None:
                self.insert(*cell)