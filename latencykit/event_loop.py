"""A single-threaded readiness loop over the platform's best selector."""

from __future__ import annotations

import selectors
from collections.abc import Callable
from typing import Any

_MAX_EVENTS = 64


class EventLoop:
    """Register descriptors with read callbacks and dispatch them when ready."""

    def __init__(self) -> None:
        self._selector = selectors.DefaultSelector()
        self._closed = False

    def add_fd(self, fd: Any, on_read: Callable[[], object]) -> None:
        """Call ``on_read`` whenever ``fd`` (a descriptor or file object) is readable."""
        self._ensure_open()
        try:
            self._selector.register(fd, selectors.EVENT_READ, on_read)
        except KeyError as exc:
            raise ValueError(f"{fd!r} is already registered") from exc

    def run_once(self, timeout_ms: int) -> int:
        """Wait up to ``timeout_ms`` (forever if negative) and run ready callbacks.

        Returns the number of callbacks run; a failed wait runs none.
        """
        self._ensure_open()
        timeout = None if timeout_ms < 0 else timeout_ms / 1000.0
        try:
            events = self._selector.select(timeout)
        except OSError:
            return 0
        ready = events[:_MAX_EVENTS]
        for key, _mask in ready:
            key.data()
        return len(ready)

    def close(self) -> None:
        """Release the selector; later calls do nothing."""
        if not self._closed:
            self._closed = True
            self._selector.close()

    def __enter__(self) -> EventLoop:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("event loop is closed")