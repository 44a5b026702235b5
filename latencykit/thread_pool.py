"""A fixed-size pool of worker threads that runs submitted callables."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any


class ThreadPool:
    """Runs submitted callables on ``num_threads`` workers.

    :meth:`submit` returns a :class:`concurrent.futures.Future`. On
    :meth:`shutdown`, workers finish every queued task before exiting.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 1:
            raise ValueError("num_threads must be at least 1")
        self._tasks: deque[tuple[Future, Callable[..., Any], tuple, dict]] = deque()
        self._cond = threading.Condition()
        self._stop = False
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{i}", daemon=True)
            for i in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    @property
    def num_threads(self) -> int:
        return len(self._workers)

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result.

        Raises ``RuntimeError`` once the pool has been shut down.
        """
        future: Future = Future()
        with self._cond:
            if self._stop:
                raise RuntimeError("submit on stopped pool")
            self._tasks.append((future, fn, args, kwargs))
            self._cond.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, let the queue drain and join the workers."""
        with self._cond:
            self._stop = True
            self._cond.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _work(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stop or self._tasks)
                if not self._tasks:
                    return
                future, fn, args, kwargs = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = fn(*args, **kwargs)
            except Exception as exc:  # delivered to the caller through the future
                future.set_exception(exc)
            else:
                future.set_result(result)