"""Thread synchronisation helpers: a counting semaphore and a bounded queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class Semaphore:
    """Counting semaphore whose release can add several permits at once."""

    def __init__(self, initial_count: int = 0) -> None:
        if initial_count < 0:
            raise ValueError(f"initial count must not be negative, got {initial_count}")
        self._cond = threading.Condition(threading.Lock())
        self._count = initial_count

    @property
    def value(self) -> int:
        """Number of permits currently available."""
        with self._cond:
            return self._count

    def acquire(self) -> None:
        """Take one permit, blocking until one is available."""
        with self._cond:
            self._cond.wait_for(lambda: self._count > 0)
            self._count -= 1

    def release(self, count: int = 1) -> None:
        """Return ``count`` permits, waking up to that many waiters."""
        if count < 0:
            raise ValueError(f"release count must not be negative, got {count}")
        if count == 0:
            return
        with self._cond:
            self._count += count
            self._cond.notify(count)

    def __enter__(self) -> "Semaphore":
        self.acquire()
        return self

    def __exit__(self, *args) -> None:
        self.release()


class BoundedQueue(Generic[T]):
    """First-in first-out queue shared by producers and consumers.

    Producers block while the queue is full; consumers block while it is empty.
    """

    def __init__(self, max_size: int) -> None:
        if max_size <= 0:
            raise ValueError(f"max size must be positive, got {max_size}")
        self.max_size = max_size
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def produce(self, item: T) -> None:
        """Append an item, waiting while the queue is full."""
        with self._not_full:
            self._not_full.wait_for(lambda: len(self._items) < self.max_size)
            self._items.append(item)
            self._not_empty.notify()

    def consume(self) -> T:
        """Remove and return the oldest item, waiting while the queue is empty."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: len(self._items) > 0)
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)