"""A readers-writer lock: many readers or one writer at a time."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Shared/exclusive lock built on a condition variable.

    Readers wait while a writer holds the lock; a writer waits until there
    are no readers and no other writer.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    @property
    def readers(self) -> int:
        """Number of readers currently holding the lock."""
        with self._cond:
            return self._readers

    @property
    def write_locked(self) -> bool:
        """Whether a writer currently holds the lock."""
        with self._cond:
            return self._writer

    def read_lock(self) -> None:
        """Acquire shared access, blocking while a writer holds the lock."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writer)
            self._readers += 1

    def read_unlock(self) -> None:
        """Release shared access."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("read_unlock called without a read lock held")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def write_lock(self) -> None:
        """Acquire exclusive access, blocking while anyone holds the lock."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            self._writer = True

    def write_unlock(self) -> None:
        """Release exclusive access."""
        with self._cond:
            if not self._writer:
                raise RuntimeError("write_unlock called without the write lock held")
            self._writer = False
            self._cond.notify_all()

    def try_read_lock(self) -> bool:
        """Take shared access if no writer holds the lock; never blocks."""
        with self._cond:
            if self._writer:
                return False
            self._readers += 1
            return True

    def try_write_lock(self) -> bool:
        """Take exclusive access if the lock is free; never blocks."""
        with self._cond:
            if self._writer or self._readers:
                return False
            self._writer = True
            return True

    @contextmanager
    def reading(self) -> Iterator["ReadWriteLock"]:
        """Hold shared access for the duration of a block."""
        self.read_lock()
        try:
            yield self
        finally:
            self.read_unlock()

    @contextmanager
    def writing(self) -> Iterator["ReadWriteLock"]:
        """Hold exclusive access for the duration of a block."""
        self.write_lock()
        try:
            yield self
        finally:
            self.write_unlock()