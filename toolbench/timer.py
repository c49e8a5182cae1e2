"""A scope timer that reports how long a block took."""

from __future__ import annotations

import time
from typing import TextIO


class Timer:
    """Context manager that prints the elapsed time in milliseconds on exit."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        self.start: float | None = None
        self.end: float | None = None
        self.duration: float | None = None

    @property
    def milliseconds(self) -> float | None:
        """Elapsed time in milliseconds, once the block has finished."""
        return None if self.duration is None else self.duration * 1000.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        self.end = None
        self.duration = None
        return self

    def __exit__(self, *args) -> None:
        self.end = time.perf_counter()
        self.duration = self.end - self.start
        print(f"Timer took {self.milliseconds:g} ms", file=self.stream)