"""A sorted collection of device handles and a lookup benchmark."""

from __future__ import annotations

import argparse
import bisect
import random
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, Callable, Iterator, Sequence

from toolbench.timer import Timer

_by_index = attrgetter("index")
_RANDOM_SPAN = 20000
_OPERATIONS = 1000


@dataclass(order=True)
class DevHandle:
    """A device handle, ordered and compared by its index alone."""

    index: int
    ptr: Any = field(default=None, compare=False)


class DevHandleVector:
    """Handles kept sorted by index, searched by bisection."""

    def __init__(self) -> None:
        self._handles: list[DevHandle] = []

    def _position(self, index: int) -> int:
        pos = bisect.bisect_left(self._handles, index, key=_by_index)
        if pos == len(self._handles) or self._handles[pos].index != index:
            raise KeyError(f"no handle with index {index}")
        return pos

    def search(self, index: int) -> DevHandle:
        """Return the handle with this index, or raise KeyError."""
        return self._handles[self._position(index)]

    def insert(self, handle: DevHandle) -> None:
        """Insert a handle, keeping the collection sorted."""
        bisect.insort_left(self._handles, handle, key=_by_index)

    def delete(self, index: int) -> DevHandle:
        """Remove and return the handle with this index, or raise KeyError."""
        return self._handles.pop(self._position(index))

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[DevHandle]:
        return iter(self._handles)


def _random_index(indexes: Sequence[int]) -> int:
    return indexes[random.randint(0, _RANDOM_SPAN) % len(indexes)]


def _bench_vector(indexes: Sequence[int]) -> None:
    handles = DevHandleVector()
    with Timer():
        for index in indexes:
            handles.insert(DevHandle(index))
    with Timer():
        for index in indexes[:_OPERATIONS]:
            handles.search(index)
    with Timer():
        for index in indexes[:_OPERATIONS]:
            handles.delete(index)


def _bench_list(indexes: Sequence[int]) -> None:
    handles: list[DevHandle] = []
    with Timer():
        for index in indexes:
            handles.append(DevHandle(index))
    if not indexes:
        return
    with Timer():
        for _ in range(_OPERATIONS):
            wanted = _random_index(indexes)
            next((h for h in handles if h.index == wanted), None)
    with Timer():
        for _ in range(_OPERATIONS):
            wanted = _random_index(indexes)
            pos = next((i for i, h in enumerate(handles) if h.index == wanted), None)
            if pos is not None:
                del handles[pos]


def _bench_hash_map(indexes: Sequence[int]) -> None:
    handles: dict[int, DevHandle] = {}
    with Timer():
        for index in indexes:
            handles[index] = DevHandle(index)
    if not indexes:
        return
    with Timer():
        for _ in range(_OPERATIONS):
            handles.get(_random_index(indexes))
    with Timer():
        for _ in range(_OPERATIONS):
            handles.pop(_random_index(indexes), None)


def _bench_sorted_map(indexes: Sequence[int]) -> None:
    keys: list[int] = []
    values: dict[int, DevHandle] = {}
    with Timer():
        for index in indexes:
            if index not in values:
                bisect.insort(keys, index)
            values[index] = DevHandle(index)
    if not indexes:
        return
    with Timer():
        for _ in range(_OPERATIONS):
            wanted = _random_index(indexes)
            pos = bisect.bisect_left(keys, wanted)
            if pos < len(keys) and keys[pos] == wanted:
                values[wanted]
    with Timer():
        for _ in range(_OPERATIONS):
            wanted = _random_index(indexes)
            pos = bisect.bisect_left(keys, wanted)
            if pos < len(keys) and keys[pos] == wanted:
                del keys[pos]
                del values[wanted]


_BENCHMARKS: list[tuple[str, Callable[[Sequence[int]], None]]] = [
    ("vector", _bench_vector),
    ("list", _bench_list),
    ("unordered_map", _bench_hash_map),
    ("map", _bench_sorted_map),
]


def run_benchmarks(indexes: Sequence[int]) -> dict[str, float]:
    """Time insert, search and delete on each container; return total seconds."""
    indexes = list(indexes)
    results: dict[str, float] = {}
    for name, bench in _BENCHMARKS:
        with Timer() as total:
            bench(indexes)
        results[name] = total.duration
        print("-" * 25)
    return results


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare handle lookup containers.")
    parser.add_argument("--count", type=int, default=10000, help="number of handles")
    args = parser.parse_args(argv)
    indexes = list(range(args.count))
    random.shuffle(indexes)
    run_benchmarks(indexes)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())