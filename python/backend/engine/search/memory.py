"""Byte accounting for path storage, consulted by the memory ceiling."""

from __future__ import annotations

import sys
import threading
import weakref
from collections.abc import Sequence
from typing import Iterable, Iterator

from backend.models.board import Direction


class MemoryTracker:
    """Process-wide counter of bytes currently held by path storage."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bytes = 0

    @property
    def bytes_in_use(self) -> int:
        with self._lock:
            return self._bytes

    def allocate(self, nbytes: int) -> None:
        with self._lock:
            self._bytes += nbytes

    def release(self, nbytes: int) -> None:
        with self._lock:
            self._bytes -= nbytes


memory_tracker = MemoryTracker()


class TrackedPath(Sequence):
    """Immutable move sequence whose storage is charged to a tracker.

    The size is added on construction and subtracted again once the path
    is garbage-collected.
    """

    __slots__ = ("_moves", "_tracker", "__weakref__")

    def __init__(
        self,
        moves: Iterable[Direction] = (),
        tracker: MemoryTracker | None = None,
    ) -> None:
        self._moves: tuple[Direction, ...] = tuple(moves)
        self._tracker = tracker if tracker is not None else memory_tracker
        nbytes = sys.getsizeof(self._moves)
        self._tracker.allocate(nbytes)
        weakref.finalize(self, self._tracker.release, nbytes)

    def extend(self, direction: Direction) -> TrackedPath:
        """Return a new path with *direction* appended."""
        return TrackedPath(self._moves + (direction,), self._tracker)

    def to_tuple(self) -> tuple[Direction, ...]:
        return self._moves

    def __getitem__(self, index):
        return self._moves[index]

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._moves)

    def __repr__(self) -> str:
        return f"TrackedPath({[d.value for d in self._moves]})"
