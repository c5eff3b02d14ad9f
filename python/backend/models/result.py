"""Search outcome record shared by every strategy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.board import Direction


class SearchStatus(StrEnum):
    SOLVED = "solved"
    NOT_SOLVED = "not-solved"
    MEMORY_EXCEEDED = "memory-exceeded"
    UNSOLVABLE = "unsolvable"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    SearchStatus.SOLVED: "Got Solution",
    SearchStatus.NOT_SOLVED: "No Solution",
    SearchStatus.MEMORY_EXCEEDED: "Exceeded Memory Limit",
    SearchStatus.UNSOLVABLE: "Unsolvable",
}


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one strategy run.

    ``path`` is only meaningful when ``status`` is ``SOLVED``.
    ``time_spent`` is wall-clock seconds, stamped by the dispatcher.
    """

    status: SearchStatus
    path: tuple[Direction, ...] = ()
    explored_nodes_count: int = 0
    max_nodes_in_frontier: int = 0
    time_spent: float = 0.0

    @property
    def moves(self) -> int:
        return len(self.path)

    @property
    def is_solved(self) -> bool:
        return self.status is SearchStatus.SOLVED
