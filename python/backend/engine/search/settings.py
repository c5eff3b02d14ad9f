"""Tunables shared by every search strategy."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from backend.engine.search.memory import MemoryTracker, memory_tracker
from backend.models.board import Board

MEMORY_LIMIT = 2 * 1024 * 1024 * 1024
MAX_DEPTH = 32


def _estimate_node_footprint() -> int:
    board = Board.solved()
    return sys.getsizeof(board) + sys.getsizeof(board.cells)


NODE_FOOTPRINT = _estimate_node_footprint()


@dataclass(frozen=True)
class SearchSettings:
    """
    Attributes:
        memory_limit: Ceiling in bytes for frontier estimate + tracked paths
        max_depth: Deepest bound tried by iterative deepening
        node_footprint: Estimated bytes per frontier node
        closed_set: Skip boards already expanded in the best-first searches
        tracker: Counter charged by path storage
    """

    memory_limit: int = MEMORY_LIMIT
    max_depth: int = MAX_DEPTH
    node_footprint: int = NODE_FOOTPRINT
    closed_set: bool = False
    tracker: MemoryTracker = field(default=memory_tracker, compare=False)

    def exceeds_memory(self, frontier_size: int) -> bool:
        estimate = frontier_size * self.node_footprint + self.tracker.bytes_in_use
        return estimate > self.memory_limit
