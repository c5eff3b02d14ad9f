"""Breadth-first search over a FIFO frontier."""

from __future__ import annotations

from collections import deque

from backend.engine.search.expansion import (
    Node,
    expand,
    memory_exceeded,
    not_solved,
    root_node,
    solved,
)
from backend.engine.search.settings import SearchSettings
from backend.models.board import Board
from backend.models.result import SearchResult


def breadth_first_search(
    source: Board, target: Board, settings: SearchSettings
) -> SearchResult:
    """Expand states in order of path length; the first hit is optimal.

    Repeated states are not pruned, so memory is the only bound.
    """
    frontier: deque[Node] = deque([root_node(source, settings)])
    explored = 0
    peak = 1

    while frontier:
        peak = max(peak, len(frontier))

        node = frontier.popleft()
        explored += 1

        if node.board.is_equal(target):
            return solved(node, explored, peak)

        if settings.exceeds_memory(len(frontier)):
            return memory_exceeded("breadth-first", len(frontier), explored, peak)

        frontier.extend(expand(node))

    return not_solved(explored, peak)
