"""Depth-first search that never revisits a configuration."""

from __future__ import annotations

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


def depth_first_search_no_cycles(
    source: Board, target: Board, settings: SearchSettings
) -> SearchResult:
    """Explicit-stack DFS.

    A child is only pushed when its configuration is neither waiting in the
    frontier nor already explored.  Paths found are not necessarily shortest.
    """
    root = root_node(source, settings)
    frontier: list[Node] = [root]
    in_frontier: set[tuple[int, ...]] = {root.board.key()}
    explored: set[tuple[int, ...]] = set()
    peak = 1

    while frontier:
        peak = max(peak, len(frontier))

        node = frontier.pop()
        key = node.board.key()
        in_frontier.discard(key)
        explored.add(key)

        if node.board.is_equal(target):
            return solved(node, len(explored), peak)

        if settings.exceeds_memory(len(frontier)):
            return memory_exceeded("depth-first", len(frontier), len(explored), peak)

        for child in expand(node):
            child_key = child.board.key()
            if child_key in in_frontier or child_key in explored:
                continue
            frontier.append(child)
            in_frontier.add(child_key)

    return not_solved(len(explored), peak)
