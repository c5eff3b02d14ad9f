"""Iterative deepening: depth-bounded DFS with a growing bound."""

from __future__ import annotations

import logging

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
from backend.models.result import SearchResult, SearchStatus

logger = logging.getLogger(__name__)


def _bounded_pass(
    source: Board, target: Board, bound: int, settings: SearchSettings
) -> SearchResult:
    frontier: list[Node] = [root_node(source, settings)]
    explored = 0
    peak = 1

    while frontier:
        peak = max(peak, len(frontier))

        node = frontier.pop()
        explored += 1

        if node.board.is_equal(target):
            return solved(node, explored, peak)

        if node.depth > bound:
            continue

        if settings.exceeds_memory(len(frontier)):
            return memory_exceeded(
                "iterative-deepening", len(frontier), explored, peak
            )

        frontier.extend(expand(node))

    return not_solved(explored, peak)


def iterative_deepening_search(
    source: Board, target: Board, settings: SearchSettings
) -> SearchResult:
    """Run bounded passes for bounds ``0..settings.max_depth``.

    Nodes one level past the bound are still checked against the target,
    just not expanded.  The reported counts are the largest seen in any
    single pass, not totals.
    """
    explored = 0
    peak = 0

    for bound in range(settings.max_depth + 1):
        result = _bounded_pass(source, target, bound, settings)
        explored = max(explored, result.explored_nodes_count)
        peak = max(peak, result.max_nodes_in_frontier)
        logger.debug(
            f"iterative-deepening: bound {bound} -> {result.status.value} "
            f"({result.explored_nodes_count} explored)"
        )

        if result.status is not SearchStatus.NOT_SOLVED:
            return SearchResult(result.status, result.path, explored, peak)

    return not_solved(explored, peak)
