"""A* and greedy best-first search over a priority-ordered frontier."""

from __future__ import annotations

import heapq
import itertools
from typing import Callable

from backend.engine.heuristics import Heuristic
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

Priority = Callable[[Node], int]


def _best_first(
    name: str,
    source: Board,
    target: Board,
    priority: Priority,
    settings: SearchSettings,
) -> SearchResult:
    # The counter breaks priority ties in insertion order.
    counter = itertools.count()
    root = root_node(source, settings)
    frontier: list[tuple[int, int, Node]] = [(priority(root), next(counter), root)]
    closed: set[tuple[int, ...]] = set()
    explored = 0
    peak = 1

    while frontier:
        peak = max(peak, len(frontier))

        _, _, node = heapq.heappop(frontier)
        explored += 1

        if node.board.is_equal(target):
            return solved(node, explored, peak)

        if settings.exceeds_memory(len(frontier)):
            return memory_exceeded(name, len(frontier), explored, peak)

        if settings.closed_set:
            key = node.board.key()
            if key in closed:
                continue
            closed.add(key)

        for child in expand(node):
            if settings.closed_set and child.board.key() in closed:
                continue
            heapq.heappush(frontier, (priority(child), next(counter), child))

    return not_solved(explored, peak)


def a_star_search(
    source: Board, target: Board, heuristic: Heuristic, settings: SearchSettings
) -> SearchResult:
    """Order by path length + *heuristic*; optimal with either heuristic.

    Without ``settings.closed_set`` states may be expanded more than once.
    """

    def priority(node: Node) -> int:
        return node.depth + heuristic.estimate(node.board, target)

    return _best_first("a-star", source, target, priority, settings)


def greedy_search(
    source: Board, target: Board, heuristic: Heuristic, settings: SearchSettings
) -> SearchResult:
    """Order by *heuristic* alone, ignoring the cost already paid."""

    def priority(node: Node) -> int:
        return heuristic.estimate(node.board, target)

    return _best_first("greedy", source, target, priority, settings)
