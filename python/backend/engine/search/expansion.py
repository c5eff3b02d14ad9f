"""Frontier node and the move-generation step shared by all strategies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from backend.engine.search.memory import TrackedPath
from backend.engine.search.settings import SearchSettings
from backend.models.board import Board, Direction
from backend.models.result import SearchResult, SearchStatus

logger = logging.getLogger(__name__)


@dataclass
class Node:
    board: Board
    path: TrackedPath

    @property
    def depth(self) -> int:
        return len(self.path)


def root_node(source: Board, settings: SearchSettings) -> Node:
    return Node(source.copy(), TrackedPath(tracker=settings.tracker))


def expand(node: Node) -> Iterator[Node]:
    """Yield one child per legal blank move, in ``Direction`` order.

    The parent board is probed in place and restored with the opposite
    move, so only the children are copied.
    """
    board = node.board
    for direction in Direction:
        if not board.can_move(direction):
            continue
        board.move(direction)
        child = Node(board.copy(), node.path.extend(direction))
        board.move(direction.opposite)
        yield child


def solved(node: Node, explored: int, peak: int) -> SearchResult:
    return SearchResult(SearchStatus.SOLVED, node.path.to_tuple(), explored, peak)


def memory_exceeded(
    name: str, frontier_size: int, explored: int, peak: int
) -> SearchResult:
    logger.warning(
        f"{name}: memory ceiling reached with {frontier_size} nodes in the "
        f"frontier after {explored} explored"
    )
    return SearchResult(SearchStatus.MEMORY_EXCEEDED, (), explored, peak)


def not_solved(explored: int, peak: int) -> SearchResult:
    return SearchResult(SearchStatus.NOT_SOLVED, (), explored, peak)
