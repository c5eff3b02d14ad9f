"""Distance-to-target estimates used by the informed searches."""

from __future__ import annotations

from enum import StrEnum

from backend.models.board import BLANK, CELL_COUNT, SIDE, Board

_COORDS = [divmod(i, SIDE) for i in range(CELL_COUNT)]


def count_pieces_out_of_place(source: Board, target: Board) -> int:
    """Number of tiles that do not sit where *target* has them."""
    count = 0
    for have, want in zip(source.cells, target.cells):
        if have != BLANK and have != want:
            count += 1
    return count


def sum_of_manhattan_distances(source: Board, target: Board) -> int:
    """Sum of the row + column distance of every tile to its target cell."""
    goal = [0] * CELL_COUNT
    for i, label in enumerate(target.cells):
        goal[label] = i

    distance = 0
    for i, label in enumerate(source.cells):
        if label == BLANK:
            continue
        r, c = _COORDS[i]
        gr, gc = _COORDS[goal[label]]
        distance += abs(r - gr) + abs(c - gc)
    return distance


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    OUT_OF_PLACE = "out-of-place"

    def estimate(self, source: Board, target: Board) -> int:
        return _FUNCTIONS[self](source, target)


_FUNCTIONS = {
    Heuristic.MANHATTAN: sum_of_manhattan_distances,
    Heuristic.OUT_OF_PLACE: count_pieces_out_of_place,
}
