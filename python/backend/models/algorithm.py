"""The concrete strategies a caller can ask the dispatcher for."""

from __future__ import annotations

from enum import StrEnum

from backend.engine.heuristics import Heuristic


class SearchAlgorithm(StrEnum):
    BREADTH_FIRST = "breadth-first"
    DEPTH_FIRST_NO_CYCLES = "depth-first"
    ITERATIVE_DEEPENING = "iterative-deepening"
    A_STAR_MANHATTAN = "a-star-manhattan"
    A_STAR_OUT_OF_PLACE = "a-star-out-of-place"
    GREEDY_MANHATTAN = "greedy-manhattan"
    GREEDY_OUT_OF_PLACE = "greedy-out-of-place"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def heuristic(self) -> Heuristic | None:
        """Heuristic used by the informed strategies, ``None`` otherwise."""
        return _HEURISTICS.get(self)


_LABELS = {
    SearchAlgorithm.BREADTH_FIRST: "Breadth First",
    SearchAlgorithm.DEPTH_FIRST_NO_CYCLES: "Depth First (With cycle detection)",
    SearchAlgorithm.ITERATIVE_DEEPENING: "Iterative Deepening",
    SearchAlgorithm.A_STAR_MANHATTAN: "A* (Manhattan Distance)",
    SearchAlgorithm.A_STAR_OUT_OF_PLACE: "A* (Number Of Pieces Out Of Place)",
    SearchAlgorithm.GREEDY_MANHATTAN: "Greedy (Manhattan Distance)",
    SearchAlgorithm.GREEDY_OUT_OF_PLACE: "Greedy (Number Of Pieces Out Of Place)",
}

_HEURISTICS = {
    SearchAlgorithm.A_STAR_MANHATTAN: Heuristic.MANHATTAN,
    SearchAlgorithm.A_STAR_OUT_OF_PLACE: Heuristic.OUT_OF_PLACE,
    SearchAlgorithm.GREEDY_MANHATTAN: Heuristic.MANHATTAN,
    SearchAlgorithm.GREEDY_OUT_OF_PLACE: Heuristic.OUT_OF_PLACE,
}
