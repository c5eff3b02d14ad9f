"""Strategy dispatcher: solvability pre-check, timing, strategy call."""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Iterable

from backend.engine.search import (
    SearchSettings,
    a_star_search,
    breadth_first_search,
    depth_first_search_no_cycles,
    greedy_search,
    iterative_deepening_search,
)
from backend.models.algorithm import SearchAlgorithm
from backend.models.board import Board
from backend.models.result import SearchResult, SearchStatus

logger = logging.getLogger(__name__)

_UNINFORMED = {
    SearchAlgorithm.BREADTH_FIRST: breadth_first_search,
    SearchAlgorithm.DEPTH_FIRST_NO_CYCLES: depth_first_search_no_cycles,
    SearchAlgorithm.ITERATIVE_DEEPENING: iterative_deepening_search,
}

_INFORMED = {
    SearchAlgorithm.A_STAR_MANHATTAN: a_star_search,
    SearchAlgorithm.A_STAR_OUT_OF_PLACE: a_star_search,
    SearchAlgorithm.GREEDY_MANHATTAN: greedy_search,
    SearchAlgorithm.GREEDY_OUT_OF_PLACE: greedy_search,
}


def choose_algorithm(
    algorithm: SearchAlgorithm,
    source: Board,
    target: Board,
    settings: SearchSettings | None = None,
) -> SearchResult:
    """Run *algorithm* from *source* to *target*.

    Unsolvable pairs are reported without searching.  Otherwise the
    strategy's result is returned with ``time_spent`` filled in.
    """
    if not source.can_be_solved(target):
        logger.info(f"{algorithm.label}: boards are not mutually reachable")
        return SearchResult(SearchStatus.UNSOLVABLE)

    settings = settings or SearchSettings()
    logger.debug(f"Running {algorithm.label}")

    start = time.perf_counter()
    if algorithm in _UNINFORMED:
        result = _UNINFORMED[algorithm](source, target, settings)
    else:
        result = _INFORMED[algorithm](source, target, algorithm.heuristic, settings)
    elapsed = time.perf_counter() - start

    logger.info(
        f"{algorithm.label}: {result.status.value} in {elapsed:.3f}s, "
        f"{len(result.path)} moves, {result.explored_nodes_count} explored, "
        f"peak frontier {result.max_nodes_in_frontier}"
    )
    return replace(result, time_spent=elapsed)


def compare_algorithms(
    source: Board,
    target: Board,
    algorithms: Iterable[SearchAlgorithm] | None = None,
    settings: SearchSettings | None = None,
) -> dict[SearchAlgorithm, SearchResult]:
    """Run several strategies one after another on the same instance."""
    chosen = list(algorithms) if algorithms is not None else list(SearchAlgorithm)
    return {
        algorithm: choose_algorithm(algorithm, source, target, settings)
        for algorithm in chosen
    }
