"""Strategy-level tests — move generation, bookkeeping, and memory accounting."""

from __future__ import annotations

import gc
import sys
import threading

import pytest

from backend.engine.heuristics import Heuristic
from backend.engine.search import (
    MAX_DEPTH,
    MEMORY_LIMIT,
    MemoryTracker,
    SearchSettings,
    TrackedPath,
    a_star_search,
    breadth_first_search,
    depth_first_search_no_cycles,
    greedy_search,
    iterative_deepening_search,
)
from backend.engine.search.expansion import expand, root_node
from backend.models.board import Board, Direction
from backend.models.result import SearchStatus

GOAL = Board.solved()
TWO_MOVES_OFF = Board.from_cells([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 0, 14, 15])
THREE_MOVES_OFF = Board.from_cells([1, 2, 3, 4, 5, 6, 7, 8, 9, 0, 11, 12, 13, 10, 14, 15])


# -- helpers ------------------------------------------------------------------


def _settings(**kwargs) -> SearchSettings:
    return SearchSettings(tracker=MemoryTracker(), **kwargs)


# -- settings -----------------------------------------------------------------


def test_default_settings() -> None:
    settings = SearchSettings()
    assert settings.memory_limit == MEMORY_LIMIT == 2 * 1024 ** 3
    assert settings.max_depth == MAX_DEPTH == 32
    assert settings.node_footprint > 0
    assert settings.closed_set is False


def test_exceeds_memory_counts_frontier_and_tracked_bytes() -> None:
    tracker = MemoryTracker()
    settings = SearchSettings(memory_limit=100, node_footprint=10, tracker=tracker)

    assert not settings.exceeds_memory(10)
    assert settings.exceeds_memory(11)

    tracker.allocate(50)
    assert not settings.exceeds_memory(5)
    assert settings.exceeds_memory(6)


# -- memory tracker -----------------------------------------------------------


def test_tracker_allocate_and_release() -> None:
    tracker = MemoryTracker()
    tracker.allocate(128)
    tracker.allocate(64)
    tracker.release(128)
    assert tracker.bytes_in_use == 64


def test_tracker_is_thread_safe() -> None:
    tracker = MemoryTracker()

    def churn() -> None:
        for _ in range(10_000):
            tracker.allocate(3)
            tracker.release(3)

    threads = [threading.Thread(target=churn) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert tracker.bytes_in_use == 0


def test_tracked_path_charges_and_releases_its_storage() -> None:
    tracker = MemoryTracker()
    path = TrackedPath([Direction.UP, Direction.LEFT], tracker)
    assert tracker.bytes_in_use == sys.getsizeof((Direction.UP, Direction.LEFT))

    longer = path.extend(Direction.DOWN)
    assert list(longer) == [Direction.UP, Direction.LEFT, Direction.DOWN]
    assert list(path) == [Direction.UP, Direction.LEFT]
    assert tracker.bytes_in_use == (
        sys.getsizeof((Direction.UP, Direction.LEFT))
        + sys.getsizeof((Direction.UP, Direction.LEFT, Direction.DOWN))
    )

    del path, longer
    gc.collect()
    assert tracker.bytes_in_use == 0


def test_tracked_path_is_a_sequence() -> None:
    path = TrackedPath([Direction.RIGHT, Direction.UP], MemoryTracker())
    assert len(path) == 2
    assert path[0] is Direction.RIGHT
    assert path[-1] is Direction.UP
    assert Direction.UP in path
    assert path.to_tuple() == (Direction.RIGHT, Direction.UP)


def test_search_releases_every_path() -> None:
    settings = _settings()
    result = breadth_first_search(THREE_MOVES_OFF, GOAL, settings)
    gc.collect()

    assert result.status is SearchStatus.SOLVED
    assert settings.tracker.bytes_in_use == 0


# -- move generation ----------------------------------------------------------


def test_expand_yields_legal_children_in_direction_order() -> None:
    node = root_node(GOAL, _settings())
    children = list(expand(node))

    assert [c.path[-1] for c in children] == [Direction.UP, Direction.LEFT]
    for child in children:
        assert child.depth == 1
        assert GOAL.apply(child.path).is_equal(child.board)
    assert node.board.is_equal(GOAL)
    assert len(node.path) == 0


def test_expand_children_do_not_share_boards() -> None:
    node = root_node(THREE_MOVES_OFF, _settings())
    children = list(expand(node))

    assert len(children) == 4
    boards = {id(c.board.cells) for c in children}
    assert len(boards) == 4
    assert id(node.board.cells) not in boards


def test_root_node_copies_source() -> None:
    source = THREE_MOVES_OFF.copy()
    node = root_node(source, _settings())
    node.board.move(Direction.DOWN)
    assert source.is_equal(THREE_MOVES_OFF)


# -- strategies ---------------------------------------------------------------


def test_breadth_first_counts() -> None:
    result = breadth_first_search(TWO_MOVES_OFF, GOAL, _settings())

    assert result.status is SearchStatus.SOLVED
    assert result.path == (Direction.RIGHT, Direction.RIGHT)
    # root, three nodes at depth 1, then nine at depth 2 ending on the goal.
    assert result.explored_nodes_count == 13
    assert result.max_nodes_in_frontier == 28


def test_depth_first_never_queues_a_board_twice() -> None:
    result = depth_first_search_no_cycles(TWO_MOVES_OFF, GOAL, _settings())

    assert result.status is SearchStatus.SOLVED
    assert result.path == (Direction.RIGHT, Direction.RIGHT)
    assert result.explored_nodes_count == 3


def test_iterative_deepening_three_moves() -> None:
    result = iterative_deepening_search(THREE_MOVES_OFF, GOAL, _settings())

    assert result.status is SearchStatus.SOLVED
    assert result.moves == 3
    assert THREE_MOVES_OFF.apply(result.path).is_equal(GOAL)


def test_iterative_deepening_gives_up_past_max_depth() -> None:
    result = iterative_deepening_search(THREE_MOVES_OFF, GOAL, _settings(max_depth=1))

    assert result.status is SearchStatus.NOT_SOLVED
    assert result.path == ()
    assert result.explored_nodes_count > 0


def test_iterative_deepening_reports_running_maxima() -> None:
    single = iterative_deepening_search(TWO_MOVES_OFF, GOAL, _settings(max_depth=0))
    full = iterative_deepening_search(TWO_MOVES_OFF, GOAL, _settings())

    assert single.status is SearchStatus.NOT_SOLVED
    assert full.status is SearchStatus.SOLVED
    assert full.explored_nodes_count >= single.explored_nodes_count
    assert full.max_nodes_in_frontier >= single.max_nodes_in_frontier


def test_iterative_deepening_explores_no_more_than_depth_first() -> None:
    settings = _settings(memory_limit=64 * 1024 ** 2)
    ids = iterative_deepening_search(THREE_MOVES_OFF, GOAL, settings)
    dfs = depth_first_search_no_cycles(THREE_MOVES_OFF, GOAL, settings)

    assert ids.status is SearchStatus.SOLVED
    assert ids.moves == 3
    assert ids.explored_nodes_count <= dfs.explored_nodes_count


@pytest.mark.parametrize("heuristic", list(Heuristic), ids=lambda h: h.value)
@pytest.mark.parametrize("closed_set", [False, True], ids=["open", "closed"])
def test_a_star_is_optimal(heuristic: Heuristic, closed_set: bool) -> None:
    result = a_star_search(THREE_MOVES_OFF, GOAL, heuristic, _settings(closed_set=closed_set))

    assert result.status is SearchStatus.SOLVED
    assert result.path == (Direction.DOWN, Direction.RIGHT, Direction.RIGHT)


@pytest.mark.parametrize("heuristic", list(Heuristic), ids=lambda h: h.value)
def test_closed_set_never_explores_more(heuristic: Heuristic) -> None:
    open_run = a_star_search(THREE_MOVES_OFF, GOAL, heuristic, _settings())
    closed_run = a_star_search(
        THREE_MOVES_OFF, GOAL, heuristic, _settings(closed_set=True)
    )
    assert closed_run.explored_nodes_count <= open_run.explored_nodes_count


@pytest.mark.parametrize("heuristic", list(Heuristic), ids=lambda h: h.value)
@pytest.mark.parametrize("closed_set", [False, True], ids=["open", "closed"])
def test_greedy_follows_the_heuristic(heuristic: Heuristic, closed_set: bool) -> None:
    result = greedy_search(THREE_MOVES_OFF, GOAL, heuristic, _settings(closed_set=closed_set))

    assert result.status is SearchStatus.SOLVED
    assert THREE_MOVES_OFF.apply(result.path).is_equal(GOAL)
    assert result.explored_nodes_count == 4
