from backend.engine.search.best_first import a_star_search, greedy_search
from backend.engine.search.breadth import breadth_first_search
from backend.engine.search.deepening import iterative_deepening_search
from backend.engine.search.depth import depth_first_search_no_cycles
from backend.engine.search.memory import MemoryTracker, TrackedPath, memory_tracker
from backend.engine.search.settings import MAX_DEPTH, MEMORY_LIMIT, SearchSettings

__all__ = [
    "MAX_DEPTH",
    "MEMORY_LIMIT",
    "MemoryTracker",
    "SearchSettings",
    "TrackedPath",
    "a_star_search",
    "breadth_first_search",
    "depth_first_search_no_cycles",
    "greedy_search",
    "iterative_deepening_search",
    "memory_tracker",
]
