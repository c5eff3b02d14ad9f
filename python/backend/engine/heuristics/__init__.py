from backend.engine.heuristics.heuristic import (
    Heuristic,
    count_pieces_out_of_place,
    sum_of_manhattan_distances,
)

__all__ = ["Heuristic", "count_pieces_out_of_place", "sum_of_manhattan_distances"]
