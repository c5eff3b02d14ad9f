from backend.models.board import BLANK, Board, Direction, IllegalMoveError
from backend.models.result import SearchResult, SearchStatus

__all__ = [
    "BLANK",
    "Board",
    "Direction",
    "IllegalMoveError",
    "SearchResult",
    "SearchStatus",
]
