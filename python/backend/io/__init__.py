from backend.io.exceptions import (
    BoardFormatError,
    InvalidBoardError,
    InvalidTokenError,
    MissingTilesError,
)
from backend.io.loader import load_board, parse_board

__all__ = [
    "BoardFormatError",
    "InvalidBoardError",
    "InvalidTokenError",
    "MissingTilesError",
    "load_board",
    "parse_board",
]
