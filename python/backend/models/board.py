"""Board model for the 15-puzzle search engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Sequence

SIDE = 4
CELL_COUNT = SIDE * SIDE
BLANK = 0


class Direction(StrEnum):
    """Direction in which the *blank* slides."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSETS = {
    Direction.UP: -SIDE,
    Direction.DOWN: SIDE,
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
}


class IllegalMoveError(RuntimeError):
    """Raised when the blank is slid off the grid."""


@dataclass
class Board:
    """A 4×4 board stored as a flat row-major list of labels.

    ``cells`` is a permutation of ``0..15``; ``BLANK`` marks the empty cell
    and ``blank_index`` caches its position.  Both are only changed together
    by :meth:`move`.
    """

    cells: list[int]
    blank_index: int

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise ValueError(
                f"Expected {CELL_COUNT} cells for a {SIDE}×{SIDE} board, "
                f"got {len(self.cells)}."
            )
        if sorted(self.cells) != list(range(CELL_COUNT)):
            raise ValueError(
                f"Cells must hold each label in 0..{CELL_COUNT - 1} exactly once."
            )
        if not 0 <= self.blank_index < CELL_COUNT:
            raise ValueError(
                f"blank_index {self.blank_index} is outside 0..{CELL_COUNT - 1}."
            )
        if self.cells[self.blank_index] != BLANK:
            raise ValueError(
                f"blank_index {self.blank_index} does not point at the blank."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_cells(cls, cells: Iterable[int]) -> Board:
        """Create a board from a flat row-major label sequence.

        Example::

            Board.from_cells([1, 2, 3, 4, 5, 6, 7, 8,
                              9, 10, 11, 12, 13, 14, 0, 15])
        """
        flat = list(cells)
        if BLANK not in flat:
            raise ValueError("Board has no blank cell.")
        return cls(cells=flat, blank_index=flat.index(BLANK))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        if len(rows) != SIDE or any(len(row) != SIDE for row in rows):
            raise ValueError(f"Expected {SIDE} rows of {SIDE} cells.")
        return cls.from_cells(v for row in rows for v in row)

    @classmethod
    def solved(cls) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls.from_cells([*range(1, CELL_COUNT), BLANK])

    def copy(self) -> Board:
        # Skips validation; the source is already a valid board.
        obj = object.__new__(Board)
        obj.cells = self.cells[:]
        obj.blank_index = self.blank_index
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> list[list[int]]:
        return [self.cells[r * SIDE : (r + 1) * SIDE] for r in range(SIDE)]

    def key(self) -> tuple[int, ...]:
        """Hashable snapshot of the cells."""
        return tuple(self.cells)

    def is_equal(self, other: Board) -> bool:
        return self.cells == other.cells

    def can_move(self, direction: Direction) -> bool:
        row, col = divmod(self.blank_index, SIDE)
        if direction is Direction.UP:
            return row > 0
        if direction is Direction.DOWN:
            return row < SIDE - 1
        if direction is Direction.LEFT:
            return col > 0
        return col < SIDE - 1

    def can_be_solved(self, target: Board) -> bool:
        """Return True if *target* is reachable from this board."""
        return self._parity() == target._parity()

    # -- mutation -------------------------------------------------------------

    def move(self, direction: Direction) -> None:
        """Swap the blank with its neighbour in *direction*."""
        if not self.can_move(direction):
            raise IllegalMoveError(
                f"Cannot move {direction.value} with the blank at {self.blank_index}."
            )
        src = self.blank_index
        dst = src + _OFFSETS[direction]
        self.cells[src], self.cells[dst] = self.cells[dst], self.cells[src]
        self.blank_index = dst

    def apply(self, path: Iterable[Direction]) -> Board:
        """Return a copy of this board with every move of *path* applied."""
        board = self.copy()
        for direction in path:
            board.move(direction)
        return board

    # -- helpers --------------------------------------------------------------

    def _parity(self) -> int:
        # Inversions among the tiles plus the blank's row; every legal move
        # keeps this sum's parity.
        tiles = [v for v in self.cells if v != BLANK]
        inversions = 0
        for i in range(len(tiles)):
            for j in range(i + 1, len(tiles)):
                if tiles[i] > tiles[j]:
                    inversions += 1
        return (inversions + self.blank_index // SIDE) % 2
