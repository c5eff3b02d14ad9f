"""Vanilla terminal presenter — no third-party dependencies.

Prints the source and target boards side by side, then one block per
strategy in the layout of the classic comparison report.
"""

from __future__ import annotations

import sys

from backend.models.algorithm import SearchAlgorithm
from backend.models.board import BLANK, SIDE, Board
from backend.models.result import SearchResult, SearchStatus


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_RED = "\033[31;1m"  # bold red
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset

_STATUS_STYLE = {
    SearchStatus.SOLVED: _G,
    SearchStatus.NOT_SOLVED: _Y,
    SearchStatus.MEMORY_EXCEEDED: _Y,
    SearchStatus.UNSOLVABLE: _RED,
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, target: Board) -> list[str]:
    """Return the board as text lines; tiles already in place are green."""
    width = len(str(SIDE * SIDE - 1))
    cell_w = width + 2
    sep = "+" + (("-" * cell_w + "+") * SIDE)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif target.cells[r * SIDE + c] == val:
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return lines


def _render_result(algorithm: SearchAlgorithm, result: SearchResult) -> str:
    style = _STATUS_STYLE[result.status]
    lines = [
        f"{_C}Algorithm:{_R} {algorithm.label}",
        f" * Status: {style}{result.status.label}{_R}",
    ]
    if result.status is SearchStatus.UNSOLVABLE:
        return "\n".join(lines)

    path = " ".join(d.name for d in result.path)
    lines += [
        f"   - Path:          {path}",
        f"   - Spent          {result.time_spent:.6f} seconds",
        f"   - Took           {result.moves} moves",
        f"   - Explored       {result.explored_nodes_count} nodes in total",
        f"   - Stored at most {result.max_nodes_in_frontier} nodes in frontier",
    ]
    return "\n".join(lines)


# -- entry point --------------------------------------------------------------


def show(
    source: Board,
    target: Board,
    results: dict[SearchAlgorithm, SearchResult],
) -> None:
    out = sys.stdout
    out.write("*" * 45 + "\n")

    left = _render_board(source, target)
    right = _render_board(target, target)
    pad = " " * 4
    out.write(f"  Source{' ' * (len(left[0]) - 6)}{pad}  Target\n")
    for a, b in zip(left, right):
        out.write(f"  {a}{pad}  {b}\n")
    out.write("\n")

    for algorithm, result in results.items():
        out.write(_render_result(algorithm, result) + "\n")
    out.flush()
