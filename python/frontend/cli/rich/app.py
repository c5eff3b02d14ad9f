"""Rich terminal presenter — tables, colours, and panels.

Uses the ``rich`` library for styled output of the same data the vanilla
presenter prints: both boards, then a comparison table of every strategy
run and the solution paths found.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.models.algorithm import SearchAlgorithm
from backend.models.board import BLANK, SIDE, Board
from backend.models.result import SearchResult, SearchStatus

console = Console()

_STATUS_STYLE = {
    SearchStatus.SOLVED: "bold green",
    SearchStatus.NOT_SOLVED: "bold yellow",
    SearchStatus.MEMORY_EXCEEDED: "bold yellow",
    SearchStatus.UNSOLVABLE: "bold red",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, target: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(SIDE * SIDE - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIDE):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif target.cells[r * SIDE + c] == val:
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- results ------------------------------------------------------------------


def _render_results(results: dict[SearchAlgorithm, SearchResult]) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        title="Strategies",
        title_style="bold cyan",
    )
    table.add_column("Algorithm", style="bold")
    table.add_column("Status")
    table.add_column("Moves", justify="right", style="yellow")
    table.add_column("Explored", justify="right", style="yellow")
    table.add_column("Peak frontier", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="yellow")

    for algorithm, result in results.items():
        searched = result.status is not SearchStatus.UNSOLVABLE
        table.add_row(
            algorithm.label,
            Text(result.status.label, style=_STATUS_STYLE[result.status]),
            str(result.moves) if result.is_solved else "-",
            str(result.explored_nodes_count) if searched else "-",
            str(result.max_nodes_in_frontier) if searched else "-",
            f"{result.time_spent:.3f}s" if searched else "-",
        )

    return table


def _render_paths(results: dict[SearchAlgorithm, SearchResult]) -> list[Text]:
    lines: list[Text] = []
    for algorithm, result in results.items():
        if not result.is_solved:
            continue
        line = Text()
        line.append(f"{algorithm.label}: ", style="cyan")
        if result.path:
            line.append(" ".join(d.name for d in result.path))
        else:
            line.append("already at target", style="dim")
        lines.append(line)
    return lines


# -- entry point --------------------------------------------------------------


def show(
    source: Board,
    target: Board,
    results: dict[SearchAlgorithm, SearchResult],
) -> None:
    boards = Columns(
        [
            Panel(_render_board(source, target), title="[bold]Source[/bold]",
                  border_style="bright_blue"),
            Panel(_render_board(target, target), title="[bold]Target[/bold]",
                  border_style="green"),
        ],
        padding=(0, 4),
    )

    console.print()
    console.print(Align.center(boards))
    console.print(Align.center(_render_results(results)))

    paths = _render_paths(results)
    if paths:
        console.print(
            Panel(Group(*paths), title="[bold cyan]Paths[/bold cyan]", border_style="cyan")
        )
