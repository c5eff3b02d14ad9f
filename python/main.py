#!/usr/bin/env python3
"""15-puzzle search comparison.

Usage::

    python main.py                         # every strategy on the demo boards
    python main.py board.txt -a a-star-manhattan
    python main.py board.json -t goal.txt -f vanilla
    python main.py board.txt --memory-limit 268435456 -v
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import List, Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.search import MAX_DEPTH, MEMORY_LIMIT, SearchSettings  # noqa: E402
from backend.engine.solver import compare_algorithms  # noqa: E402
from backend.io import BoardFormatError, load_board  # noqa: E402
from backend.models.algorithm import SearchAlgorithm  # noqa: E402
from backend.models.board import Board  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- demo boards --------------------------------------------------------------

# Solved against Board.solved(); the first is three moves out.
DEMO_SOURCES = [
    [1, 2, 3, 4, 5, 6, 7, 8, 9, 0, 11, 12, 13, 10, 14, 15],
    [1, 2, 3, 4, 5, 6, 8, 12, 13, 9, 0, 7, 14, 11, 10, 15],
    [1, 2, 3, 4, 13, 6, 8, 12, 5, 9, 0, 7, 14, 11, 10, 15],
]


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _load(path: Path) -> Board:
    try:
        return load_board(path)
    except (BoardFormatError, OSError) as e:
        typer.echo(f"Error: {path}: {e}", err=True)
        raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    source: Optional[Path] = typer.Argument(
        None,
        help="Board file to solve. Omit to run the built-in demo boards.",
    ),
    target: Optional[Path] = typer.Option(
        None, "-t", "--target",
        help="Target board file. Defaults to the solved board.",
    ),
    algorithms: Optional[List[SearchAlgorithm]] = typer.Option(
        None, "-a", "--algorithm",
        help="Strategy to run; repeat for several. Omit to run all of them.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to present the results.",
    ),
    memory_limit: int = typer.Option(
        MEMORY_LIMIT, "--memory-limit",
        min=1,
        help="Memory ceiling in bytes for a single search.",
    ),
    max_depth: int = typer.Option(
        MAX_DEPTH, "--max-depth",
        min=0,
        help="Deepest bound tried by iterative deepening.",
    ),
    closed_set: bool = typer.Option(
        False, "--closed-set",
        help="Skip already expanded boards in A* and greedy search.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every search run.",
    ),
) -> None:
    """Compare 15-puzzle search strategies on one or more boards."""
    _configure_logging(verbose)

    goal = _load(target) if target is not None else Board.solved()
    if source is not None:
        sources = [_load(source)]
    else:
        sources = [Board.from_cells(cells) for cells in DEMO_SOURCES]

    settings = SearchSettings(
        memory_limit=memory_limit,
        max_depth=max_depth,
        closed_set=closed_set,
    )
    presenter = importlib.import_module(_RUNNERS[frontend])

    for board in sources:
        results = compare_algorithms(board, goal, algorithms or None, settings)
        presenter.show(board, goal, results)


if __name__ == "__main__":
    app()
