#!/usr/bin/env python3
"""Sliding-tile puzzle solver.

Usage::

    python main.py                           # random 3×3, rich output
    python main.py -f vanilla -s 4 --scramble 30 --seed 7
    python main.py --start "1,2,3,4,0,5,6,7,8" --goal "1,2,3,4,5,0,6,7,8"
"""

import importlib
import logging
import math
import random
import re
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Solver  # noqa: E402
from backend.engine.search import SearchEngine, SearchStatus  # noqa: E402
from backend.models.board import Board  # noqa: E402

DEFAULT_SIZE = 3
DEFAULT_SCRAMBLE = 20

logger = logging.getLogger("tile_search")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _parse_board(raw: str, size: int | None) -> Board:
    """Parse ``"1,2,3,4,0,5,6,7,8"`` (commas, spaces or ``;`` between tiles)."""
    try:
        flat = [int(tok) for tok in re.split(r"[,;\s]+", raw.strip()) if tok]
    except ValueError:
        raise typer.BadParameter(f"Tiles must be integers: {raw!r}") from None

    if size is None:
        size = math.isqrt(len(flat))
    if sorted(flat) != list(range(size * size)):
        raise typer.BadParameter(
            f"Expected a permutation of 0..{size * size - 1}, got {raw!r}"
        )
    try:
        return Board.from_flat(size, flat)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to print the solution.",
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=2, max=8,
        help=f"Board side. Inferred from --start/--goal, else {DEFAULT_SIZE}.",
    ),
    start: Optional[str] = typer.Option(
        None, "--start",
        help="Start board, row-major. Omit for a random scramble of the goal.",
    ),
    goal: Optional[str] = typer.Option(
        None, "--goal",
        help="Goal board, row-major. Omit for 1..N²-1 with the blank last.",
    ),
    scramble: int = typer.Option(
        DEFAULT_SCRAMBLE, "--scramble",
        min=0,
        help="Random slides applied to the goal when --start is omitted.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the scramble.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        help="Stop after this many expanded boards.",
    ),
    check_solvable: bool = typer.Option(
        False, "--check-solvable",
        help="Reject unsolvable pairs by parity instead of searching.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve a sliding-tile puzzle with A* and print the shortest path."""
    _setup_logging(verbose)

    goal_board = _parse_board(goal, size) if goal else None
    start_board = _parse_board(start, size) if start else None

    if size is None:
        known = start_board or goal_board
        size = known.size if known else DEFAULT_SIZE
    if goal_board is None:
        goal_board = GameGenerator.solved(size)
    if start_board is None:
        start_board = GameGenerator.scramble(
            goal_board, scramble, random.Random(seed)
        )

    if start_board.size != goal_board.size:
        raise typer.BadParameter("Start and goal boards must have the same size.")

    if not Solver.is_solvable(start_board, goal_board):
        if check_solvable:
            typer.echo("Goal is unreachable from the start board (parity).", err=True)
            raise typer.Exit(code=1)
        logger.warning("Boards differ in parity; the search will exhaust every state.")

    engine = SearchEngine(max_expansions=max_expansions)
    result = engine.search(start_board, goal_board)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(result)

    if result.status != SearchStatus.FOUND:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
