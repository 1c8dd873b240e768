"""Vanilla terminal frontend — no third-party dependencies.

Prints every board of the solution top to bottom, joined by arrows,
followed by the move count and search time.
"""

from __future__ import annotations

from backend.engine.search import SearchResult, SearchStatus
from backend.models.board import Board


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return a plain-text grid, one ``[ a  b  c ]`` line per row."""
    width = len(str(board.size * board.size - 1))  # widest number
    lines: list[str] = []
    for row in board.tiles:
        cells = " ".join(f"{v:>{width}}" for v in row)
        lines.append(f"    [ {cells} ]")
    return "\n".join(lines)


def render_path(path: list[Board]) -> str:
    arrow = "\n        |\n        v\n"
    return arrow.join(render_board(board) for board in path)


# -- entry point --------------------------------------------------------------


def run(result: SearchResult) -> None:
    if result.status == SearchStatus.EXHAUSTED:
        print("No solution: the goal is unreachable from the start board.")
    elif result.status == SearchStatus.LIMIT_REACHED:
        print(f"Gave up after {result.stats.expanded} expansions.")
    else:
        print("Solution:\n")
        print(render_path(result.path))
        print()
        print(f"moves: {len(result.path) - 1}")
    print(f"execution time: {result.stats.elapsed:.3f} s")
