"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library to lay the solution path out as a row of
board tables, with a summary panel of the search statistics.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.search import SearchResult, SearchStatus
from backend.models.board import Board, Direction

console = Console()

_ARROWS: dict[Direction, str] = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, goal: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c, goal):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_path(result: SearchResult) -> Columns:
    goal = result.path[-1]
    items: list[Group] = []
    moves = [None, *result.moves]
    for i, (board, move) in enumerate(zip(result.path, moves)):
        caption = Text()
        if move is None:
            caption.append("start", style="dim")
        else:
            caption.append(f"{i}. ", style="dim")
            caption.append(f"{_ARROWS[move]} {move.value}", style="bold cyan")
        items.append(Group(Align.center(caption), _render_board(board, goal)))
    return Columns(items, padding=(1, 2))


def _render_stats(result: SearchResult) -> Text:
    stats = result.stats
    text = Text()
    text.append("  Expanded: ", style="dim")
    text.append(str(stats.expanded), style="bold yellow")
    text.append("    Generated: ", style="dim")
    text.append(str(stats.generated), style="bold yellow")
    text.append("    Peak frontier: ", style="dim")
    text.append(str(stats.peak_frontier), style="bold yellow")
    text.append("    Time: ", style="dim")
    text.append(f"{stats.elapsed:.3f}s", style="bold yellow")
    return text


# -- entry point --------------------------------------------------------------


def run(result: SearchResult) -> None:
    if result.status == SearchStatus.FOUND:
        n_moves = len(result.path) - 1
        body = Group(_render_path(result), Text(""), _render_stats(result))
        panel = Panel(
            body,
            title=f"[bold green]Solved in {n_moves} moves[/bold green]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    elif result.status == SearchStatus.EXHAUSTED:
        panel = Panel(
            Group(Text("Goal is unreachable from the start board.", style="red"),
                  _render_stats(result)),
            title="[bold red]No solution[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    else:
        panel = Panel(
            Group(Text("Expansion budget exhausted before reaching the goal.",
                       style="yellow"),
                  _render_stats(result)),
            title="[bold yellow]Search stopped[/bold yellow]",
            border_style="yellow",
            padding=(1, 2),
        )

    console.print()
    console.print(panel)
