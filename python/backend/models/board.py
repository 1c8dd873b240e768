"""Board model for the sliding-tile puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Direction the *blank* moves in a single slide."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class BoardInvariantError(RuntimeError):
    """A board does not hold a permutation of ``0..size²-1``."""


@dataclass(frozen=True)
class Board:
    """One configuration of an N×N sliding puzzle.

    Cells are stored as a flat row-major tuple. 0 represents the blank.
    Boards are immutable, so equal boards hash equal and may be used as
    dictionary keys by the search structures.
    """

    size: int
    cells: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 2:
            raise ValueError(f"Board side must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(size=size, cells=tuple(flat))

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows, e.g. ``[[1, 2], [3, 0]]``."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Every row must have as many tiles as there are rows.")
        return cls.from_flat(size, [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    @property
    def tiles(self) -> list[list[int]]:
        """Rows of the board as fresh lists."""
        n = self.size
        return [list(self.cells[r * n : (r + 1) * n]) for r in range(n)]

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.locate(0)

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * self.size + col]

    def locate(self, tile: int) -> tuple[int, int]:
        """Return ``(row, col)`` of *tile*.

        Raises ``BoardInvariantError`` if the tile is absent, which only
        happens for boards that are not a permutation of ``0..size²-1``.
        """
        try:
            idx = self.cells.index(tile)
        except ValueError:
            raise BoardInvariantError(
                f"Tile {tile} is not on the {self.size}×{self.size} board {self.cells}."
            ) from None
        return divmod(idx, self.size)

    def is_tile_correct(self, row: int, col: int, goal: Board) -> bool:
        """Check if the tile at (row, col) already sits where *goal* has it."""
        return self.get_tile(row, col) == goal.get_tile(row, col)

    # -- moves ----------------------------------------------------------------

    def slide(self, direction: Direction) -> Board | None:
        """Move the blank one step in *direction*.

        Returns the resulting board, or ``None`` if the blank would leave
        the grid. ``self`` is never modified.
        """
        n = self.size
        br, bc = self.blank_pos
        dr, dc = direction.offset
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < n and 0 <= tc < n):
            return None

        cells = list(self.cells)
        bi, ti = br * n + bc, tr * n + tc
        cells[bi], cells[ti] = cells[ti], cells[bi]
        return Board(size=n, cells=tuple(cells))

    def direction_to(self, other: Board) -> Direction | None:
        """Return the slide that turns this board into *other*, if any."""
        for direction in Direction:
            if self.slide(direction) == other:
                return direction
        return None

    # -- heuristic ------------------------------------------------------------

    def manhattan_distance(self, goal: Board) -> int:
        """Sum of Manhattan distances of every non-blank tile to its place in *goal*."""
        distance = 0
        for idx, tile in enumerate(self.cells):
            if tile == 0:
                continue
            r, c = divmod(idx, self.size)
            gr, gc = goal.locate(tile)
            distance += abs(r - gr) + abs(c - gc)
        return distance
