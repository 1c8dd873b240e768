"""Sliding puzzle solver."""

from __future__ import annotations

from backend.engine.search import SearchEngine
from backend.models.board import Board, Direction


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(start: Board, goal: Board) -> list[Board]:
        """Return the boards of a shortest solution, or ``[]`` if unsolvable."""
        return SearchEngine().solve(start, goal)

    @staticmethod
    def moves(start: Board, goal: Board) -> list[Direction]:
        """Return the blank moves of a shortest solution, or ``[]``."""
        path = Solver.solve(start, goal)
        return [a.direction_to(b) for a, b in zip(path, path[1:])]

    @staticmethod
    def hint(board: Board, goal: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board == goal:
            return None
        moves = Solver.moves(board, goal)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(start: Board, goal: Board) -> bool:
        """Return True if *goal* can be reached from *start*.

        Every slide is one transposition of cells and moves the blank by one,
        so the permutation taking *start* to *goal* must have the same parity
        as the blank's Manhattan distance.
        """
        n = start.size
        goal_index = {tile: idx for idx, tile in enumerate(goal.cells)}
        perm = [goal_index[tile] for tile in start.cells]

        # parity via cycle decomposition
        seen = [False] * len(perm)
        transpositions = 0
        for i in range(len(perm)):
            length = 0
            j = i
            while not seen[j]:
                seen[j] = True
                j = perm[j]
                length += 1
            if length:
                transpositions += length - 1

        br, bc = start.blank_pos
        gr, gc = goal.blank_pos
        return transpositions % 2 == (abs(br - gr) + abs(bc - gc)) % 2
