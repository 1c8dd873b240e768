"""Generates goal boards and solvable start boards."""

from __future__ import annotations

import random

from backend.models.board import Board, Direction

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameGenerator:
    """Creates solvable puzzles by random-walking the blank from the goal."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.from_flat(size, list(range(1, size * size)) + [0])

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random slides without immediate backtracking."""
        rng = rng or random.Random()
        prev: Direction | None = None

        for _ in range(steps):
            options = [
                (d, nxt)
                for d in Direction
                if d != prev and (nxt := board.slide(d)) is not None
            ]
            direction, board = rng.choice(options)
            prev = _OPPOSITE[direction]
        return board

    @staticmethod
    def generate(size: int, steps: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board of the given size.

        *steps* defaults to ``size * size * 10`` slides away from the goal.
        """
        if steps is None:
            steps = size * size * 10
        rng = random.Random(seed)
        goal = GameGenerator.solved(size)
        board = GameGenerator.scramble(goal, steps, rng)

        # Ensure the board is not already solved
        while steps > 0 and board == goal:
            board = GameGenerator.scramble(goal, steps, rng)

        return board
