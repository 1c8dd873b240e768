"""Manhattan-distance heuristic with a precomputed goal lookup."""

from __future__ import annotations

from backend.models.board import Board


class ManhattanHeuristic:
    """Scores boards against a fixed *goal*.

    Equivalent to ``board.manhattan_distance(goal)`` but looks tile
    positions up in a table built once, so each call is O(size²).
    """

    def __init__(self, goal: Board) -> None:
        self.goal = goal
        self._size = goal.size
        self._goal_pos: list[tuple[int, int]] = [(0, 0)] * len(goal.cells)
        for idx, tile in enumerate(goal.cells):
            self._goal_pos[tile] = divmod(idx, goal.size)

    def __call__(self, board: Board) -> int:
        n = self._size
        goal_pos = self._goal_pos
        distance = 0
        for idx, tile in enumerate(board.cells):
            if tile == 0:
                continue
            gr, gc = goal_pos[tile]
            distance += abs(idx // n - gr) + abs(idx % n - gc)
        return distance
