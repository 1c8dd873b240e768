"""A* engine tests — outcomes, optimality against breadth-first search."""

from __future__ import annotations

import logging
import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.search import (
    SearchEngine,
    SearchLimitReached,
    SearchStatus,
    solve,
)
from backend.models.board import Board, Direction
from conftest import bfs_distance, bfs_distances


def _assert_adjacent(path: list[Board]) -> None:
    for a, b in zip(path, path[1:]):
        assert a.direction_to(b) is not None, f"{a.cells} -> {b.cells} is not one slide"


# -- outcomes -----------------------------------------------------------------


def test_start_equals_goal(goal3: Board) -> None:
    assert solve(goal3, goal3) == [goal3]


def test_single_move() -> None:
    start = Board.from_rows([[1, 2, 3], [4, 0, 5], [6, 7, 8]])
    goal = Board.from_rows([[1, 2, 3], [4, 5, 0], [6, 7, 8]])

    result = SearchEngine().search(start, goal)

    assert result.status == SearchStatus.FOUND
    assert result.path == [start, goal]
    assert result.moves == [Direction.RIGHT]


def test_unsolvable_pair_exhausts() -> None:
    start = Board.from_rows([[1, 2], [3, 0]])
    goal = Board.from_rows([[2, 1], [3, 0]])

    result = SearchEngine().search(start, goal)

    assert result.status == SearchStatus.EXHAUSTED
    assert result.path == []
    assert not result.solved
    # the whole reachable component of a 2×2 board is 4!/2 boards
    assert result.stats.expanded == 12
    assert solve(start, goal) == []


def test_expansion_limit() -> None:
    # 31 moves from the goal
    start = Board.from_rows([[8, 6, 7], [2, 5, 4], [3, 0, 1]])
    goal = GameGenerator.solved(3)
    engine = SearchEngine(max_expansions=2)

    result = engine.search(start, goal)
    assert result.status == SearchStatus.LIMIT_REACHED
    assert result.path == []
    assert result.stats.expanded == 2

    with pytest.raises(SearchLimitReached):
        engine.solve(start, goal)


def test_limit_does_not_hide_trivial_solution(goal3: Board) -> None:
    result = SearchEngine(max_expansions=1).search(goal3, goal3)
    assert result.status == SearchStatus.FOUND


# -- optimality ---------------------------------------------------------------


def test_optimal_on_every_2x2_board() -> None:
    goal = GameGenerator.solved(2)
    for start, dist in bfs_distances(goal).items():
        path = solve(start, goal)
        assert len(path) - 1 == dist
        assert path[0] == start and path[-1] == goal
        _assert_adjacent(path)


@pytest.mark.parametrize("seed", range(12))
def test_optimal_on_3x3_scrambles(seed: int, goal3: Board) -> None:
    rng = random.Random(seed)
    start = GameGenerator.scramble(goal3, rng.randint(4, 18), rng)

    path = solve(start, goal3)

    assert path[0] == start
    assert path[-1] == goal3
    _assert_adjacent(path)
    assert len(path) - 1 == bfs_distance(start, goal3)


def test_arbitrary_goal_layout() -> None:
    goal = Board.from_rows([[0, 1, 2], [3, 4, 5], [6, 7, 8]])
    start = GameGenerator.scramble(goal, 14, random.Random(99))

    path = solve(start, goal)

    _assert_adjacent(path)
    assert len(path) - 1 == bfs_distance(start, goal)


def test_zero_heuristic_finds_same_length(goal3: Board) -> None:
    start = GameGenerator.scramble(goal3, 12, random.Random(5))
    uniform = SearchEngine(heuristic=lambda goal: (lambda board: 0))

    assert len(uniform.solve(start, goal3)) == len(solve(start, goal3))


def test_4x4_scramble() -> None:
    goal = GameGenerator.solved(4)
    start = GameGenerator.scramble(goal, 24, random.Random(11))

    path = solve(start, goal)

    _assert_adjacent(path)
    assert path[0] == start and path[-1] == goal
    assert len(path) - 1 <= 24
    # every path between two boards has the same parity
    assert (len(path) - 1) % 2 == 0


def test_repeatable(goal3: Board) -> None:
    start = GameGenerator.generate(3, steps=40, seed=8)
    first = solve(start, goal3)
    assert len(solve(start, goal3)) == len(first)
    assert SearchEngine().search(start, goal3).path == first


# -- instrumentation ----------------------------------------------------------


def test_stats_and_logging(goal3: Board, caplog: pytest.LogCaptureFixture) -> None:
    start = GameGenerator.scramble(goal3, 10, random.Random(1))

    with caplog.at_level(logging.INFO, logger="backend.engine.search.astar"):
        result = SearchEngine().search(start, goal3)

    assert result.stats.expanded >= len(result.path) - 1
    assert result.stats.generated >= len(result.path) - 1
    assert result.stats.peak_frontier >= 1
    assert result.stats.elapsed >= 0.0
    assert any("found" in rec.getMessage() for rec in caplog.records)
