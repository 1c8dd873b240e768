"""Shared helpers: a breadth-first reference search over boards."""

from __future__ import annotations

from collections import deque

import pytest

from backend.models.board import Board, Direction


def bfs_distances(start: Board) -> dict[Board, int]:
    """Shortest slide count from *start* to every reachable board."""
    dist: dict[Board, int] = {start: 0}
    queue = deque([start])
    while queue:
        board = queue.popleft()
        for direction in Direction:
            nxt = board.slide(direction)
            if nxt is not None and nxt not in dist:
                dist[nxt] = dist[board] + 1
                queue.append(nxt)
    return dist


def bfs_distance(start: Board, goal: Board) -> int | None:
    """Shortest slide count from *start* to *goal*, or ``None`` if unreachable."""
    if start == goal:
        return 0
    seen = {start}
    frontier = [start]
    depth = 0
    while frontier:
        depth += 1
        nxt_frontier: list[Board] = []
        for board in frontier:
            for direction in Direction:
                nxt = board.slide(direction)
                if nxt is None or nxt in seen:
                    continue
                if nxt == goal:
                    return depth
                seen.add(nxt)
                nxt_frontier.append(nxt)
        frontier = nxt_frontier
    return None


@pytest.fixture
def goal3() -> Board:
    return Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
