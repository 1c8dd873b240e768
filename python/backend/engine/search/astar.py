"""A* search over sliding-puzzle boards."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from time import perf_counter
from typing import Callable

from backend.engine.heuristics import ManhattanHeuristic
from backend.engine.search.frontier import Frontier
from backend.engine.search.node import SearchNode
from backend.engine.search.visited import VisitedSet
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

HeuristicFactory = Callable[[Board], Callable[[Board], int]]


class SearchStatus(StrEnum):
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    LIMIT_REACHED = "limit_reached"


class SearchLimitReached(RuntimeError):
    """The expansion budget ran out before the search finished."""

    def __init__(self, expanded: int) -> None:
        super().__init__(f"Search stopped after {expanded} expansions.")
        self.expanded = expanded


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    peak_frontier: int = 0
    elapsed: float = 0.0


@dataclass
class SearchResult:
    status: SearchStatus
    path: list[Board] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def solved(self) -> bool:
        return self.status == SearchStatus.FOUND

    @property
    def moves(self) -> list[Direction]:
        """Blank directions leading from ``path[0]`` to ``path[-1]``."""
        out: list[Direction] = []
        for a, b in zip(self.path, self.path[1:]):
            direction = a.direction_to(b)
            assert direction is not None, "adjacent path boards must differ by one slide"
            out.append(direction)
        return out


class SearchEngine:
    """Runs A* from a start board to a goal board.

    *heuristic* builds a scoring function for a given goal; it must be
    admissible and consistent for the returned path to be optimal.
    *max_expansions* bounds the number of nodes expanded; ``None`` means
    search until the goal is found or the reachable states run out.
    """

    def __init__(
        self,
        heuristic: HeuristicFactory = ManhattanHeuristic,
        max_expansions: int | None = None,
    ) -> None:
        self.heuristic = heuristic
        self.max_expansions = max_expansions

    def search(self, start: Board, goal: Board) -> SearchResult:
        t0 = perf_counter()
        h = self.heuristic(goal)
        frontier = Frontier()
        visited = VisitedSet()
        stats = SearchStats()
        status = SearchStatus.RUNNING

        logger.debug("A* start: %s -> %s (h=%d)", start.cells, goal.cells, h(start))
        frontier.insert(SearchNode(board=start, g=0, f=h(start)))
        stats.peak_frontier = 1

        while status == SearchStatus.RUNNING:
            if not frontier:
                status = SearchStatus.EXHAUSTED
                break
            picked = frontier.extract_min()
            handle = visited.insert_if_absent(picked)

            if picked.board == goal:
                status = SearchStatus.FOUND
                break
            if self.max_expansions is not None and stats.expanded >= self.max_expansions:
                status = SearchStatus.LIMIT_REACHED
                break

            stats.expanded += 1
            for direction in Direction:
                child = picked.board.slide(direction)
                if child is None or child in visited:
                    continue
                stats.generated += 1

                g = picked.g + 1
                f = g + h(child)
                existing = frontier.find_by_board(child)
                if existing is not None:
                    if f < existing.f:
                        frontier.decrease_cost(existing, g, f, handle)
                    continue
                frontier.insert(SearchNode(board=child, g=g, f=f, parent=handle))

            stats.peak_frontier = max(stats.peak_frontier, len(frontier))

        stats.elapsed = perf_counter() - t0
        path = visited.path_to(handle) if status == SearchStatus.FOUND else []
        logger.info(
            "A* %s: %d moves, %d expanded, %d generated, %.3fs",
            status.value,
            max(len(path) - 1, 0),
            stats.expanded,
            stats.generated,
            stats.elapsed,
        )
        return SearchResult(status=status, path=path, stats=stats)

    def solve(self, start: Board, goal: Board) -> list[Board]:
        """Return a shortest path from *start* to *goal*, or ``[]`` if none exists."""
        result = self.search(start, goal)
        if result.status == SearchStatus.LIMIT_REACHED:
            raise SearchLimitReached(result.stats.expanded)
        return result.path


def solve(start: Board, goal: Board) -> list[Board]:
    """Shortest blank-slide path from *start* to *goal*; ``[]`` if unreachable."""
    return SearchEngine().solve(start, goal)
