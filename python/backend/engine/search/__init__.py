from backend.engine.search.astar import (
    SearchEngine,
    SearchLimitReached,
    SearchResult,
    SearchStats,
    SearchStatus,
    solve,
)
from backend.engine.search.frontier import Frontier
from backend.engine.search.node import Handle, SearchNode
from backend.engine.search.visited import VisitedSet

__all__ = [
    "Frontier",
    "Handle",
    "SearchEngine",
    "SearchLimitReached",
    "SearchNode",
    "SearchResult",
    "SearchStats",
    "SearchStatus",
    "VisitedSet",
    "solve",
]
