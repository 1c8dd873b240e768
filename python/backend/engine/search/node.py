"""Search node and arena handle types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

from backend.models.board import Board

# Index of an entry in a ``VisitedSet``; valid for the whole search.
Handle = NewType("Handle", int)


@dataclass
class SearchNode:
    board: Board
    g: int
    f: int
    parent: Handle | None = None

    @property
    def h(self) -> int:
        return self.f - self.g
