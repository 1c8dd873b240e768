"""Closed list for A* with stable, index-based storage."""

from __future__ import annotations

from dataclasses import replace

from backend.engine.search.node import Handle, SearchNode
from backend.models.board import Board


class VisitedSet:
    """Expanded boards, stored once each in an append-only arena.

    Handles are list indices. Entries are never moved or removed, so a
    handle stays valid for as long as the set exists.
    """

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []
        self._handles: dict[Board, Handle] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, board: object) -> bool:
        return board in self._handles

    def __getitem__(self, handle: Handle) -> SearchNode:
        return self._nodes[handle]

    def insert_if_absent(self, node: SearchNode) -> Handle:
        """Store a copy of *node* unless its board is already present.

        Returns the handle of the stored entry. A board seen before keeps
        the ``g``, ``f`` and ``parent`` it was first stored with.
        """
        handle = self._handles.get(node.board)
        if handle is not None:
            return handle
        handle = Handle(len(self._nodes))
        self._nodes.append(replace(node))
        self._handles[node.board] = handle
        return handle

    def contains(self, board: Board) -> bool:
        return board in self._handles

    def get(self, handle: Handle) -> SearchNode:
        return self._nodes[handle]

    def path_to(self, handle: Handle) -> list[Board]:
        """Boards from the search root to *handle*, in that order."""
        path: list[Board] = []
        current: Handle | None = handle
        while current is not None:
            node = self._nodes[current]
            path.append(node.board)
            current = node.parent
        path.reverse()
        return path
