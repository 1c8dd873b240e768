"""Open list for A* — a binary heap keyed by ``f`` with board lookup.

Entries are ``[f, seq, node]`` lists on a ``heapq`` heap. ``seq`` comes
from a monotonically increasing counter, so equal ``f`` values pop in
insertion order and nodes themselves are never compared. A cost decrease
marks the old entry as removed and pushes a fresh one; removed entries
are discarded when they reach the top.
"""

from __future__ import annotations

import heapq
import itertools

from backend.engine.search.node import Handle, SearchNode
from backend.models.board import Board

_REMOVED = object()


class Frontier:
    """Discovered-but-unexpanded search nodes."""

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._entries: dict[Board, list] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, board: object) -> bool:
        return board in self._entries

    # -- mutation -------------------------------------------------------------

    def insert(self, node: SearchNode) -> None:
        if node.board in self._entries:
            raise ValueError("Board is already in the frontier; use decrease_cost().")
        self._push(node)

    def extract_min(self) -> SearchNode:
        """Remove and return a node with the smallest ``f``.

        Raises ``IndexError`` if the frontier is empty.
        """
        while self._heap:
            _, _, node = heapq.heappop(self._heap)
            if node is _REMOVED:
                continue
            del self._entries[node.board]
            return node
        raise IndexError("extract_min from an empty frontier")

    def decrease_cost(
        self, node: SearchNode, g: int, f: int, parent: Handle | None
    ) -> None:
        """Lower *node*'s cost in place and restore its heap position."""
        entry = self._entries.get(node.board)
        if entry is None or entry[-1] is not node:
            raise KeyError(node.board)
        if f >= node.f:
            raise ValueError(f"New cost {f} does not improve on {node.f}.")
        entry[-1] = _REMOVED
        node.g = g
        node.f = f
        node.parent = parent
        self._push(node)

    # -- queries --------------------------------------------------------------

    def find_by_board(self, board: Board) -> SearchNode | None:
        entry = self._entries.get(board)
        return None if entry is None else entry[-1]

    # -- helpers --------------------------------------------------------------

    def _push(self, node: SearchNode) -> None:
        entry = [node.f, next(self._counter), node]
        self._entries[node.board] = entry
        heapq.heappush(self._heap, entry)
