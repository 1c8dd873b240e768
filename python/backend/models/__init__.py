from backend.models.board import Board, BoardInvariantError, Direction

__all__ = ["Board", "BoardInvariantError", "Direction"]
