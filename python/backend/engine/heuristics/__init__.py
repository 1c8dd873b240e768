from backend.engine.heuristics.manhattan import ManhattanHeuristic

__all__ = ["ManhattanHeuristic"]
