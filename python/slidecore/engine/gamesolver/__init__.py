from slidecore.engine.gamesolver.heuristic import (
    HeuristicFunction,
    ManhattanDistance,
    ZeroHeuristic,
)
from slidecore.engine.gamesolver.move import Move
from slidecore.engine.gamesolver.node import Node
from slidecore.engine.gamesolver.path import Path, Solution
from slidecore.engine.gamesolver.solver import IDAStar, SearchTimeout
from slidecore.engine.gamesolver.state import State

__all__ = [
    "HeuristicFunction",
    "IDAStar",
    "ManhattanDistance",
    "Move",
    "Node",
    "Path",
    "SearchTimeout",
    "Solution",
    "State",
    "ZeroHeuristic",
]
