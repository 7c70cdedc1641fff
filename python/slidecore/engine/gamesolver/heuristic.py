"""Heuristic functions for the search engine."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from slidecore.engine.gamesolver.node import UNSET_HEURISTIC, Node
from slidecore.engine.gamesolver.state import State


class HeuristicFunction(ABC):
    """Estimates the number of moves left from a node to the goal."""

    @abstractmethod
    def evaluate(self, node: Node) -> int:
        """Return a non-negative estimate for *node*."""


class ZeroHeuristic(HeuristicFunction):
    """Always 0; turns IDA* into plain iterative deepening."""

    def evaluate(self, node: Node) -> int:
        return 0


class ManhattanDistance(HeuristicFunction):
    """Sum of the distances of every cell from its home.

    The raw sum is cached on the node.  What ``evaluate`` returns is that
    sum scaled by ``divert_factor`` and rounded up: any factor above 1.0
    makes the estimate inadmissible, so the search commits to a path sooner
    at the risk of it being longer than optimal.
    """

    def __init__(self, divert_factor: float = 1.0) -> None:
        self.divert_factor = divert_factor

    @property
    def divert_factor(self) -> float:
        return self._divert_factor

    @divert_factor.setter
    def divert_factor(self, value: float) -> None:
        if value < 1.0:
            raise ValueError(f"divert_factor must be at least 1.0, got {value}.")
        self._divert_factor = value

    def evaluate(self, node: Node) -> int:
        heuristic = node.heuristic
        if heuristic == UNSET_HEURISTIC:
            heuristic = self.calculate(node.state)
            node.heuristic = heuristic
        if self._divert_factor == 1.0:
            return heuristic
        return math.ceil(heuristic * self._divert_factor)

    def calculate(self, state: State) -> int:
        grid = state.grid
        width = grid.width
        blank = grid.blank_position.to_offset(width)
        total = 0
        for offset, order in enumerate(grid.key()):
            if offset == blank:
                continue
            y, x = divmod(offset, width)
            home_y, home_x = divmod(order, width)
            total += abs(x - home_x) + abs(y - home_y)
        return total
