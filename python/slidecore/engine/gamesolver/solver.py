"""Iterative-deepening A* solver."""

from __future__ import annotations

import logging
import time

from slidecore.engine.gamesolver.heuristic import HeuristicFunction, ManhattanDistance
from slidecore.engine.gamesolver.move import Move
from slidecore.engine.gamesolver.node import Node
from slidecore.engine.gamesolver.path import Path, Solution
from slidecore.engine.gamesolver.state import State

logger = logging.getLogger(__name__)

# Every move changes the Manhattan distance by exactly one, so a goal can
# only be found at bounds with the parity of the initial estimate.
BOUND_STEP = 2


class SearchTimeout(TimeoutError):
    """Raised when a search runs past its time budget."""

    def __init__(self, timeout: int, expanded_node_count: int, elapsed_time: float) -> None:
        super().__init__(
            f"No solution found within {timeout} ms "
            f"({expanded_node_count} nodes expanded)."
        )
        self.timeout = timeout
        self.expanded_node_count = expanded_node_count
        self.elapsed_time = elapsed_time


class IDAStar:
    """Bounded depth-first search with a growing cost bound.

    ``timeout`` is in milliseconds; 0 lets the search run until it finds the
    goal.  The search keeps no visited set: only the move undoing a node's
    own incoming move is pruned.

    An instance is not reentrant.  Run concurrent searches on separate
    instances and separate grids.
    """

    def __init__(
        self,
        heuristic: HeuristicFunction | None = None,
        timeout: int = 0,
    ) -> None:
        self.heuristic = heuristic
        self.timeout = timeout
        self._start_time = 0.0
        self._expanded_node_count = 0

    @property
    def heuristic(self) -> HeuristicFunction:
        return self._heuristic

    @heuristic.setter
    def heuristic(self, value: HeuristicFunction | None) -> None:
        self._heuristic = value if value is not None else ManhattanDistance()

    @property
    def timeout(self) -> int:
        return self._timeout

    @timeout.setter
    def timeout(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"timeout must not be negative, got {value}.")
        self._timeout = value

    # -- public API -----------------------------------------------------------

    def solve(self, initial_state: State, goal_state: State) -> Solution:
        """Find a path from *initial_state* to *goal_state*.

        Raises ``SearchTimeout`` if ``timeout`` milliseconds pass first.
        """
        if initial_state is None:
            raise ValueError("initial_state must not be None.")
        if goal_state is None:
            raise ValueError("goal_state must not be None.")

        self._start_time = time.perf_counter()
        self._expanded_node_count = 0

        root = Node(initial_state)
        cost_bound = self._heuristic.evaluate(root)
        goal_node: Node | None = None

        while goal_node is None:
            logger.debug(
                "Searching with cost bound %d (%d nodes expanded so far)",
                cost_bound,
                self._expanded_node_count,
            )
            goal_node = self._depth_first_search(root, cost_bound, goal_state)
            cost_bound += BOUND_STEP

        elapsed = time.perf_counter() - self._start_time
        logger.info(
            "Solved in %d moves, %d nodes expanded, %.3fs",
            goal_node.cost,
            self._expanded_node_count,
            elapsed,
        )
        return Solution(Path.create(goal_node), self._expanded_node_count, elapsed)

    def hint(self, initial_state: State, goal_state: State) -> Move | None:
        """Return the first move of a solution, or ``None`` if already there."""
        path = self.solve(initial_state, goal_state).path
        return path.moves[0] if len(path) > 1 else None

    # -- search ---------------------------------------------------------------

    def _depth_first_search(
        self, root: Node, cost_bound: int, goal_state: State
    ) -> Node | None:
        # Iterative form of the recursive probe: each stack entry is the
        # iterator over one node's children, so children are visited in the
        # same order without growing the interpreter stack.
        if root.state == goal_state:
            return root
        self._expanded_node_count += 1
        stack = [iter(self._get_children(root))]

        while stack:
            for child in stack[-1]:
                self._check_timeout()
                if child.cost + self._heuristic.evaluate(child) > cost_bound:
                    continue
                if child.state == goal_state:
                    return child
                self._expanded_node_count += 1
                stack.append(iter(self._get_children(child)))
                break
            else:
                stack.pop()

        return None

    @staticmethod
    def _get_children(node: Node) -> list[Node]:
        state = node.state
        last_move = node.move
        children: list[Node] = []
        for move in state.possible_moves:
            if move.is_inverse(last_move):
                continue
            children.append(Node(move.apply_to(state), node, move))
        return children

    def _check_timeout(self) -> None:
        if self._timeout == 0:
            return
        elapsed = time.perf_counter() - self._start_time
        if elapsed * 1000.0 > self._timeout:
            logger.info(
                "Search timed out after %.3fs, %d nodes expanded",
                elapsed,
                self._expanded_node_count,
            )
            raise SearchTimeout(self._timeout, self._expanded_node_count, elapsed)
