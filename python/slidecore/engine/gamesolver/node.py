"""Search-tree nodes."""

from __future__ import annotations

from slidecore.engine.gamesolver.move import Move
from slidecore.engine.gamesolver.state import State

UNSET_HEURISTIC = -1


class Node:
    """A vertex of the search tree.

    ``parent`` only serves path reconstruction.  ``heuristic`` caches the
    raw heuristic value and is the one attribute written after creation.
    """

    __slots__ = ("state", "parent", "move", "cost", "heuristic")

    def __init__(
        self,
        state: State,
        parent: Node | None = None,
        move: Move | None = None,
    ) -> None:
        self.state = state
        self.parent = parent
        self.move = move
        self.cost = 0 if parent is None else parent.cost + 1
        self.heuristic = UNSET_HEURISTIC

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    def __repr__(self) -> str:
        return f"Node(cost={self.cost}, move={self.move!r})"
