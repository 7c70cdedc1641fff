"""Solver results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from slidecore.engine.gamesolver.move import Move
from slidecore.engine.gamesolver.node import Node


class Path:
    """Nodes from the initial node to the goal node, in that order."""

    def __init__(self, nodes: list[Node]) -> None:
        self.nodes = nodes

    @classmethod
    def create(cls, goal_node: Node | None) -> Path | None:
        """Walk the parent links back from *goal_node*."""
        if goal_node is None:
            return None
        nodes: list[Node] = [goal_node] * (goal_node.cost + 1)
        node = goal_node
        for i in range(goal_node.cost, -1, -1):
            nodes[i] = node
            node = node.parent
        return cls(nodes)

    @property
    def moves(self) -> list[Move]:
        return [node.move for node in self.nodes[1:]]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)


@dataclass(frozen=True)
class Solution:
    path: Path
    expanded_node_count: int
    elapsed_time: float  # seconds
