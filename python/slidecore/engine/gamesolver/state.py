"""Search vertices."""

from __future__ import annotations

from slidecore.engine.gamesolver.move import Move
from slidecore.models.grid import Grid


class State:
    """Wraps a grid so it can be compared and hashed by its cell contents."""

    __slots__ = ("grid",)

    def __init__(self, grid: Grid) -> None:
        if grid is None:
            raise ValueError("grid must not be None.")
        self.grid = grid

    @property
    def possible_moves(self) -> list[Move]:
        return [Move(p) for p in self.grid.get_possible_start_positions(True)]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, State):
            return NotImplemented
        return self.grid == other.grid

    def __hash__(self) -> int:
        return hash(self.grid.key())

    def __repr__(self) -> str:
        return f"State({self.grid})"
