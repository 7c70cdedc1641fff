"""Moves applied by the solver."""

from __future__ import annotations

from typing import TYPE_CHECKING

from slidecore.models.position import Position

if TYPE_CHECKING:
    from slidecore.engine.gamesolver.state import State


class Move:
    """A line-slide starting at *origin*.

    ``destination`` stays ``None`` until the move is applied; it then holds
    the blank's position before the slide, which is where a move has to
    start to undo this one.
    """

    __slots__ = ("origin", "destination")

    def __init__(self, origin: Position, destination: Position | None = None) -> None:
        self.origin = origin
        self.destination = destination

    def apply_to(self, state: State) -> State:
        """Return the state reached by sliding from ``origin`` in a clone of *state*."""
        from slidecore.engine.gamesolver.state import State

        grid = state.grid.clone()
        grid.move_from(self.origin)
        self.destination = state.grid.blank_position
        return State(grid)

    def is_inverse(self, move: Move | None) -> bool:
        return move is not None and self.origin == move.destination

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self.origin == other.origin and self.destination == other.destination

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Move({self.origin} -> {self.destination})"
