"""Grid model for the sliding puzzle."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Callable

from slidecore.models.position import Position

MIN_DIMENSION_LENGTH = 3
MAX_DIMENSION_LENGTH = 8
DEFAULT_SCRAMBLING_MAGNITUDE = 10.0


class GridEventKind(StrEnum):
    MOVED = "moved"
    SCRAMBLING = "scrambling"
    SCRAMBLED = "scrambled"
    RESET = "reset"


@dataclass(frozen=True)
class GridEvent:
    """Notification sent to grid listeners."""

    kind: GridEventKind
    old_blank: Position
    new_blank: Position
    is_scrambling: bool = False


GridListener = Callable[[GridEvent], None]


def _check_dimension(name: str, value: int) -> None:
    if not MIN_DIMENSION_LENGTH <= value <= MAX_DIMENSION_LENGTH:
        raise ValueError(
            f"{name} must be between {MIN_DIMENSION_LENGTH} and "
            f"{MAX_DIMENSION_LENGTH}, got {value}."
        )


class Grid:
    """A W×H arrangement of cells with exactly one blank.

    Every cell carries its *home order* (the row-major offset it occupies
    when the grid is solved) and an opaque payload.  The blank is the cell
    whose home order is ``width * height - 1``.

    Solved-ness is tracked by a bitmask: bit ``o`` is set while the cell
    with home order ``o`` sits at offset ``o``.  Moves only touch the bits
    of the cells they swap, so ``is_solved`` is O(1).
    """

    __slots__ = (
        "_width",
        "_height",
        "_orders",
        "_payloads",
        "_blank",
        "_solved_mask",
        "_condition",
        "_listeners",
    )

    def __init__(self, width: int, height: int) -> None:
        _check_dimension("width", width)
        _check_dimension("height", height)
        self._width = width
        self._height = height
        self._payloads: list[Any] = [None] * (width * height)
        self._solved_mask = (1 << (width * height)) - 1
        self._listeners: list[GridListener] = []
        self._restore_home_layout()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_orders(cls, width: int, height: int, orders: list[int]) -> Grid:
        """Create a grid from a flat row-major list of home orders.

        The highest order marks the blank.  The arrangement is taken as-is,
        so it may be one that no sequence of moves can solve.

        Example::

            Grid.from_orders(3, 3, [0, 1, 2, 3, 4, 5, 6, 8, 7])
        """
        grid = cls(width, height)
        size = width * height
        if sorted(orders) != list(range(size)):
            raise ValueError(
                f"Expected a permutation of 0..{size - 1} for a "
                f"{width}×{height} grid, got {orders}."
            )
        grid._orders = list(orders)
        grid._blank = Position.from_offset(orders.index(size - 1), width)
        grid._condition = 0
        for offset in range(size):
            grid._update_condition(offset)
        return grid

    def clone(self) -> Grid:
        """Return an independent copy; listeners are not carried over."""
        grid = object.__new__(Grid)
        grid._width = self._width
        grid._height = self._height
        grid._orders = self._orders[:]
        grid._payloads = self._payloads[:]
        grid._blank = self._blank
        grid._solved_mask = self._solved_mask
        grid._condition = self._condition
        grid._listeners = []
        return grid

    def copy_to(self, grid: Grid) -> None:
        if self._width != grid._width or self._height != grid._height:
            raise ValueError(
                f"Attempting to copy a {self._width}x{self._height} grid "
                f"to a {grid._width}x{grid._height} grid."
            )
        grid._orders[:] = self._orders
        grid._payloads[:] = self._payloads
        grid._blank = self._blank
        grid._condition = self._condition

    def reset(self) -> None:
        """Put every cell back home, payloads included."""
        old_blank = self._blank
        payloads = [None] * len(self._payloads)
        for offset, order in enumerate(self._orders):
            payloads[order] = self._payloads[offset]
        self._payloads = payloads
        self._restore_home_layout()
        self._notify(GridEvent(GridEventKind.RESET, old_blank, self._blank))

    def _restore_home_layout(self) -> None:
        self._orders = list(range(self._width * self._height))
        self._blank = Position(self._width - 1, self._height - 1)
        self._condition = self._solved_mask

    # -- queries --------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def blank_position(self) -> Position:
        return self._blank

    @property
    def is_solved(self) -> bool:
        return self._condition == self._solved_mask

    def __getitem__(self, position: Position) -> Any:
        return self._payloads[self._offset(position)]

    def __setitem__(self, position: Position, payload: Any) -> None:
        self._payloads[self._offset(position)] = payload

    def get_order(self, position: Position) -> int:
        return self._orders[self._offset(position)]

    def get_position(self, order: int) -> Position:
        try:
            offset = self._orders.index(order)
        except ValueError:
            raise ValueError(f"No cell with home order {order}.") from None
        return Position.from_offset(offset, self._width)

    def is_cell_correct(self, position: Position) -> bool:
        """Check if the cell at *position* sits at its home."""
        return self.get_order(position) == self._offset(position)

    def key(self) -> tuple[int, ...]:
        """Home orders in row-major order; identifies the arrangement."""
        return tuple(self._orders)

    def get_move_count_from(self, position: Position) -> int:
        """Number of cells a slide from *position* would shift, 0 if illegal."""
        x, y = position
        bx, by = self._blank
        if x == bx and y != by and 0 <= y < self._height:
            return abs(y - by)
        if y == by and x != bx and 0 <= x < self._width:
            return abs(x - bx)
        return 0

    def get_possible_start_positions(
        self, adjacent_only: bool = False
    ) -> list[Position]:
        """Positions a move can start from: left, right, up, then down.

        With *adjacent_only* only the (up to four) neighbours of the blank
        are returned, otherwise every cell sharing the blank's row or
        column, nearest first.
        """
        bx, by = self._blank
        positions: list[Position] = []
        for x in range(bx - 1, -1, -1):
            positions.append(Position(x, by))
            if adjacent_only:
                break
        for x in range(bx + 1, self._width):
            positions.append(Position(x, by))
            if adjacent_only:
                break
        for y in range(by - 1, -1, -1):
            positions.append(Position(bx, y))
            if adjacent_only:
                break
        for y in range(by + 1, self._height):
            positions.append(Position(bx, y))
            if adjacent_only:
                break
        return positions

    # -- mutation -------------------------------------------------------------

    def move_from(self, position: Position) -> bool:
        """Slide every cell between *position* and the blank toward the blank.

        Returns False, leaving the grid untouched, unless *position* shares
        either the blank's row or its column (not both).
        """
        return self._move_from(position, False)

    def scramble(
        self,
        magnitude: float = DEFAULT_SCRAMBLING_MAGNITUDE,
        rng: random.Random | None = None,
    ) -> None:
        """Shuffle the grid in place with a random walk of legal moves.

        The walk never slides straight back into the cell the blank just
        left, and is repeated until the grid ends up unsolved.
        """
        if magnitude < 1.0:
            raise ValueError(f"magnitude must be at least 1.0, got {magnitude}.")
        chooser = random if rng is None else rng

        base = max(self._width, self._height) / 2.0
        move_count = int(math.log(100.0, base) * magnitude)
        start_blank = self._blank
        self._notify(GridEvent(GridEventKind.SCRAMBLING, start_blank, start_blank, True))

        while True:
            vacated: Position | None = None
            for _ in range(move_count):
                candidates = self.get_possible_start_positions()
                if vacated in candidates and len(candidates) > 1:
                    candidates.remove(vacated)
                vacated = self._blank
                self._move_from(chooser.choice(candidates), True)
            if not self.is_solved:
                break

        self._notify(
            GridEvent(GridEventKind.SCRAMBLED, start_blank, self._blank, True)
        )

    def _move_from(self, position: Position, is_scrambling: bool) -> bool:
        x, y = position
        bx, by = self._blank
        if x == bx and y != by:
            if not 0 <= y < self._height:
                return False
            step = self._width if y > by else -self._width
            count = abs(y - by)
        elif y == by and x != bx:
            if not 0 <= x < self._width:
                return False
            step = 1 if x > bx else -1
            count = abs(x - bx)
        else:
            return False

        orders = self._orders
        payloads = self._payloads
        offset = bx + by * self._width
        for _ in range(count):
            nxt = offset + step
            orders[offset], orders[nxt] = orders[nxt], orders[offset]
            payloads[offset], payloads[nxt] = payloads[nxt], payloads[offset]
            self._update_condition(offset)
            self._update_condition(nxt)
            offset = nxt

        old_blank = self._blank
        self._blank = Position(x, y)
        if self._listeners:
            self._notify(
                GridEvent(GridEventKind.MOVED, old_blank, self._blank, is_scrambling)
            )
        return True

    def _update_condition(self, offset: int) -> None:
        order = self._orders[offset]
        bit = 1 << order
        if order == offset:
            self._condition |= bit
        else:
            self._condition &= ~bit

    def _offset(self, position: Position) -> int:
        x, y = position
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Position {position} is outside the grid.")
        return x + y * self._width

    # -- listeners ------------------------------------------------------------

    def subscribe(self, listener: GridListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: GridListener) -> None:
        self._listeners.remove(listener)

    def _notify(self, event: GridEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # -- comparison -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._blank == other._blank
            and self._orders == other._orders
            and self._payloads == other._payloads
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height}, blank={self._blank})"

    def __str__(self) -> str:
        rows: list[str] = []
        for y in range(self._height):
            base = y * self._width
            cells = ", ".join(
                f"{self._orders[base + x]}:{self._payloads[base + x]}"
                for x in range(self._width)
            )
            rows.append(f"[{cells}]")
        return ", ".join(rows)
