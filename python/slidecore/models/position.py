"""Grid coordinates."""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    """A cell coordinate: ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    @classmethod
    def from_offset(cls, offset: int, width: int) -> Position:
        """Convert a row-major offset into a position."""
        y, x = divmod(offset, width)
        return cls(x, y)

    def to_offset(self, width: int) -> int:
        return self.x + self.y * width

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
