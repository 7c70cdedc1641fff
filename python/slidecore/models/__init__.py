from slidecore.models.grid import (
    DEFAULT_SCRAMBLING_MAGNITUDE,
    MAX_DIMENSION_LENGTH,
    MIN_DIMENSION_LENGTH,
    Grid,
    GridEvent,
    GridEventKind,
)
from slidecore.models.position import Position

__all__ = [
    "DEFAULT_SCRAMBLING_MAGNITUDE",
    "MAX_DIMENSION_LENGTH",
    "MIN_DIMENSION_LENGTH",
    "Grid",
    "GridEvent",
    "GridEventKind",
    "Position",
]
