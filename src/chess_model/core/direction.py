"""Compass directions and delta parsing."""

from __future__ import annotations

from enum import Enum

from chess_model.core.coord import Coord
from chess_model.core.errors import DirectionError, DirectionErrorKind


class Direction(Enum):
    """The eight compass directions.

    North points towards row 0, the side White advances to.
    """

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)
    NORTH_EAST = (-1, 1)
    NORTH_WEST = (-1, -1)
    SOUTH_EAST = (1, 1)
    SOUTH_WEST = (1, -1)

    @property
    def step(self) -> Coord:
        row, col = self.value
        return Coord(row, col)

    @property
    def is_diagonal(self) -> bool:
        row, col = self.value
        return row != 0 and col != 0

    @property
    def opposite(self) -> Direction:
        row, col = self.value
        return Direction((-row, -col))


ORTHOGONAL: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
)
DIAGONAL: tuple[Direction, ...] = (
    Direction.NORTH_EAST,
    Direction.NORTH_WEST,
    Direction.SOUTH_EAST,
    Direction.SOUTH_WEST,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def parse_direction(origin: Coord, target: Coord) -> Direction:
    """Direction of travel from *origin* to *target*.

    Raises :class:`DirectionError` when both are the same cell or when the
    delta is neither a straight line nor an exact diagonal.
    """
    d_row = target.row - origin.row
    d_col = target.col - origin.col
    if d_row == 0 and d_col == 0:
        raise DirectionError(DirectionErrorKind.SAME_ORIGIN, origin, target)
    if d_row != 0 and d_col != 0 and abs(d_row) != abs(d_col):
        raise DirectionError(DirectionErrorKind.NOT_A_DIRECTION, origin, target)
    return Direction((_sign(d_row), _sign(d_col)))
