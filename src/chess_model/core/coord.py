"""Coordinate value object.

Row 0 is the top rank of the board (rank 8 on a standard board) and column 0
is the a-file, so a FEN placement string reads in matrix order.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coord:
    """Immutable (row, col) pair with vector arithmetic.

    Arithmetic is bounds-agnostic: ``Coord(0, 0) + Coord(-1, 0)`` is a valid
    value, it just does not address a cell on any board.
    """

    row: int
    col: int

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.row + other.row, self.col + other.col)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.row - other.row, self.col - other.col)

    def __repr__(self) -> str:
        return f"Coord({self.row}, {self.col})"
