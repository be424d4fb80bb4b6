"""Algebraic cell names ("e4") ↔ board coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from chess_model.core.coord import Coord
from chess_model.core.errors import NotationError


@dataclass(frozen=True, slots=True)
class AlgebraicNotation:
    """Cell naming for a board of *rows* x *cols*.

    Files are letters starting at ``a`` (column 0); ranks count from the
    bottom row, so rank 1 is the last matrix row.
    """

    rows: int = 8
    cols: int = 8

    def cell_from_str(self, name: str) -> Coord:
        """Parse a cell name, e.g. 'a1' → Coord(7, 0) on an 8x8 board."""
        if len(name) < 2 or not name[0].isalpha() or not name[1:].isdigit():
            raise NotationError(f"Invalid cell name: {name!r}")
        col = ord(name[0]) - ord("a")
        rank = int(name[1:])
        if not (0 <= col < self.cols and 1 <= rank <= self.rows):
            raise NotationError(f"Cell outside the {self.rows}x{self.cols} board: {name!r}")
        return Coord(self.rows - rank, col)

    def cell_to_str(self, coord: Coord) -> str:
        if not (0 <= coord.row < self.rows and 0 <= coord.col < self.cols):
            raise NotationError(f"{coord!r} is outside the {self.rows}x{self.cols} board")
        return chr(ord("a") + coord.col) + str(self.rows - coord.row)


_STANDARD = AlgebraicNotation()


def parse_cell(name: str) -> Coord:
    """Parse a cell name on the standard 8x8 board."""
    return _STANDARD.cell_from_str(name)


def cell_name(coord: Coord) -> str:
    """Human-readable name, e.g. Coord(0, 7) → 'h8'."""
    return _STANDARD.cell_to_str(coord)
