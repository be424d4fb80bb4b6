"""Leaping movement (knight)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chess_model.core.coord import Coord
from chess_model.core.moves.base import MovementRule

if TYPE_CHECKING:
    from chess_model.core.board import Board


@dataclass(frozen=True, slots=True)
class Jump(MovementRule):
    """Leap *first* cells along one axis and *second* along the other.

    Intervening cells are never inspected.
    """

    first: int = 2
    second: int = 1

    def _in_range(self, from_coord: Coord, to_coord: Coord) -> bool:
        d_row = abs(to_coord.row - from_coord.row)
        d_col = abs(to_coord.col - from_coord.col)
        return (d_row, d_col) in ((self.first, self.second), (self.second, self.first))

    def _offsets(self) -> set[Coord]:
        offsets: set[Coord] = set()
        for a, b in ((self.first, self.second), (self.second, self.first)):
            for row_sign in (1, -1):
                for col_sign in (1, -1):
                    offsets.add(Coord(a * row_sign, b * col_sign))
        offsets.discard(Coord(0, 0))
        return offsets

    def is_move_valid(self, from_coord: Coord, to_coord: Coord, board: Board) -> bool:
        piece = board.get_piece(from_coord)
        if piece is None or from_coord == to_coord:
            return False
        if not board.in_bounds(to_coord) or not self._in_range(from_coord, to_coord):
            return False
        target = board.get_piece(to_coord)
        return target is None or target.color != piece.color

    def allowed_moves(self, from_coord: Coord, board: Board) -> set[Coord]:
        piece = board.get_piece(from_coord)
        if piece is None:
            return set()
        moves: set[Coord] = set()
        for offset in self._offsets():
            to_coord = from_coord + offset
            if not board.in_bounds(to_coord):
                continue
            target = board.get_piece(to_coord)
            if target is None or target.color != piece.color:
                moves.add(to_coord)
        return moves
