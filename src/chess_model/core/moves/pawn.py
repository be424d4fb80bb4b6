"""Pawn movement: pushes, double step, captures and en passant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chess_model.core.coord import Coord
from chess_model.core.direction import Direction
from chess_model.core.enums import Color, PieceType
from chess_model.core.moves.base import MovementRule

if TYPE_CHECKING:
    from chess_model.core.board import Board
    from chess_model.core.piece import Piece

_FORWARD: dict[Color, Direction] = {
    Color.WHITE: Direction.NORTH,
    Color.BLACK: Direction.SOUTH,
}


def en_passant_victim(from_coord: Coord, to_coord: Coord) -> Coord:
    """Cell of the pawn taken by an en-passant capture from *from_coord*."""
    return Coord(from_coord.row, to_coord.col)


@dataclass(frozen=True, slots=True)
class PawnMove(MovementRule):
    """Forward pushes onto empty cells, diagonal steps only to capture."""

    @staticmethod
    def forward(color: Color) -> Coord:
        return _FORWARD[color].step

    # -- Partial checks -----------------------------------------------------

    @staticmethod
    def _is_free(coord: Coord, board: Board) -> bool:
        return board.in_bounds(coord) and board.get_piece(coord) is None

    def _can_double_step(self, pawn: Piece, board: Board) -> bool:
        if not board.is_pawn_row(pawn.coord.row, pawn.color):
            return False
        step = self.forward(pawn.color)
        one = pawn.coord + step
        return self._is_free(one, board) and self._is_free(one + step, board)

    @staticmethod
    def _can_capture(pawn: Piece, to_coord: Coord, board: Board) -> bool:
        if not board.in_bounds(to_coord):
            return False
        target = board.get_piece(to_coord)
        if target is None:
            if board.state.en_passant != to_coord:
                return False
            victim = board.get_piece(en_passant_victim(pawn.coord, to_coord))
            return (
                victim is not None
                and victim.piece_type == PieceType.PAWN
                and victim.color != pawn.color
            )
        return target.color != pawn.color

    # -- MovementRule -------------------------------------------------------

    def is_move_valid(self, from_coord: Coord, to_coord: Coord, board: Board) -> bool:
        pawn = board.get_piece(from_coord)
        if pawn is None:
            return False
        step = self.forward(pawn.color)
        d_row = to_coord.row - from_coord.row
        d_col = to_coord.col - from_coord.col

        if d_row == step.row and abs(d_col) == 1:
            return self._can_capture(pawn, to_coord, board)
        if d_col != 0:
            return False
        if d_row == step.row:
            return self._is_free(to_coord, board)
        if d_row == 2 * step.row:
            return self._can_double_step(pawn, board)
        return False

    def allowed_moves(self, from_coord: Coord, board: Board) -> set[Coord]:
        pawn = board.get_piece(from_coord)
        if pawn is None:
            return set()
        step = self.forward(pawn.color)
        moves: set[Coord] = set()

        one = from_coord + step
        if self._is_free(one, board):
            moves.add(one)
            if self._can_double_step(pawn, board):
                moves.add(one + step)

        for side in (Coord(0, 1), Coord(0, -1)):
            diagonal = one + side
            if self._can_capture(pawn, diagonal, board):
                moves.add(diagonal)
        return moves

    def attacks(self, from_coord: Coord, to_coord: Coord, board: Board) -> bool:
        # A pawn only threatens its two forward diagonals.
        pawn = board.get_piece(from_coord)
        if pawn is None or not board.in_bounds(to_coord):
            return False
        step = self.forward(pawn.color)
        return (
            to_coord.row - from_coord.row == step.row
            and abs(to_coord.col - from_coord.col) == 1
        )

    def move_piece(self, from_coord: Coord, to_coord: Coord, board: Board) -> Piece | None:
        is_en_passant = (
            from_coord.col != to_coord.col
            and board.get_piece(to_coord) is None
            and board.state.en_passant == to_coord
        )
        captured = MovementRule.move_piece(self, from_coord, to_coord, board)
        if is_en_passant:
            captured = board.remove_piece(en_passant_victim(from_coord, to_coord))
        return captured
