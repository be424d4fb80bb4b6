"""Castling: the king's composite move with a rook."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chess_model.core.direction import parse_direction
from chess_model.core.enums import PieceType
from chess_model.core.errors import DirectionError
from chess_model.core.moves.base import MovementRule

if TYPE_CHECKING:
    from chess_model.core.board import Board
    from chess_model.core.coord import Coord
    from chess_model.core.game_state import CastlingRight
    from chess_model.core.piece import Piece


@dataclass(frozen=True, slots=True)
class Castle(MovementRule):
    """King move validated against the board's castling rights.

    A right is usable when its rook is still in place, every cell between
    king and rook is empty, and no cell the king stands on from its origin to
    its destination is attacked.
    """

    @staticmethod
    def _rook_in_place(king: Piece, right: CastlingRight, board: Board) -> bool:
        if not board.in_bounds(right.rook_origin):
            return False
        rook = board.get_piece(right.rook_origin)
        return (
            rook is not None
            and rook.piece_type == PieceType.ROOK
            and rook.color == king.color
        )

    @staticmethod
    def _is_line_clear(king_coord: Coord, rook_coord: Coord, board: Board) -> bool:
        try:
            step = parse_direction(king_coord, rook_coord).step
        except DirectionError:
            return False
        cell = king_coord + step
        while cell != rook_coord:
            if not board.in_bounds(cell) or board.get_piece(cell) is not None:
                return False
            cell = cell + step
        return True

    @staticmethod
    def _is_path_safe(king_coord: Coord, destination: Coord, board: Board) -> bool:
        from chess_model.core.check import is_check

        try:
            step = parse_direction(king_coord, destination).step
        except DirectionError:
            return False
        cell = king_coord
        while True:
            if not board.in_bounds(cell):
                return False
            # Pinned attackers still control the cells the king crosses.
            if board.temporal_move(
                king_coord, cell, lambda b, c=cell: is_check(c, b, is_mate_probe=True)
            ):
                return False
            if cell == destination:
                return True
            cell = cell + step

    def _can_castle(self, king: Piece, right: CastlingRight, board: Board) -> bool:
        return (
            self._rook_in_place(king, right, board)
            and self._is_line_clear(king.coord, right.rook_origin, board)
            and self._is_path_safe(king.coord, right.king_destination, board)
        )

    # -- MovementRule -------------------------------------------------------

    def is_move_valid(self, from_coord: Coord, to_coord: Coord, board: Board) -> bool:
        king = board.get_piece(from_coord)
        if king is None:
            return False
        for right in board.state.rights_for(king.color):
            if right.king_destination == to_coord:
                return self._can_castle(king, right, board)
        return False

    def allowed_moves(self, from_coord: Coord, board: Board) -> set[Coord]:
        king = board.get_piece(from_coord)
        if king is None:
            return set()
        return {
            right.king_destination
            for right in board.state.rights_for(king.color)
            if self._can_castle(king, right, board)
        }

    def attacks(self, from_coord: Coord, to_coord: Coord, board: Board) -> bool:
        return False

    def move_piece(self, from_coord: Coord, to_coord: Coord, board: Board) -> Piece | None:
        king = board.get_piece(from_coord)
        rights = board.state.rights_for(king.color) if king is not None else frozenset()
        right = next((r for r in rights if r.king_destination == to_coord), None)
        captured = MovementRule.move_piece(self, from_coord, to_coord, board)
        if right is not None:
            # The rook lands on the cell the king crossed last.
            rook_target = to_coord + parse_direction(to_coord, from_coord).step
            MovementRule.move_piece(self, right.rook_origin, rook_target, board)
        return captured
