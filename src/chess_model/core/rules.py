"""High-level chess rules: check, checkmate, legal moves, move application."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chess_model.core.check import is_check, is_mate
from chess_model.core.enums import Color, PieceType
from chess_model.core.errors import IllegalMoveError
from chess_model.core.moves.pawn import en_passant_victim

if TYPE_CHECKING:
    from chess_model.core.board import Board
    from chess_model.core.coord import Coord
    from chess_model.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

_PROMOTION_TYPES: frozenset[PieceType] = frozenset(
    (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)
)


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Colors default to the side to move recorded in the board's state.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color | None = None) -> bool:
        color = board.state.turn if color is None else color
        return is_check(board.get_king(color).coord, board, is_mate_probe=True)

    @staticmethod
    def is_checkmate(board: Board, color: Color | None = None) -> bool:
        color = board.state.turn if color is None else color
        return is_mate(board.get_king(color).coord, board)

    # -- Legality -----------------------------------------------------------

    @staticmethod
    def _leaves_king_safe(piece: Piece, to_coord: Coord, board: Board) -> bool:
        king = board.get_king(piece.color)
        capture_at = None
        if (
            piece.piece_type == PieceType.PAWN
            and piece.coord.col != to_coord.col
            and board.get_piece(to_coord) is None
        ):
            capture_at = en_passant_victim(piece.coord, to_coord)
        with board.simulate(piece.coord, to_coord, capture_at):
            return not is_check(king.coord, board, is_mate_probe=True)

    @staticmethod
    def legal_moves(board: Board, coord: Coord) -> set[Coord]:
        """Destinations of the piece on *coord* that keep its king safe."""
        piece = board.get_piece(coord)
        if piece is None:
            return set()
        return {
            to_coord
            for to_coord in piece.get_moves(board)
            if Rules._leaves_king_safe(piece, to_coord, board)
        }

    @staticmethod
    def is_legal_move(board: Board, from_coord: Coord, to_coord: Coord) -> bool:
        piece = board.get_piece(from_coord)
        if piece is None or not board.in_bounds(to_coord):
            return False
        return piece.can_move(to_coord, board) and Rules._leaves_king_safe(
            piece, to_coord, board
        )

    # -- Playing ------------------------------------------------------------

    @staticmethod
    def make_move(
        board: Board,
        from_coord: Coord,
        to_coord: Coord,
        promotion: PieceType | None = None,
    ) -> Piece | None:
        """Validate and play a move for the side to move.

        Returns the captured piece, if any. Raises :class:`IllegalMoveError`
        when the move is not legal in the current position.
        """
        piece = board.get_piece(from_coord)
        if piece is None:
            raise IllegalMoveError(f"No piece on {from_coord!r}")
        if piece.color != board.state.turn:
            raise IllegalMoveError(f"It is {board.state.turn}'s turn, not {piece.color}'s")
        if promotion is not None and promotion not in _PROMOTION_TYPES:
            raise IllegalMoveError(f"Cannot promote to {promotion.name}")
        if not Rules.is_legal_move(board, from_coord, to_coord):
            _LOGGER.debug("Rejected %s %r -> %r", piece, from_coord, to_coord)
            raise IllegalMoveError(f"Illegal move: {from_coord!r} -> {to_coord!r}")
        return board.apply_move(from_coord, to_coord, promotion)
