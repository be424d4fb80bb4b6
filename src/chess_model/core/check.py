"""Check and checkmate evaluation.

All functions work on the board they are given and leave it exactly as they
found it: hypothetical positions are explored through
:meth:`Board.temporal_move` / :meth:`Board.simulate`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chess_model.core.enums import PieceType
from chess_model.core.moves.pawn import en_passant_victim

if TYPE_CHECKING:
    from chess_model.core.board import Board
    from chess_model.core.coord import Coord
    from chess_model.core.enums import Color
    from chess_model.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


def is_attacked(coord: Coord, by_color: Color, board: Board) -> bool:
    """Is *coord* attacked by any piece of *by_color*?"""
    return any(piece.attacks(coord, board) for piece in board.get_all_pieces(by_color))


def is_check(coord: Coord, board: Board, is_mate_probe: bool = False) -> bool:
    """Whether the piece on *coord* is under attack.

    Args:
        coord: Cell of the defending piece. An empty cell is never in check.
        board: Position to inspect.
        is_mate_probe: Count every attacker. When False, an attacker only
            counts if capturing on *coord* would not leave its own king
            attacked.
    """
    defender = board.get_piece(coord)
    if defender is None:
        return False

    attacker_color = defender.color.opposite
    attacker_king = board.get_king(attacker_color)

    def own_king_exposed(after: Board) -> bool:
        # Read the coordinate late: the king itself may be the attacker.
        return is_attacked(attacker_king.coord, defender.color, after)

    for attacker in board.get_all_pieces(attacker_color):
        if not attacker.attacks(coord, board):
            continue
        if is_mate_probe:
            return True
        if not board.temporal_move(attacker.coord, coord, own_king_exposed):
            return True
    return False


def _simulated_capture(piece: Piece, to_coord: Coord, board: Board) -> Coord | None:
    """Cell of a pawn taken en passant by moving *piece* to *to_coord*."""
    if (
        piece.piece_type == PieceType.PAWN
        and piece.coord.col != to_coord.col
        and board.get_piece(to_coord) is None
        and board.state.en_passant == to_coord
    ):
        return en_passant_victim(piece.coord, to_coord)
    return None


def is_mate(coord: Coord, board: Board) -> bool:
    """Whether the king on *coord* is checkmated.

    The king must be in check, have no move to a safe cell, and no other
    piece of its side may have a move (block or capture) that lifts the
    check.
    """
    king = board.get_piece(coord)
    if king is None:
        return False
    if not is_check(coord, board, is_mate_probe=True):
        return False

    for to_coord in king.get_moves(board):
        with board.simulate(coord, to_coord):
            escaped = not is_check(to_coord, board, is_mate_probe=True)
        if escaped:
            _LOGGER.debug("King on %r escapes to %r", coord, to_coord)
            return False

    for piece in board.get_all_pieces(king.color):
        if piece is king:
            continue
        origin = piece.coord
        for to_coord in piece.get_moves(board):
            capture_at = _simulated_capture(piece, to_coord, board)
            with board.simulate(origin, to_coord, capture_at):
                cleared = not is_check(coord, board, is_mate_probe=True)
            if cleared:
                _LOGGER.debug("Check on %r lifted by %r -> %r", coord, origin, to_coord)
                return False

    _LOGGER.debug("King on %r is checkmated", coord)
    return True
