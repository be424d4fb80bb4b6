"""Core domain layer: chess rules with zero external dependencies.

Quick start::

    from chess_model.core import Board, Rules, parse_cell

    board = Board.initial()
    Rules.make_move(board, parse_cell("e2"), parse_cell("e4"))
    print(Rules.legal_moves(board, parse_cell("g8")))
"""

from chess_model.core.board import Board
from chess_model.core.check import is_attacked, is_check, is_mate
from chess_model.core.coord import Coord
from chess_model.core.direction import Direction, parse_direction
from chess_model.core.enums import Color, PieceType
from chess_model.core.errors import (
    DirectionError,
    FenError,
    IllegalMoveError,
    MissingKingError,
    NotationError,
    OutOfBoundsError,
)
from chess_model.core.game_state import CastlingRight, GameState
from chess_model.core.moves import Castle, Diagonal, Jump, Line, MovementRule, PawnMove
from chess_model.core.notation import (
    STARTING_FEN,
    AlgebraicNotation,
    board_to_fen,
    cell_name,
    parse_cell,
    parse_fen,
)
from chess_model.core.piece import Piece
from chess_model.core.rules import Rules

__all__ = [
    # Enums / values
    "Color",
    "Coord",
    "Direction",
    "PieceType",
    "parse_direction",
    # Errors
    "DirectionError",
    "FenError",
    "IllegalMoveError",
    "MissingKingError",
    "NotationError",
    "OutOfBoundsError",
    # Domain objects
    "Board",
    "CastlingRight",
    "GameState",
    "Piece",
    "Rules",
    # Movement rules
    "Castle",
    "Diagonal",
    "Jump",
    "Line",
    "MovementRule",
    "PawnMove",
    # Evaluator
    "is_attacked",
    "is_check",
    "is_mate",
    # Notation
    "STARTING_FEN",
    "AlgebraicNotation",
    "board_to_fen",
    "cell_name",
    "parse_cell",
    "parse_fen",
]
