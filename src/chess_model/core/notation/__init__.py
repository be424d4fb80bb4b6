"""Notation package: FEN records and algebraic cell names."""

from chess_model.core.notation.algebraic import AlgebraicNotation, cell_name, parse_cell
from chess_model.core.notation.fen import STARTING_FEN, FenParser, board_to_fen, parse_fen

__all__ = [
    "STARTING_FEN",
    "AlgebraicNotation",
    "FenParser",
    "board_to_fen",
    "cell_name",
    "parse_cell",
    "parse_fen",
]
