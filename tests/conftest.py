"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chess_model.core.board import Board
from chess_model.core.coord import Coord
from chess_model.core.enums import Color, PieceType
from chess_model.core.piece import Piece


@pytest.fixture
def initial_board() -> Board:
    """Standard starting position."""
    return Board.initial()


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def place():
    """Factory putting a standard piece on a board: ``place(board, color, type, row, col)``."""

    def _place(board: Board, color: Color, piece_type: PieceType, row: int, col: int) -> Piece:
        piece = Piece.create(color, piece_type, Coord(row, col))
        board.set_piece(piece)
        return piece

    return _place
