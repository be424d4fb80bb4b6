"""Tests for pawn pushes, captures and en passant."""

import pytest

from chess_model.core.board import Board
from chess_model.core.coord import Coord
from chess_model.core.enums import Color, PieceType
from chess_model.core.moves import PawnMove
from chess_model.core.notation import parse_cell

sq = parse_cell

EN_PASSANT_FEN = "rnbqkbnr/pppp1ppp/8/8/6Pp/p7/PPPPPP1P/RNBQKBNR b KQkq g3 0 1"


class TestPushes:
    @pytest.mark.parametrize(
        ("origin", "target", "expected"),
        [
            ("a2", "a3", True),
            ("a2", "a4", True),
            ("a2", "a5", False),
            ("a2", "b3", False),
            ("a2", "a1", False),
            ("a7", "a6", True),
            ("a7", "a5", True),
            ("a7", "b5", False),
            ("a7", "a8", False),
        ],
    )
    def test_initial_position(
        self, initial_board: Board, origin: str, target: str, expected: bool
    ) -> None:
        assert PawnMove().is_move_valid(sq(origin), sq(target), initial_board) is expected

    def test_initial_moves(self, initial_board: Board) -> None:
        assert PawnMove().allowed_moves(sq("a2"), initial_board) == {sq("a3"), sq("a4")}
        assert PawnMove().allowed_moves(sq("h7"), initial_board) == {sq("h6"), sq("h5")}

    def test_double_step_needs_free_path(self, initial_board: Board, place) -> None:
        place(initial_board, Color.BLACK, PieceType.KNIGHT, 5, 0)
        assert PawnMove().allowed_moves(sq("a2"), initial_board) == set()
        assert not PawnMove().is_move_valid(sq("a2"), sq("a4"), initial_board)

    def test_no_double_step_after_leaving_pawn_row(self, initial_board: Board) -> None:
        rule = PawnMove()
        rule.move_piece(sq("a2"), sq("a3"), initial_board)
        assert not rule.is_move_valid(sq("a3"), sq("a5"), initial_board)
        assert rule.allowed_moves(sq("a3"), initial_board) == {sq("a4")}

    def test_moves_are_irreversible(self, initial_board: Board) -> None:
        rule = PawnMove()
        assert rule.is_move_valid(sq("a2"), sq("a3"), initial_board)
        rule.move_piece(sq("a2"), sq("a3"), initial_board)
        assert not rule.is_move_valid(sq("a3"), sq("a2"), initial_board)

    def test_forward_direction(self) -> None:
        assert PawnMove.forward(Color.WHITE) == Coord(-1, 0)
        assert PawnMove.forward(Color.BLACK) == Coord(1, 0)


class TestCaptures:
    @pytest.mark.parametrize(
        ("origin", "target", "expected"),
        [
            ("h4", "h3", True),
            ("h4", "g3", True),
            ("a3", "b2", True),
            ("b2", "a3", True),
            ("a3", "a2", False),
            ("a3", "a3", False),
            ("h2", "g3", False),
        ],
    )
    def test_en_passant_position(self, origin: str, target: str, expected: bool) -> None:
        board = Board.from_fen(EN_PASSANT_FEN)
        assert PawnMove().is_move_valid(sq(origin), sq(target), board) is expected

    def test_en_passant_listed(self) -> None:
        board = Board.from_fen(EN_PASSANT_FEN)
        assert PawnMove().allowed_moves(sq("h4"), board) == {sq("h3"), sq("g3")}

    def test_capture_on_promotion_row(self) -> None:
        board = Board.from_fen("7k/8/4K3/8/8/8/1p6/B7 w - - 0 1")
        assert PawnMove().allowed_moves(sq("b2"), board) == {sq("b1"), sq("a1")}

    def test_move_piece_removes_en_passant_victim(self) -> None:
        board = Board.from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        captured = PawnMove().move_piece(sq("e5"), sq("d6"), board)
        assert captured is not None
        assert captured.coord == sq("d5")
        assert board.get_piece(sq("d5")) is None
        assert board.get_piece(sq("e5")) is None

    def test_pawn_threatens_diagonals_only(self, initial_board: Board) -> None:
        rule = PawnMove()
        assert rule.attacks(sq("e2"), sq("d3"), initial_board)
        assert rule.attacks(sq("e2"), sq("f3"), initial_board)
        assert not rule.attacks(sq("e2"), sq("e3"), initial_board)
        assert not rule.attacks(sq("e2"), sq("e4"), initial_board)
        assert rule.attacks(sq("e7"), sq("d6"), initial_board)
