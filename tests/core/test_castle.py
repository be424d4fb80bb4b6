"""Tests for castling validation."""

from chess_model.core.board import Board
from chess_model.core.moves import Castle
from chess_model.core.notation import parse_cell

sq = parse_cell


class TestCastle:
    def test_both_sides_available(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        rule = Castle()
        assert rule.is_move_valid(sq("e1"), sq("c1"), board)
        assert rule.is_move_valid(sq("e1"), sq("g1"), board)
        assert rule.allowed_moves(sq("e1"), board) == {sq("c1"), sq("g1")}

    def test_blocked_by_pieces(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/Rn2K1NR w KQ - 0 1")
        assert Castle().allowed_moves(sq("e1"), board) == set()
        assert not Castle().is_move_valid(sq("e1"), sq("g1"), board)

    def test_without_rights(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/R3K2R w - - 0 1")
        assert Castle().allowed_moves(sq("e1"), board) == set()

    def test_only_queenside_right(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/R3K2R w Q - 0 1")
        assert Castle().allowed_moves(sq("e1"), board) == {sq("c1")}

    def test_black_rights_do_not_apply_to_white(self) -> None:
        board = Board.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w kq - 0 1")
        assert Castle().allowed_moves(sq("e1"), board) == set()
        assert Castle().allowed_moves(sq("e8"), board) == {sq("c8"), sq("g8")}

    def test_not_out_of_check(self) -> None:
        board = Board.from_fen("1k6/8/8/8/2pqp3/4q3/8/R3K2R w KQ - 0 1")
        assert not Castle().is_move_valid(sq("e1"), sq("c1"), board)
        assert not Castle().is_move_valid(sq("e1"), sq("g1"), board)

    def test_not_through_attacked_cell(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/5r2/R3K2R w KQ - 0 1")
        assert Castle().allowed_moves(sq("e1"), board) == {sq("c1")}

    def test_rook_must_be_present(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/4K2R w KQ - 0 1")
        assert Castle().allowed_moves(sq("e1"), board) == {sq("g1")}

    def test_validation_leaves_board_untouched(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/5r2/R3K2R w KQ - 0 1")
        snapshot = board.copy()
        Castle().allowed_moves(sq("e1"), board)
        assert board == snapshot

    def test_never_attacks(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert not Castle().attacks(sq("e1"), sq("g1"), board)

    def test_pinned_attacker_still_guards_path(self) -> None:
        # The h3 bishop is pinned to its king by the h1 rook yet covers f1.
        board = Board.from_fen("7k/8/8/8/8/7b/8/R3K2R w KQ - 0 1")
        assert not Castle().is_move_valid(sq("e1"), sq("g1"), board)
        assert Castle().allowed_moves(sq("e1"), board) == {sq("c1")}
