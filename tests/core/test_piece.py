"""Tests for Piece construction and rule sharing."""

import pytest

from chess_model.core.coord import Coord
from chess_model.core.enums import Color, PieceType
from chess_model.core.moves import Castle, Diagonal, Jump, Line, PawnMove
from chess_model.core.piece import Piece


class TestRules:
    def test_rooks_share_rule_objects(self) -> None:
        a = Piece.create(Color.WHITE, PieceType.ROOK, Coord(7, 0))
        b = Piece.create(Color.BLACK, PieceType.ROOK, Coord(0, 7))
        assert a.rules[0] is b.rules[0]

    def test_queen_reuses_rook_and_bishop_rules(self) -> None:
        rook = Piece.create(Color.WHITE, PieceType.ROOK, Coord(7, 0))
        bishop = Piece.create(Color.WHITE, PieceType.BISHOP, Coord(7, 2))
        queen = Piece.create(Color.WHITE, PieceType.QUEEN, Coord(7, 3))
        assert queen.rules == (rook.rules[0], bishop.rules[0])

    def test_king_rules(self) -> None:
        king = Piece.create(Color.WHITE, PieceType.KING, Coord(7, 4))
        assert king.rules == (Line(max_range=1), Diagonal(max_range=1), Castle())

    @pytest.mark.parametrize(
        ("piece_type", "rule"),
        [(PieceType.PAWN, PawnMove()), (PieceType.KNIGHT, Jump(2, 1))],
    )
    def test_single_rule_pieces(self, piece_type: PieceType, rule: object) -> None:
        assert Piece.create(Color.BLACK, piece_type, Coord(0, 0)).rules == (rule,)


class TestPieceValue:
    def test_from_char(self) -> None:
        piece = Piece.from_char("n", Coord(0, 1))
        assert piece.color == Color.BLACK
        assert piece.piece_type == PieceType.KNIGHT
        assert piece.coord == Coord(0, 1)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x", Coord(0, 0))

    def test_str_is_fen_char(self) -> None:
        assert str(Piece.create(Color.WHITE, PieceType.QUEEN, Coord(0, 0))) == "Q"
        assert str(Piece.create(Color.BLACK, PieceType.KING, Coord(0, 0))) == "k"

    def test_symbol(self) -> None:
        assert Piece.create(Color.BLACK, PieceType.KNIGHT, Coord(0, 0)).symbol == "♞"

    def test_equality_ignores_move_history(self) -> None:
        a = Piece.create(Color.WHITE, PieceType.PAWN, Coord(6, 0))
        b = Piece.create(Color.WHITE, PieceType.PAWN, Coord(6, 0))
        b.has_moved = True
        assert a == b
        assert a != Piece.create(Color.WHITE, PieceType.PAWN, Coord(5, 0))

    def test_copy_keeps_shared_rules(self) -> None:
        piece = Piece.create(Color.WHITE, PieceType.QUEEN, Coord(4, 4))
        clone = piece.copy()
        assert clone == piece
        assert clone is not piece
        assert clone.rules is piece.rules
