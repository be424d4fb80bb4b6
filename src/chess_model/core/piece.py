"""Piece entity and the shared movement rules of each piece type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chess_model.core.coord import Coord
from chess_model.core.enums import Color, PieceType
from chess_model.core.moves import Castle, Diagonal, Jump, Line, MovementRule, PawnMove

if TYPE_CHECKING:
    from chess_model.core.board import Board

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# Rule objects are immutable, so every piece of a type shares the same ones.
_LINE = Line()
_DIAGONAL = Diagonal()

RULES_BY_TYPE: dict[PieceType, tuple[MovementRule, ...]] = {
    PieceType.PAWN: (PawnMove(),),
    PieceType.KNIGHT: (Jump(),),
    PieceType.BISHOP: (_DIAGONAL,),
    PieceType.ROOK: (_LINE,),
    PieceType.QUEEN: (_LINE, _DIAGONAL),
    PieceType.KING: (Line(max_range=1), Diagonal(max_range=1), Castle()),
}


@dataclass(slots=True)
class Piece:
    """A colored unit standing on a board cell.

    ``coord`` mirrors the cell the piece occupies and is only changed by
    :class:`~chess_model.core.board.Board` move operations.
    """

    color: Color
    piece_type: PieceType
    coord: Coord
    rules: tuple[MovementRule, ...] = field(default=(), repr=False, compare=False)
    has_moved: bool = field(default=False, compare=False)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def create(cls, color: Color, piece_type: PieceType, coord: Coord) -> Piece:
        """Build a piece wired to the standard rules of its type."""
        return cls(color, piece_type, coord, RULES_BY_TYPE[piece_type])

    @classmethod
    def from_char(cls, char: str, coord: Coord) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls.create(color, ptype, coord)

    def copy(self) -> Piece:
        return Piece(self.color, self.piece_type, self.coord, self.rules, self.has_moved)

    # ── Movement ─────────────────────────────────────────────────────────

    def can_move(self, to_coord: Coord, board: Board) -> bool:
        return any(rule.is_move_valid(self.coord, to_coord, board) for rule in self.rules)

    def attacks(self, to_coord: Coord, board: Board) -> bool:
        """Whether this piece could capture on *to_coord*."""
        return any(rule.attacks(self.coord, to_coord, board) for rule in self.rules)

    def get_moves(self, board: Board) -> set[Coord]:
        moves: set[Coord] = set()
        for rule in self.rules:
            moves |= rule.allowed_moves(self.coord, board)
        return moves

    def rule_for(self, to_coord: Coord, board: Board) -> MovementRule | None:
        """First rule accepting the move to *to_coord*, if any."""
        for rule in self.rules:
            if rule.is_move_valid(self.coord, to_coord, board):
                return rule
        return None

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
