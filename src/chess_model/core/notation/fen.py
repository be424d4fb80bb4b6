"""FEN parsing and serialization."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from chess_model.core.coord import Coord
from chess_model.core.enums import Color
from chess_model.core.errors import FenError, NotationError
from chess_model.core.game_state import CastlingRight, GameState
from chess_model.core.notation.algebraic import cell_name, parse_cell
from chess_model.core.piece import Piece

if TYPE_CHECKING:
    from chess_model.core.board import Board

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FEN_ROWS = 8
_FEN_COLS = 8

# FEN castling letter → (color, right). Row 7 is rank 1.
CASTLING_LETTERS: dict[str, tuple[Color, CastlingRight]] = {
    "K": (Color.WHITE, CastlingRight(Coord(7, 6), Coord(7, 7))),
    "Q": (Color.WHITE, CastlingRight(Coord(7, 2), Coord(7, 0))),
    "k": (Color.BLACK, CastlingRight(Coord(0, 6), Coord(0, 7))),
    "q": (Color.BLACK, CastlingRight(Coord(0, 2), Coord(0, 0))),
}
_LETTER_FOR_RIGHT: dict[tuple[Color, CastlingRight], str] = {
    v: k for k, v in CASTLING_LETTERS.items()
}


class FenParser:
    """Validates and decodes FEN records.

    Build once and share: the parser holds only its compiled patterns.
    """

    __slots__ = ("_rank_pattern", "_clock_pattern")

    def __init__(self) -> None:
        self._rank_pattern = re.compile(r"[pnbrqkPNBRQK1-8]{1,8}")
        self._clock_pattern = re.compile(r"\d+")

    def parse(self, fen: str) -> tuple[list[Piece], GameState]:
        """Decode *fen* into a piece list and the game state record."""
        parts = fen.split()
        if not (4 <= len(parts) <= 6):
            raise FenError(f"Invalid FEN (need 4-6 fields): {fen!r}")

        placement, side_part, castling_part, ep_part = parts[:4]
        pieces = self._parse_placement(placement, fen)
        turn = self._parse_side(side_part)
        castling = self._parse_castling(castling_part)
        en_passant = self._parse_en_passant(ep_part, turn)
        halfmove = self._parse_clock(parts[4], "halfmove clock", 0) if len(parts) > 4 else 0
        fullmove = self._parse_clock(parts[5], "fullmove number", 1) if len(parts) > 5 else 1

        state = GameState(turn, castling, en_passant, halfmove, fullmove)
        return pieces, state

    # -- Fields -------------------------------------------------------------

    def _parse_placement(self, placement: str, fen: str) -> list[Piece]:
        ranks = placement.split("/")
        if len(ranks) != _FEN_ROWS:
            raise FenError(f"Invalid FEN board (must contain {_FEN_ROWS} ranks): {fen!r}")

        pieces: list[Piece] = []
        for row, rank_text in enumerate(ranks):
            if not self._rank_pattern.fullmatch(rank_text):
                raise FenError(f"Invalid FEN rank {rank_text!r}: {fen!r}")
            col = 0
            for ch in rank_text:
                if ch.isdigit():
                    col += int(ch)
                else:
                    if col >= _FEN_COLS:
                        raise FenError(f"Invalid FEN rank width: {fen!r}")
                    pieces.append(Piece.from_char(ch, Coord(row, col)))
                    col += 1
            if col != _FEN_COLS:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        return pieces

    @staticmethod
    def _parse_side(side_part: str) -> Color:
        if side_part == "w":
            return Color.WHITE
        if side_part == "b":
            return Color.BLACK
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    @staticmethod
    def _parse_castling(castling_part: str) -> dict[Color, set[CastlingRight]]:
        castling: dict[Color, set[CastlingRight]] = {Color.WHITE: set(), Color.BLACK: set()}
        if castling_part == "-":
            return castling
        seen: set[str] = set()
        for ch in castling_part:
            entry = CASTLING_LETTERS.get(ch)
            if entry is None or ch in seen:
                raise FenError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            color, right = entry
            castling[color].add(right)
        return castling

    @staticmethod
    def _parse_en_passant(ep_part: str, turn: Color) -> Coord | None:
        if ep_part == "-":
            return None
        try:
            ep = parse_cell(ep_part)
        except NotationError:
            raise FenError(f"Invalid FEN en-passant square: {ep_part!r}") from None
        # White to move captures onto rank 6 (row 2), Black onto rank 3 (row 5).
        expected_row = 2 if turn == Color.WHITE else 5
        if ep.row != expected_row:
            raise FenError(f"Invalid FEN en-passant square for side-to-move: {ep_part!r}")
        return ep

    def _parse_clock(self, text: str, label: str, minimum: int) -> int:
        if not self._clock_pattern.fullmatch(text) or int(text) < minimum:
            raise FenError(f"Invalid FEN {label}: {text!r}")
        return int(text)


_PARSER = FenParser()


def parse_fen(fen: str) -> tuple[list[Piece], GameState]:
    """Parse a FEN string into pieces and a :class:`GameState`."""
    return _PARSER.parse(fen)


def board_to_fen(board: Board) -> str:
    """Serialise an 8x8 :class:`Board` to FEN."""
    if (board.rows, board.cols) != (_FEN_ROWS, _FEN_COLS):
        raise FenError(f"FEN needs an 8x8 board, got {board.rows}x{board.cols}")

    # 1. Board
    rows: list[str] = []
    for row in range(_FEN_ROWS):
        empty = 0
        text = ""
        for col in range(_FEN_COLS):
            piece = board.get_piece(Coord(row, col))
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    state = board.state
    side_str = "w" if state.turn == Color.WHITE else "b"

    # 3. Castling
    letters = {
        _LETTER_FOR_RIGHT[(color, right)]
        for color in (Color.WHITE, Color.BLACK)
        for right in state.rights_for(color)
        if (color, right) in _LETTER_FOR_RIGHT
    }
    castling_str = "".join(ch for ch in "KQkq" if ch in letters) or "-"

    # 4. En passant
    ep_str = cell_name(state.en_passant) if state.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )
