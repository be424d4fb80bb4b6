"""Board - piece placement on a rows x cols grid plus game state."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TypeVar

from chess_model.core.coord import Coord
from chess_model.core.direction import Direction
from chess_model.core.enums import Color, PieceType
from chess_model.core.errors import IllegalMoveError, MissingKingError, OutOfBoundsError
from chess_model.core.game_state import GameState
from chess_model.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

DEFAULT_ROWS = 8
DEFAULT_COLS = 8

T = TypeVar("T")


@dataclass(slots=True)
class _TemporalMove:
    """Undo record for one hypothetical move."""

    from_coord: Coord
    to_coord: Coord
    displaced: Piece | None
    lifted_at: Coord | None
    lifted: Piece | None


class Board:
    """Mutable grid of optional pieces.

    Every stored piece carries the coordinate of the cell holding it; all
    relocation goes through :meth:`move_to_coord` so the two never disagree.
    """

    __slots__ = ("_rows", "_cols", "_cells", "state", "_temporal_stack")

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        state: GameState | None = None,
    ) -> None:
        self._rows = rows
        self._cols = cols
        self._cells: list[list[Piece | None]] = [[None] * cols for _ in range(rows)]
        self.state = state if state is not None else GameState()
        self._temporal_stack: list[_TemporalMove] = []

    # -- Factories ----------------------------------------------------------

    @classmethod
    def from_pieces(
        cls,
        pieces: Iterable[Piece],
        state: GameState | None = None,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
    ) -> Board:
        board = cls(rows, cols, state)
        for piece in pieces:
            board.set_piece(piece)
        return board

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        from chess_model.core.notation.fen import parse_fen

        pieces, state = parse_fen(fen)
        return cls.from_pieces(pieces, state)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        from chess_model.core.notation.fen import STARTING_FEN

        return cls.from_fen(STARTING_FEN)

    # -- Geometry -----------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.row < self._rows and 0 <= coord.col < self._cols

    def _check_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self._rows, self._cols)

    def max_cells_direction(self, direction: Direction) -> int:
        """Upper bound on how far a piece can travel along *direction*."""
        if direction in (Direction.NORTH, Direction.SOUTH):
            return self._rows
        if direction in (Direction.EAST, Direction.WEST):
            return self._cols
        return max(self._rows, self._cols)

    def is_promotion_row(self, row: int, color: Color) -> bool:
        if color == Color.WHITE:
            return row == 0
        return row == self._rows - 1

    def is_pawn_row(self, row: int, color: Color) -> bool:
        if color == Color.WHITE:
            return row == self._rows - 2
        return row == 1

    # -- Element access -----------------------------------------------------

    def get_piece(self, coord: Coord) -> Piece | None:
        self._check_bounds(coord)
        return self._cells[coord.row][coord.col]

    def set_piece(self, piece: Piece) -> None:
        """Place *piece* on the cell named by its own coordinate."""
        coord = piece.coord
        self._check_bounds(coord)
        self._cells[coord.row][coord.col] = piece

    def remove_piece(self, coord: Coord) -> Piece | None:
        self._check_bounds(coord)
        piece = self._cells[coord.row][coord.col]
        self._cells[coord.row][coord.col] = None
        return piece

    def move_to_coord(self, from_coord: Coord, to_coord: Coord) -> Piece | None:
        """Relocate the occupant of *from_coord* and return what it displaced."""
        self._check_bounds(from_coord)
        self._check_bounds(to_coord)
        piece = self._cells[from_coord.row][from_coord.col]
        self._cells[from_coord.row][from_coord.col] = None
        displaced = self._cells[to_coord.row][to_coord.col]
        self._cells[to_coord.row][to_coord.col] = piece
        if piece is not None:
            piece.coord = to_coord
        return displaced

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[Piece]:
        """Live pieces in row-major order."""
        for row in self._cells:
            for piece in row:
                if piece is not None:
                    yield piece

    def get_all_pieces(self, color: Color) -> list[Piece]:
        return [piece for piece in self if piece.color == color]

    def get_king(self, color: Color) -> Piece:
        for piece in self:
            if piece.color == color and piece.piece_type == PieceType.KING:
                return piece
        raise MissingKingError(f"No {color.name} king on board")

    def can_move(self, from_coord: Coord, to_coord: Coord) -> bool:
        """Whether any movement rule of the piece on *from_coord* allows the move.

        Exposure of the mover's own king is not considered here; see
        :meth:`chess_model.core.rules.Rules.is_legal_move`.
        """
        piece = self.get_piece(from_coord)
        return piece is not None and piece.can_move(to_coord, self)

    # -- Hypothetical moves -------------------------------------------------

    @contextmanager
    def simulate(
        self,
        from_coord: Coord,
        to_coord: Coord,
        capture_at: Coord | None = None,
    ) -> Iterator[Board]:
        """Apply a move for the duration of a ``with`` block.

        *capture_at* lifts one more piece off the board (en passant). The
        position is restored on every exit path, and nested simulations must
        unwind in reverse order.
        """
        record = self._push_temporal(from_coord, to_coord, capture_at)
        try:
            yield self
        finally:
            self._pop_temporal(record)

    def temporal_move(
        self,
        from_coord: Coord,
        to_coord: Coord,
        on_board_change: Callable[[Board], T],
    ) -> T:
        """Call *on_board_change* on the position after the move, then undo it."""
        with self.simulate(from_coord, to_coord):
            return on_board_change(self)

    def _push_temporal(
        self, from_coord: Coord, to_coord: Coord, capture_at: Coord | None
    ) -> _TemporalMove:
        lifted = self.remove_piece(capture_at) if capture_at is not None else None
        displaced = self.move_to_coord(from_coord, to_coord)
        record = _TemporalMove(from_coord, to_coord, displaced, capture_at, lifted)
        self._temporal_stack.append(record)
        return record

    def _pop_temporal(self, record: _TemporalMove) -> None:
        top = self._temporal_stack.pop()
        if top is not record:
            raise RuntimeError("Temporal moves must be undone in reverse order")
        self.move_to_coord(record.to_coord, record.from_coord)
        if record.displaced is not None:
            self._cells[record.to_coord.row][record.to_coord.col] = record.displaced
        if record.lifted is not None:
            self.set_piece(record.lifted)

    # -- Applying moves -----------------------------------------------------

    def apply_move(
        self,
        from_coord: Coord,
        to_coord: Coord,
        promotion: PieceType | None = None,
    ) -> Piece | None:
        """Play a validated move and advance the game state.

        Returns the captured piece, if any. The halfmove clock is advanced
        but never reset; callers reset it on captures and pawn moves.
        """
        piece = self.get_piece(from_coord)
        if piece is None:
            raise IllegalMoveError(f"No piece on {from_coord!r}")
        rule = piece.rule_for(to_coord, self)
        if rule is None:
            raise IllegalMoveError(f"{piece} cannot move {from_coord!r} -> {to_coord!r}")

        captured = rule.move_piece(from_coord, to_coord, self)

        if piece.piece_type == PieceType.PAWN and self.is_promotion_row(
            to_coord.row, piece.color
        ):
            promoted = Piece.create(piece.color, promotion or PieceType.QUEEN, to_coord)
            promoted.has_moved = True
            self.set_piece(promoted)

        self._update_en_passant(piece, from_coord, to_coord)
        self._update_castling(piece, from_coord, captured)
        self.state.next_turn()

        _LOGGER.debug(
            "Applied %s %r -> %r (captured: %s)", piece, from_coord, to_coord, captured
        )
        return captured

    def _update_en_passant(self, piece: Piece, from_coord: Coord, to_coord: Coord) -> None:
        if (
            piece.piece_type == PieceType.PAWN
            and abs(to_coord.row - from_coord.row) == 2
        ):
            self.state.en_passant = Coord(
                (from_coord.row + to_coord.row) // 2, from_coord.col
            )
        else:
            self.state.en_passant = None

    def _update_castling(
        self, piece: Piece, from_coord: Coord, captured: Piece | None
    ) -> None:
        if piece.piece_type == PieceType.KING:
            self.state.revoke(piece.color)
        elif piece.piece_type == PieceType.ROOK:
            self.state.revoke(piece.color, from_coord)
        if captured is not None and captured.piece_type == PieceType.ROOK:
            self.state.revoke(captured.color, captured.coord)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Deep copy of cells and state; movement rules stay shared."""
        board = Board(self._rows, self._cols, self.state.copy())
        for piece in self:
            board.set_piece(piece.copy())
        return board

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._cells == other._cells
            and self.state == other.state
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for idx, row in enumerate(self._cells):
            cells = " ".join(str(p) if p else "." for p in row)
            rows.append(f"{self._rows - idx} {cells}")
        rows.append("  " + " ".join(chr(ord("a") + c) for c in range(self._cols)))
        return "\n".join(rows)
