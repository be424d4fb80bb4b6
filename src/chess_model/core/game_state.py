"""Per-board bookkeeping: turn, castling rights, en passant, clocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chess_model.core.coord import Coord
from chess_model.core.enums import Color

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CastlingRight:
    """Pairs the square the king lands on with the rook it castles with."""

    king_destination: Coord
    rook_origin: Coord


@dataclass(slots=True)
class GameState:
    """Positional metadata owned by a :class:`~chess_model.core.board.Board`.

    The halfmove clock is only ever incremented here; resetting it after a
    capture or pawn advance is left to the caller via
    :meth:`reset_halfmove_clock`.
    """

    turn: Color = Color.WHITE
    castling: dict[Color, set[CastlingRight]] = field(default_factory=dict)
    en_passant: Coord | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    # ── Turn bookkeeping ─────────────────────────────────────────────────

    def next_turn(self) -> None:
        """Hand the move to the other side and advance the clocks."""
        self.turn = self.turn.opposite
        if self.turn == Color.WHITE:
            self.fullmove_number += 1
        self.halfmove_clock += 1

    def reset_halfmove_clock(self) -> None:
        self.halfmove_clock = 0

    # ── Castling rights ──────────────────────────────────────────────────

    def rights_for(self, color: Color) -> frozenset[CastlingRight]:
        return frozenset(self.castling.get(color, ()))

    def revoke(self, color: Color, rook_origin: Coord | None = None) -> None:
        """Drop *color*'s rights, or only the one tied to *rook_origin*."""
        rights = self.castling.get(color)
        if not rights:
            return
        if rook_origin is None:
            dropped = set(rights)
            rights.clear()
        else:
            dropped = {r for r in rights if r.rook_origin == rook_origin}
            rights.difference_update(dropped)
        if dropped:
            _LOGGER.debug("Revoked %d %s castling right(s)", len(dropped), color)

    # ── Copying ──────────────────────────────────────────────────────────

    def copy(self) -> GameState:
        return GameState(
            turn=self.turn,
            castling={color: set(rights) for color, rights in self.castling.items()},
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )
