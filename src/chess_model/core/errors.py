"""Exception types raised by the chess model."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chess_model.core.coord import Coord


class OutOfBoundsError(IndexError):
    """A coordinate outside the board grid was accessed."""

    def __init__(self, coord: Coord, rows: int, cols: int) -> None:
        super().__init__(f"{coord!r} is outside the {rows}x{cols} board")
        self.coord = coord


class DirectionErrorKind(Enum):
    SAME_ORIGIN = "same origin and destination"
    NOT_A_DIRECTION = "delta is not a compass direction"


class DirectionError(ValueError):
    """A coordinate delta does not map to one of the eight compass directions."""

    def __init__(self, kind: DirectionErrorKind, origin: Coord, target: Coord) -> None:
        super().__init__(f"{origin!r} -> {target!r}: {kind.value}")
        self.kind = kind


class FenError(ValueError):
    """Malformed FEN text."""


class NotationError(ValueError):
    """Malformed algebraic cell name."""


class IllegalMoveError(ValueError):
    """A move was submitted that the rules do not allow."""


class MissingKingError(RuntimeError):
    """The board has no king for a color.

    This is an invariant violation rather than a recoverable condition: every
    position handed to the evaluator must hold one king per side.
    """
