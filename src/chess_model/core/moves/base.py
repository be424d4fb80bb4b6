"""Movement rule interface and the shared sliding traversal."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from chess_model.core.direction import parse_direction
from chess_model.core.errors import DirectionError

if TYPE_CHECKING:
    from chess_model.core.board import Board
    from chess_model.core.coord import Coord
    from chess_model.core.direction import Direction
    from chess_model.core.enums import Color
    from chess_model.core.piece import Piece


class MovementRule(ABC):
    """One geometric or special-case movement pattern.

    Rules hold no per-piece state and are shared between every piece that
    moves the same way. Validation never changes the position a caller can
    observe: rules that probe hypothetical positions do so through
    :meth:`Board.temporal_move`.
    """

    __slots__ = ()

    @abstractmethod
    def is_move_valid(self, from_coord: Coord, to_coord: Coord, board: Board) -> bool:
        """Whether the piece on *from_coord* may move to *to_coord*."""

    @abstractmethod
    def allowed_moves(self, from_coord: Coord, board: Board) -> set[Coord]:
        """Every destination this rule allows for the piece on *from_coord*."""

    def attacks(self, from_coord: Coord, to_coord: Coord, board: Board) -> bool:
        """Whether the piece on *from_coord* threatens a capture on *to_coord*."""
        return self.is_move_valid(from_coord, to_coord, board)

    def move_piece(self, from_coord: Coord, to_coord: Coord, board: Board) -> Piece | None:
        """Apply an already validated move and return the captured piece.

        Does not check that the move is valid.
        """
        captured = board.move_to_coord(from_coord, to_coord)
        piece = board.get_piece(to_coord)
        if piece is not None:
            piece.has_moved = True
        return captured


# -- Sliding helpers --------------------------------------------------------


def can_traverse(
    board: Board,
    from_coord: Coord,
    to_coord: Coord,
    step: Coord,
    max_range: int,
    color: Color,
) -> bool:
    """Walk from *from_coord* by *step* until *to_coord* is reached.

    Fails when a piece stands in the way, when the target holds a piece of
    *color*, or when *max_range* steps or the board edge come first.
    """
    current = from_coord
    for _ in range(max_range):
        current = current + step
        if not board.in_bounds(current):
            return False
        occupant = board.get_piece(current)
        if current == to_coord:
            return occupant is None or occupant.color != color
        if occupant is not None:
            return False
    return False


def coords_along(
    board: Board,
    from_coord: Coord,
    direction: Direction,
    max_range: int,
    color: Color,
) -> set[Coord]:
    """Cells reachable from *from_coord* sliding along *direction*."""
    reachable: set[Coord] = set()
    step = direction.step
    current = from_coord
    for _ in range(max_range):
        current = current + step
        if not board.in_bounds(current):
            break
        occupant = board.get_piece(current)
        if occupant is None:
            reachable.add(current)
            continue
        if occupant.color != color:
            reachable.add(current)
        break
    return reachable


class SlidingRule(MovementRule):
    """Straight-line movement along a fixed set of directions.

    Subclasses set :attr:`directions` and provide a ``max_range`` attribute;
    ``None`` means as far as the board reaches in that direction.
    """

    __slots__ = ()

    directions: ClassVar[tuple[Direction, ...]]
    max_range: int | None

    def _range(self, direction: Direction, board: Board) -> int:
        if self.max_range is None:
            return board.max_cells_direction(direction)
        return self.max_range

    def is_move_valid(self, from_coord: Coord, to_coord: Coord, board: Board) -> bool:
        piece = board.get_piece(from_coord)
        if piece is None or not board.in_bounds(to_coord):
            return False
        try:
            direction = parse_direction(from_coord, to_coord)
        except DirectionError:
            return False
        if direction not in self.directions:
            return False
        return can_traverse(
            board,
            from_coord,
            to_coord,
            direction.step,
            self._range(direction, board),
            piece.color,
        )

    def allowed_moves(self, from_coord: Coord, board: Board) -> set[Coord]:
        piece = board.get_piece(from_coord)
        if piece is None:
            return set()
        moves: set[Coord] = set()
        for direction in self.directions:
            moves |= coords_along(
                board, from_coord, direction, self._range(direction, board), piece.color
            )
        return moves
