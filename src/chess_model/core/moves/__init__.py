"""Movement rules: one class per movement pattern."""

from chess_model.core.moves.base import MovementRule, SlidingRule, can_traverse, coords_along
from chess_model.core.moves.castle import Castle
from chess_model.core.moves.diagonal import Diagonal
from chess_model.core.moves.jump import Jump
from chess_model.core.moves.line import Line
from chess_model.core.moves.pawn import PawnMove

__all__ = [
    "MovementRule",
    "SlidingRule",
    "can_traverse",
    "coords_along",
    "Castle",
    "Diagonal",
    "Jump",
    "Line",
    "PawnMove",
]
