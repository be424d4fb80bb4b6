"""Diagonal sliding movement (bishop, queen, king)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chess_model.core.direction import DIAGONAL, Direction
from chess_model.core.moves.base import SlidingRule


@dataclass(frozen=True, slots=True)
class Diagonal(SlidingRule):
    """Any distance along the four diagonals, up to *max_range* cells."""

    directions: ClassVar[tuple[Direction, ...]] = DIAGONAL

    max_range: int | None = None
