"""Orthogonal sliding movement (rook, queen, king)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chess_model.core.direction import ORTHOGONAL, Direction
from chess_model.core.moves.base import SlidingRule


@dataclass(frozen=True, slots=True)
class Line(SlidingRule):
    """Any distance north, south, east or west, up to *max_range* cells."""

    directions: ClassVar[tuple[Direction, ...]] = ORTHOGONAL

    max_range: int | None = None
