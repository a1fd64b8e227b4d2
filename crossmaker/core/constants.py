"""Shared constants and enumerations for the crossword maker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


DEFAULT_SIZE_X = 11
DEFAULT_SIZE_Y = 11

MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 10

EMPTY = None


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        """``(dx, dy)`` advancing one letter along the word."""
        return STEPS[self]

    @property
    def other(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.ACROSS: (1, 0),
    Direction.DOWN: (0, 1),
}


class GridKind(str, Enum):
    """The two interchangeable cell representations of a grid."""

    LETTERS = "LETTERS"
    GUARDS = "GUARDS"


class Guard(str, Enum):
    """Adjacency markers written around a placed word.

    ``HORIZONTAL``/``VERTICAL`` sit on the cells an across/down word occupies.
    ``NO_ORIENT`` sits on the single flank cell before and after the word on
    its own axis. ``BOUNDARY`` sits beside every occupied cell on the
    perpendicular axis.
    """

    HORIZONTAL = "H"
    VERTICAL = "V"
    NO_ORIENT = "O"
    BOUNDARY = "N"


OCCUPIED_GUARD: Dict[Direction, Guard] = {
    Direction.ACROSS: Guard.HORIZONTAL,
    Direction.DOWN: Guard.VERTICAL,
}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    size_x: int
    size_y: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size_x and 0 <= y < self.size_y

    def fits(self, x: int, y: int, length: int, direction: Direction) -> bool:
        """True when a ``length``-letter word anchored at ``(x, y)`` stays inside."""
        if not self.contains(x, y) or length < 1:
            return False
        if direction == Direction.ACROSS:
            return x + length <= self.size_x
        return y + length <= self.size_y

    @property
    def cells(self) -> int:
        return self.size_x * self.size_y
