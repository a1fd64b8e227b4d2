"""Placement rules deciding where a word may legally go.

Every check here is a pure function of the three grids of a search state.
A rejection is the normal outcome for most candidate positions and is
reported through :class:`PlacementCheck`, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import OCCUPIED_GUARD, Direction, Guard
from .grid import Grid


# A word may not start or end on a cell carrying either of these, in either grid.
TERMINAL_BLOCKERS = frozenset({Guard.NO_ORIENT, Guard.BOUNDARY})


@dataclass(frozen=True)
class PlacementCheck:
    ok: bool
    overlap: int = 0

    def __bool__(self) -> bool:
        return self.ok


REJECTED = PlacementCheck(ok=False)


def can_place(
    x: int,
    y: int,
    word: str,
    direction: Direction,
    letters: Grid,
    across_guard: Grid,
    down_guard: Grid,
) -> PlacementCheck:
    """Check ``word`` anchored at ``(x, y)`` and count the letters it would cross."""

    if not word or not letters.bounds.fits(x, y, len(word), direction):
        return REJECTED

    if direction == Direction.ACROSS:
        own_guard, other_guard = across_guard.cells, down_guard.cells
    else:
        own_guard, other_guard = down_guard.cells, across_guard.cells
    own_blockers = TERMINAL_BLOCKERS | {OCCUPIED_GUARD[direction]}

    dx, dy = direction.step
    end_x, end_y = x + dx * (len(word) - 1), y + dy * (len(word) - 1)
    for cx, cy in ((x, y), (end_x, end_y)):
        if own_guard[cy][cx] & TERMINAL_BLOCKERS or other_guard[cy][cx] & TERMINAL_BLOCKERS:
            return REJECTED

    cells = letters.cells
    overlap = 0
    for index, letter in enumerate(word):
        cx, cy = x + dx * index, y + dy * index
        if own_guard[cy][cx] & own_blockers:
            return REJECTED
        # The perpendicular grid's BOUNDARY marks are where a crossing word passes.
        if Guard.NO_ORIENT in other_guard[cy][cx]:
            return REJECTED
        existing = cells[cy][cx]
        if existing is None:
            continue
        if existing != letter:
            return REJECTED
        overlap += 1
    return PlacementCheck(ok=True, overlap=overlap)


def can_place_across(
    x: int, y: int, word: str, letters: Grid, across_guard: Grid, down_guard: Grid
) -> PlacementCheck:
    return can_place(x, y, word, Direction.ACROSS, letters, across_guard, down_guard)


def can_place_down(
    x: int, y: int, word: str, letters: Grid, across_guard: Grid, down_guard: Grid
) -> PlacementCheck:
    return can_place(x, y, word, Direction.DOWN, letters, across_guard, down_guard)


__all__ = [
    "PlacementCheck",
    "REJECTED",
    "can_place",
    "can_place_across",
    "can_place_down",
]
