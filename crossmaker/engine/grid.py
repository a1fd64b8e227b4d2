"""Grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from ..core.constants import (DEFAULT_SIZE_X, DEFAULT_SIZE_Y, EMPTY, OCCUPIED_GUARD,
                              Bounds, Direction, Guard, GridKind)
from ..core.exceptions import InvalidGridOperation


GuardCell = FrozenSet[Guard]
CellValue = Union[Optional[str], GuardCell]

NO_GUARDS: GuardCell = frozenset()


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    size_x: int = DEFAULT_SIZE_X
    size_y: int = DEFAULT_SIZE_Y

    def bounds(self) -> Bounds:
        return Bounds(size_x=self.size_x, size_y=self.size_y)


class Grid:
    """Fixed-size lattice holding either letters or guard markers.

    Cells are addressed as ``(x, y)``; ``x`` runs along a row, ``y`` down a
    column. A letter grid stores ``None`` or a single character per cell. A
    guard grid stores a frozen set of :class:`Guard` markers per cell, so
    marks written for one word never erase marks written for another.
    """

    def __init__(self, size_x: int, size_y: int, kind: GridKind = GridKind.LETTERS) -> None:
        if size_x < 1 or size_y < 1:
            raise InvalidGridOperation(f"Grid dimensions must be positive, got {size_x}x{size_y}")
        self.bounds = Bounds(size_x=size_x, size_y=size_y)
        self.kind = kind
        blank = EMPTY if kind == GridKind.LETTERS else NO_GUARDS
        self.cells: List[List[CellValue]] = [[blank] * size_x for _ in range(size_y)]

    @classmethod
    def letters(cls, size_x: int = DEFAULT_SIZE_X, size_y: int = DEFAULT_SIZE_Y) -> "Grid":
        return cls(size_x, size_y, GridKind.LETTERS)

    @classmethod
    def guards(cls, size_x: int = DEFAULT_SIZE_X, size_y: int = DEFAULT_SIZE_Y) -> "Grid":
        return cls(size_x, size_y, GridKind.GUARDS)

    @classmethod
    def from_config(cls, config: GridConfig, kind: GridKind = GridKind.LETTERS) -> "Grid":
        return cls(config.size_x, config.size_y, kind)

    @property
    def size_x(self) -> int:
        return self.bounds.size_x

    @property
    def size_y(self) -> int:
        return self.bounds.size_y

    @property
    def is_letter_grid(self) -> bool:
        return self.kind == GridKind.LETTERS

    def clone(self) -> "Grid":
        """Return an independent copy; cell values are immutable so rows suffice."""
        twin = Grid.__new__(Grid)
        twin.bounds = self.bounds
        twin.kind = self.kind
        twin.cells = [list(row) for row in self.cells]
        return twin

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.kind == other.kind and self.bounds == other.bounds and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid({self.size_x}x{self.size_y}, {self.kind.value})"

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, x: int, y: int) -> CellValue:
        self._require_bounds(x, y)
        return self.cells[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        value = self.cell(x, y)
        return not value

    def has_guard(self, x: int, y: int, *guards: Guard) -> bool:
        """True when the guard cell at ``(x, y)`` holds any of ``guards``."""
        self._require_kind(GridKind.GUARDS, "has_guard")
        self._require_bounds(x, y)
        markers = self.cells[y][x]
        return any(guard in markers for guard in guards)

    def set_letter(self, x: int, y: int, letter: str) -> None:
        self._require_kind(GridKind.LETTERS, "set_letter")
        self._require_bounds(x, y)
        if not isinstance(letter, str) or len(letter) != 1:
            raise InvalidGridOperation(f"Letter cells hold a single character, got {letter!r}")
        self.cells[y][x] = letter

    def _add_guard(self, x: int, y: int, guard: Guard) -> None:
        if not self.bounds.contains(x, y):
            return
        self.cells[y][x] = self.cells[y][x] | {guard}

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place(self, x: int, y: int, word: str, direction: Direction) -> bool:
        """Write ``word`` starting at ``(x, y)``; ``False`` if it does not fit."""
        self._require_kind(GridKind.LETTERS, "place")
        if not self.bounds.fits(x, y, len(word), direction):
            return False
        dx, dy = direction.step
        for index, letter in enumerate(word):
            self.cells[y + dy * index][x + dx * index] = letter
        return True

    def place_across(self, x: int, y: int, word: str) -> bool:
        return self.place(x, y, word, Direction.ACROSS)

    def place_down(self, x: int, y: int, word: str) -> bool:
        return self.place(x, y, word, Direction.DOWN)

    # ------------------------------------------------------------------
    # Guard marking
    # ------------------------------------------------------------------
    def mark_guard(self, x: int, y: int, word: str, direction: Direction) -> bool:
        """Record the exclusion zone of ``word`` placed at ``(x, y)``.

        For an across word ``bli`` the pattern is::

            --NNN--
            -ObliO-
            --NNN--

        and the transposed pattern for a down word. Out-of-bounds targets are
        skipped; ``False`` is returned without mutation if the word itself
        does not fit.
        """

        if self.kind != GridKind.GUARDS:
            raise InvalidGridOperation("Guard markers can only be written on a guard grid")
        if not self.bounds.fits(x, y, len(word), direction):
            return False
        dx, dy = direction.step
        # Perpendicular neighbours sit one step along the other axis.
        px, py = direction.other.step
        occupied = OCCUPIED_GUARD[direction]
        length = len(word)
        for index in range(-1, length + 1):
            cx, cy = x + dx * index, y + dy * index
            if index in (-1, length):
                self._add_guard(cx, cy, Guard.NO_ORIENT)
                continue
            self._add_guard(cx, cy, occupied)
            self._add_guard(cx - px, cy - py, Guard.BOUNDARY)
            self._add_guard(cx + px, cy + py, Guard.BOUNDARY)
        return True

    def mark_across_guard(self, x: int, y: int, word: str) -> bool:
        return self.mark_guard(x, y, word, Direction.ACROSS)

    def mark_down_guard(self, x: int, y: int, word: str) -> bool:
        return self.mark_guard(x, y, word, Direction.DOWN)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def rows(self) -> Iterator[List[CellValue]]:
        for row in self.cells:
            yield list(row)

    def occupied(self) -> Iterable[Tuple[int, int, CellValue]]:
        """Yield ``(x, y, value)`` for every non-empty cell in row-major order."""
        for y, row in enumerate(self.cells):
            for x, value in enumerate(row):
                if value:
                    yield x, y, value

    def filled_count(self) -> int:
        return sum(1 for _ in self.occupied())

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[object]]:
        if self.kind == GridKind.LETTERS:
            return [list(row) for row in self.cells]
        return [[sorted(marker.value for marker in cell) for cell in row] for row in self.cells]

    # ------------------------------------------------------------------
    # Contract checks
    # ------------------------------------------------------------------
    def _require_bounds(self, x: int, y: int) -> None:
        if not self.bounds.contains(x, y):
            raise InvalidGridOperation(
                f"Cell {(x, y)} outside {self.size_x}x{self.size_y} grid"
            )

    def _require_kind(self, kind: GridKind, operation: str) -> None:
        if self.kind != kind:
            raise InvalidGridOperation(
                f"{operation} requires a {kind.value.lower()} grid, got {self.kind.value.lower()}"
            )
