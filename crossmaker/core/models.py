"""Data models supporting the crossword maker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .constants import Direction

if TYPE_CHECKING:
    from ..engine.grid import Grid


@dataclass(frozen=True)
class Placement:
    """A word anchored at ``(x, y)`` in one direction."""

    word: str
    x: int
    y: int
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dx, dy = self.direction.step
        return [(self.x + dx * i, self.y + dy * i) for i in range(self.length)]

    @property
    def end(self) -> Tuple[int, int]:
        dx, dy = self.direction.step
        return self.x + dx * (self.length - 1), self.y + dy * (self.length - 1)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "start": [self.x, self.y],
            "direction": self.direction.value,
            "length": self.length,
        }


@dataclass
class Solution:
    """Best complete assignment recorded by the solver."""

    score: int
    letters: "Grid"
    placements: Tuple[Placement, ...] = ()

    @property
    def words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    def placements_in(self, direction: Direction) -> List[Placement]:
        return [p for p in self.placements if p.direction == direction]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "size": [self.letters.bounds.size_x, self.letters.bounds.size_y],
            "grid": self.letters.to_jsonable(),
            "placements": [p.to_jsonable() for p in self.placements],
        }


@dataclass
class SearchStats:
    """Counters collected over one solver run."""

    nodes: int = 0
    complete: int = 0
    improvements: int = 0
    elapsed_seconds: float = 0.0
    truncated: bool = False
    best_score: Optional[int] = None
    improvement_scores: List[int] = field(default_factory=list)
