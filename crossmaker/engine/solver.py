"""Backtracking placement search maximizing word crosses.

The search is depth first. Words are assigned one at a time, longest first;
for the current word every legal anchor is tried in row-major order, across
before down, each in its own cloned branch of the grids. The best complete
assignment is kept on the solver.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_SIZE_X, DEFAULT_SIZE_Y, Direction, GridKind
from ..core.exceptions import ConfigurationError, SearchLimitReached
from ..core.models import Placement, SearchStats, Solution
from ..utils.logger import get_logger
from .grid import Grid, GridConfig
from .rules import can_place


LOGGER = get_logger(__name__)

ImprovementCallback = Callable[[Solution], None]


@dataclass
class SolverConfig:
    size_x: int = DEFAULT_SIZE_X
    size_y: int = DEFAULT_SIZE_Y
    time_limit_seconds: Optional[float] = None
    max_nodes: Optional[int] = None

    def to_grid_config(self) -> GridConfig:
        return GridConfig(size_x=self.size_x, size_y=self.size_y)


class SolverStatus(str, Enum):
    SEARCHING = "SEARCHING"
    SUCCESS = "SUCCESS"
    EXHAUSTED = "EXHAUSTED"


@dataclass
class SearchState:
    """One node of the search tree: the three grids plus what led to them."""

    letters: Grid
    across_guard: Grid
    down_guard: Grid
    placements: Tuple[Placement, ...] = ()
    score: int = 0

    @classmethod
    def empty(cls, size_x: int = DEFAULT_SIZE_X, size_y: int = DEFAULT_SIZE_Y) -> "SearchState":
        return cls(
            letters=Grid.letters(size_x, size_y),
            across_guard=Grid.guards(size_x, size_y),
            down_guard=Grid.guards(size_x, size_y),
        )

    @classmethod
    def from_config(cls, config: GridConfig) -> "SearchState":
        return cls(
            letters=Grid.from_config(config, GridKind.LETTERS),
            across_guard=Grid.from_config(config, GridKind.GUARDS),
            down_guard=Grid.from_config(config, GridKind.GUARDS),
        )

    def branch(self, placement: Placement, overlap: int) -> "SearchState":
        """Clone all three grids and apply ``placement`` to the copy."""

        child = SearchState(
            letters=self.letters.clone(),
            across_guard=self.across_guard.clone(),
            down_guard=self.down_guard.clone(),
            placements=self.placements + (placement,),
            score=self.score + overlap,
        )
        child.letters.place(placement.x, placement.y, placement.word, placement.direction)
        guard = child.across_guard if placement.direction == Direction.ACROSS else child.down_guard
        guard.mark_guard(placement.x, placement.y, placement.word, placement.direction)
        return child

    def to_solution(self) -> Solution:
        return Solution(score=self.score, letters=self.letters.clone(), placements=self.placements)


def order_words(words: Sequence[str]) -> List[str]:
    """Longest words first; ``sorted`` is stable so ties keep input order."""
    return sorted(words, key=len, reverse=True)


def candidate_positions(state: SearchState, word: str) -> Iterator[Tuple[Placement, int]]:
    """Yield every legal ``(placement, overlap)`` for ``word`` in scan order."""

    if not word:
        return
    letters = state.letters
    first = word[0]
    for y in range(letters.size_y):
        row = letters.cells[y]
        for x in range(letters.size_x):
            existing = row[x]
            if existing is not None and existing != first:
                continue
            for direction in (Direction.ACROSS, Direction.DOWN):
                check = can_place(
                    x, y, word, direction, letters, state.across_guard, state.down_guard
                )
                if check.ok:
                    yield Placement(word=word, x=x, y=y, direction=direction), check.overlap


def check_words(words: Sequence[str], size_x: int, size_y: int) -> None:
    """Reject input that can never be placed, before any search runs."""

    longest_fit = max(size_x, size_y)
    for word in words:
        if not word:
            raise ConfigurationError("Empty words cannot be placed")
        if len(word) > longest_fit:
            raise ConfigurationError(
                f"Word '{word}' ({len(word)} letters) does not fit a {size_x}x{size_y} grid"
            )


class Solver:
    """Exhaustive backtracking search for the most interconnected layout."""

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        on_improvement: Optional[ImprovementCallback] = None,
    ) -> None:
        self.config = config or SolverConfig()
        self.on_improvement = on_improvement
        self.status = SolverStatus.SEARCHING
        self.best: Optional[Solution] = None
        self.stats = SearchStats()
        self._deadline: Optional[float] = None

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def solve(self, words: Sequence[str]) -> Optional[Solution]:
        ordered = order_words(words)
        LOGGER.info(
            "Searching %dx%d grid for %d words: %s",
            self.config.size_x,
            self.config.size_y,
            len(ordered),
            ", ".join(ordered),
        )
        self.status = SolverStatus.SEARCHING
        self.best = None
        self.stats = SearchStats()
        started = time.monotonic()
        if self.config.time_limit_seconds is not None:
            self._deadline = started + self.config.time_limit_seconds
        else:
            self._deadline = None

        root = SearchState.from_config(self.config.to_grid_config())
        try:
            self._search(root, ordered)
        except SearchLimitReached as exc:
            self.stats.truncated = True
            LOGGER.warning("Search stopped early: %s", exc)
        finally:
            self.stats.elapsed_seconds = time.monotonic() - started

        if self.best is None:
            self.status = SolverStatus.EXHAUSTED
            LOGGER.warning("No complete placement found for %d words", len(ordered))
        else:
            self.status = SolverStatus.SUCCESS
            LOGGER.info(
                "Best score %d after %d nodes (%d complete layouts, %.2fs)",
                self.best.score,
                self.stats.nodes,
                self.stats.complete,
                self.stats.elapsed_seconds,
            )
        return self.best

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------
    def _search(self, state: SearchState, words: List[str]) -> None:
        self._tick()
        if not words:
            self._record(state)
            return

        word, remaining = words[0], words[1:]
        for placement, overlap in candidate_positions(state, word):
            self._search(state.branch(placement, overlap), remaining)

    def _tick(self) -> None:
        self.stats.nodes += 1
        max_nodes = self.config.max_nodes
        if max_nodes is not None and self.stats.nodes > max_nodes:
            raise SearchLimitReached(f"node limit of {max_nodes} reached")
        if self._deadline is not None and time.monotonic() > self._deadline:
            raise SearchLimitReached(
                f"time limit of {self.config.time_limit_seconds:.1f}s reached"
            )

    def _record(self, state: SearchState) -> None:
        self.stats.complete += 1
        if self.best is not None and state.score <= self.best.score:
            return
        self.best = state.to_solution()
        self.stats.improvements += 1
        self.stats.best_score = state.score
        self.stats.improvement_scores.append(state.score)
        LOGGER.debug("New best score %d after %d nodes", state.score, self.stats.nodes)
        if self.on_improvement is not None:
            self.on_improvement(self.best)


def generate(
    words: Sequence[str],
    size_x: int = DEFAULT_SIZE_X,
    size_y: int = DEFAULT_SIZE_Y,
    *,
    time_limit_seconds: Optional[float] = None,
    max_nodes: Optional[int] = None,
    on_improvement: Optional[ImprovementCallback] = None,
) -> Optional[Solution]:
    """Place ``words`` on a ``size_x`` by ``size_y`` grid maximizing crosses.

    Returns ``None`` when no complete placement exists; that is a normal
    outcome, not an error.
    """

    config = SolverConfig(
        size_x=size_x,
        size_y=size_y,
        time_limit_seconds=time_limit_seconds,
        max_nodes=max_nodes,
    )
    return Solver(config, on_improvement=on_improvement).solve(words)


__all__ = [
    "SearchState",
    "Solver",
    "SolverConfig",
    "SolverStatus",
    "candidate_positions",
    "check_words",
    "generate",
    "order_words",
]
