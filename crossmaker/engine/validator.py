"""Deterministic rule validation for generated crosswords."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Set, Tuple

from ..core.constants import Direction
from ..core.exceptions import ValidationError
from ..core.models import Placement, Solution
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class SolutionValidator:
    """Re-checks a solver result from its letter grid and placements alone."""

    def validate(self, solution: Solution) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_in_bounds(solution)
            self._check_letters_match(solution)
            self._check_no_stray_letters(solution)
            self._check_runs(solution, Direction.ACROSS)
            self._check_runs(solution, Direction.DOWN)
            self._check_score(solution)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_in_bounds(self, solution: Solution) -> None:
        bounds = solution.letters.bounds
        for placement in solution.placements:
            if not bounds.fits(placement.x, placement.y, placement.length, placement.direction):
                raise ValidationError(
                    f"Word '{placement.word}' at {(placement.x, placement.y)} leaves the grid"
                )

    def _check_letters_match(self, solution: Solution) -> None:
        for placement in solution.placements:
            for letter, (x, y) in zip(placement.word, placement.cells):
                found = solution.letters.cell(x, y)
                if found != letter:
                    raise ValidationError(
                        f"Conflict at {(x, y)}: '{placement.word}' needs '{letter}', grid has {found!r}"
                    )

    def _check_no_stray_letters(self, solution: Solution) -> None:
        covered = _coverage(solution.placements)
        for x, y, letter in solution.letters.occupied():
            if (x, y) not in covered:
                raise ValidationError(f"Letter {letter!r} at {(x, y)} belongs to no word")

    def _check_runs(self, solution: Solution, direction: Direction) -> None:
        """Every run of two or more letters must be exactly one placed word."""

        expected: Set[Tuple[int, int, int]] = {
            (p.x, p.y, p.length)
            for p in solution.placements
            if p.direction == direction and p.length >= 2
        }
        found = set(_letter_runs(solution, direction))
        extra = sorted(found - expected)
        if extra:
            x, y, length = extra[0]
            raise ValidationError(
                f"Unplanned {direction.value.lower()} run of {length} letters at {(x, y)}"
            )
        missing = sorted(expected - found)
        if missing:
            x, y, length = missing[0]
            raise ValidationError(
                f"{direction.value.capitalize()} word at {(x, y)} touches a neighbouring letter"
            )

    def _check_score(self, solution: Solution) -> None:
        crosses = sum(1 for count in _coverage(solution.placements).values() if count >= 2)
        if crosses != solution.score:
            raise ValidationError(
                f"Reported score {solution.score} but the grid has {crosses} crosses"
            )


def _coverage(placements: Iterable[Placement]) -> Dict[Tuple[int, int], int]:
    counts: Counter = Counter()
    for placement in placements:
        counts.update(placement.cells)
    return counts


def _letter_runs(solution: Solution, direction: Direction) -> List[Tuple[int, int, int]]:
    """Return ``(x, y, length)`` for maximal runs of two or more letters."""

    letters = solution.letters
    runs: List[Tuple[int, int, int]] = []
    dx, dy = direction.step
    if direction == Direction.ACROSS:
        starts = [(0, y) for y in range(letters.size_y)]
    else:
        starts = [(x, 0) for x in range(letters.size_x)]
    for sx, sy in starts:
        x, y = sx, sy
        while letters.bounds.contains(x, y):
            if letters.is_empty(x, y):
                x, y = x + dx, y + dy
                continue
            run_x, run_y, length = x, y, 0
            while letters.bounds.contains(x, y) and not letters.is_empty(x, y):
                length += 1
                x, y = x + dx, y + dy
            if length >= 2:
                runs.append((run_x, run_y, length))
    return runs
