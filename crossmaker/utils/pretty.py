"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..core.models import SearchStats, Solution
    from ..engine.grid import Grid


BLANK = "   "


def cell_symbol(value) -> str:
    if not value:
        return BLANK
    return f"[{value}]"


def format_grid(letters: Grid) -> str:
    """Render every occupied cell as a framed glyph, one text line per row."""

    width = letters.size_x
    header_cells = [f"{x:^3}" for x in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for y, row in enumerate(letters.rows()):
        row_render = "".join(cell_symbol(value) for value in row)
        lines.append(f"{y:>2} |{row_render}".rstrip())
    return "\n".join(lines)


def pretty_print_grid(letters: Grid, *, label: str | None = None, stream=None) -> None:
    """Print the crossword grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(letters), file=stream)


def print_solution_stats(
    solution: Solution,
    stats: Optional[SearchStats] = None,
    *,
    stream=None,
) -> None:
    """Print grid + summary stats for a solver result."""

    stream = stream or sys.stdout
    print(format_grid(solution.letters), file=stream)

    letters = solution.letters
    total_cells = letters.bounds.cells
    filled = letters.filled_count()
    across = solution.placements_in(Direction.ACROSS)
    down = solution.placements_in(Direction.DOWN)
    lengths = Counter(len(word) for word in solution.words)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {letters.size_x} x {letters.size_y} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {filled} ({filled / total_cells * 100:.0f}%)", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(solution.placements)} ({len(across)} across, {len(down)} down)", file=stream)
    print(f"  Crosses:       {solution.score}", file=stream)
    if lengths:
        dist_parts = [f"{length}:{count}" for length, count in sorted(lengths.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    for placement in solution.placements:
        print(
            f"  {placement.direction.value:<6} ({placement.x},{placement.y})  {placement.word}",
            file=stream,
        )

    if stats is not None:
        print(file=stream)
        print("--- Search ---", file=stream)
        print(f"  Nodes:         {stats.nodes}", file=stream)
        print(f"  Complete:      {stats.complete}", file=stream)
        print(f"  Improvements:  {stats.improvements}", file=stream)
        print(f"  Elapsed:       {stats.elapsed_seconds:.2f}s", file=stream)
        if stats.truncated:
            print("  Stopped early: limit reached, best-so-far shown", file=stream)
