"""Crossword maker: place a word list on a grid maximizing crosses.

This package exposes the public API surface via:

- ``crossmaker.engine.solver.generate``: one-call search entry point.
- ``crossmaker.engine.solver.Solver``: backtracking search with limits and
  best-so-far callbacks.
- ``crossmaker.engine.grid.Grid``: letter and guard grids.
- ``crossmaker.io.words.collect_words``: boundary filtering of user words.
"""

from .engine.grid import Grid, GridConfig
from .engine.solver import Solver, SolverConfig, generate
from .io.words import collect_words

__all__ = [
    "Grid",
    "GridConfig",
    "Solver",
    "SolverConfig",
    "collect_words",
    "generate",
]

__version__ = "0.1.0"
