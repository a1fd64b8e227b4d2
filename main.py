"""CLI entrypoint for the crossword maker."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from crossmaker.core.constants import DEFAULT_SIZE_X, DEFAULT_SIZE_Y, MAX_WORD_LENGTH, MIN_WORD_LENGTH
from crossmaker.core.exceptions import ConfigurationError
from crossmaker.engine.solver import Solver, SolverConfig, check_words
from crossmaker.engine.validator import SolutionValidator
from crossmaker.io.words import collect_words, parse_words_file
from crossmaker.utils.logger import configure_logging
from crossmaker.utils.pretty import pretty_print_grid, print_solution_stats


NO_SOLUTION_MESSAGE = "Couldn't generate puzzle..."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Place words on a grid so that they cross as often as possible",
    )
    parser.add_argument("words", nargs="*", metavar="WORD", help="Words to place")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--size-x", type=int, default=DEFAULT_SIZE_X, help="Grid width in cells")
    parser.add_argument("--size-y", type=int, default=DEFAULT_SIZE_Y, help="Grid height in cells")
    parser.add_argument(
        "--min-length",
        type=int,
        default=MIN_WORD_LENGTH,
        help="Shortest accepted word (default 3)",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=MAX_WORD_LENGTH,
        help="Longest accepted word (default 10)",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=None,
        help="Stop searching after this many seconds and keep the best so far",
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        default=None,
        help="Stop searching after visiting this many search nodes",
    )
    parser.add_argument(
        "--show-progress",
        action="store_true",
        help="Print each improved layout as soon as it is found",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.size_x < 1 or args.size_y < 1:
        parser.error("--size-x and --size-y must be positive")

    entries: List[str] = list(args.words)
    if args.words_file:
        entries.extend(parse_words_file(args.words_file))
    if not entries:
        parser.error("provide at least one WORD or --words-file")

    collection = collect_words(entries, min_length=args.min_length, max_length=args.max_length)
    if collection.rejected:
        details = "; ".join(f"'{entry}': {reason}" for entry, reason in collection.rejected)
        parser.error(details)
    if not collection.words:
        parser.error("no usable words after filtering")

    try:
        check_words(collection.words, args.size_x, args.size_y)
    except ConfigurationError as exc:
        parser.error(str(exc))

    progress = None
    if args.show_progress:
        def progress(solution) -> None:
            pretty_print_grid(solution.letters, label=f"Score {solution.score}:", stream=sys.stderr)

    config = SolverConfig(
        size_x=args.size_x,
        size_y=args.size_y,
        time_limit_seconds=args.time_limit,
        max_nodes=args.max_nodes,
    )
    solver = Solver(config, on_improvement=progress)
    solution = solver.solve(collection.words)

    if solution is None:
        print(NO_SOLUTION_MESSAGE)
        return 1

    validation = SolutionValidator().validate(solution)
    if args.output:
        payload = solution.to_jsonable()
        payload["words"] = collection.words
        payload["truncated"] = solver.stats.truncated
        payload["validation"] = validation.messages
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    else:
        print_solution_stats(solution, solver.stats)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
