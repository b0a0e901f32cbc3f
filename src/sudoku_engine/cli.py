"""Console entry point for generating puzzles."""

from __future__ import annotations

import argparse
import sys

from sudoku_engine import main as run
from sudoku_engine.puzzle import Difficulty


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-engine",
        description="Generate Sudoku puzzles with a unique solution.",
    )
    parser.add_argument(
        "-d",
        "--difficulty",
        default=Difficulty.MEDIUM.value,
        choices=[d.value for d in Difficulty],
        type=str.upper,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--seed", help="string seed for a reproducible puzzle")
    group.add_argument("--daily", metavar="YYYY-MM-DD", help="daily challenge date")
    parser.add_argument("-n", "--count", type=int, default=1)
    parser.add_argument(
        "--rng-seed", type=int, default=None, help="integer seed for batch runs"
    )
    parser.add_argument("--format", dest="output", choices=["pretty", "line"], default="pretty")
    parser.add_argument("--solution", action="store_true", help="print the solution too")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run(
            difficulty=args.difficulty,
            seed=args.seed,
            date=args.daily,
            count=args.count,
            rng_seed=args.rng_seed,
            output=args.output,
            show_solution=args.solution,
        )
    except ValueError as exc:
        print(f"sudoku-engine: error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
