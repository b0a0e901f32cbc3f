import os
from concurrent.futures import ProcessPoolExecutor
from logging import basicConfig, getLogger
from typing import Literal

from sudoku_engine.board.grid import format_grid, render_grid
from sudoku_engine.puzzle import Difficulty, Puzzle, make_puzzle, make_puzzle_batch

logger = getLogger(__name__)

OutputFormat = Literal["pretty", "line"]


def configure_logging() -> None:
    basicConfig(level=os.environ.get("SUDOKU_LOG_LEVEL", "INFO"))


def _print_puzzle(puzzle: Puzzle, output: OutputFormat, show_solution: bool) -> None:
    match output:
        case "pretty":
            print(render_grid(puzzle.initial))
            if show_solution:
                print()
                print(render_grid(puzzle.solution))
            print()
        case "line":
            line = format_grid(puzzle.initial)
            if show_solution:
                line = f"{line} {format_grid(puzzle.solution)}"
            print(line)
        case _:
            msg = f"Unknown output format: {output}"
            raise ValueError(msg)


def main(  # noqa: PLR0913
    *,
    difficulty: Difficulty | str = Difficulty.MEDIUM,
    seed: str | None = None,
    date: str | None = None,
    count: int = 1,
    rng_seed: int | None = None,
    output: OutputFormat = "pretty",
    show_solution: bool = False,
) -> None:
    configure_logging()
    difficulty = Difficulty.parse(difficulty)

    if count < 1:
        msg = f"count must be positive, got {count}."
        raise ValueError(msg)
    if (seed is not None or date is not None) and (count > 1 or rng_seed is not None):
        msg = "A seed or daily date always yields one puzzle; drop --count and --rng-seed."
        raise ValueError(msg)

    if count == 1 and rng_seed is None:
        puzzles: tuple[Puzzle, ...] = (make_puzzle(difficulty, seed, date=date),)
    else:
        logger.info("Generating %d %s puzzles...", count, difficulty.value)
        with ProcessPoolExecutor() as ppx:
            puzzles = make_puzzle_batch(count, difficulty, rng=rng_seed, executor=ppx)

    for puzzle in puzzles:
        logger.info(
            "%s puzzle, %d clues%s",
            puzzle.difficulty.value,
            puzzle.clue_count,
            f", seed {puzzle.seed}" if puzzle.seed else "",
        )
        _print_puzzle(puzzle, output, show_solution)
