from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING, Final, NamedTuple

import numpy as np

from sudoku_engine.board.grid import (
    BOX_SIZE,
    DIGITS,
    EMPTY,
    SIZE,
    Grid,
    all_positions,
    copy_grid,
    count_filled,
    empty_grid,
)
from sudoku_engine.engine.solver import count_solutions, solve
from sudoku_engine.puzzle.rng import RandomSource, make_random

if TYPE_CHECKING:
    from concurrent.futures import Executor

__all__ = [
    "REVEAL_RANGES",
    "Difficulty",
    "Puzzle",
    "carve",
    "generate_puzzle",
    "generate_puzzles",
    "generate_solution",
    "reveal_count",
]


logger = getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
    EXPERT = "EXPERT"

    @classmethod
    def parse(cls, value: str | Difficulty) -> Difficulty:
        if isinstance(value, cls):
            return value
        try:
            return cls[value.strip().upper()]
        except KeyError:
            names = ", ".join(d.value for d in cls)
            msg = f"Unknown difficulty {value!r}, expected one of: {names}."
            raise ValueError(msg) from None

    @property
    def reveal_range(self) -> tuple[int, int]:
        return REVEAL_RANGES[self]


# Inclusive bounds on the number of clues kept.
REVEAL_RANGES: Final[dict[Difficulty, tuple[int, int]]] = {
    Difficulty.EASY: (36, 40),
    Difficulty.MEDIUM: (30, 34),
    Difficulty.HARD: (24, 29),
    Difficulty.EXPERT: (17, 23),
}


class Puzzle(NamedTuple):
    initial: Grid
    solution: Grid
    difficulty: Difficulty
    seed: str | None = None

    @classmethod
    def frozen(
        cls,
        initial: Grid,
        solution: Grid,
        difficulty: Difficulty,
        seed: str | None = None,
    ) -> Puzzle:
        """Build a puzzle owning read-only copies of both grids."""
        initial, solution = copy_grid(initial), copy_grid(solution)
        initial.setflags(write=False)
        solution.setflags(write=False)
        return cls(initial=initial, solution=solution, difficulty=difficulty, seed=seed)

    @property
    def clue_count(self) -> int:
        return count_filled(self.initial)

    def working_grid(self) -> Grid:
        """A writable copy of the initial grid for play."""
        return copy_grid(self.initial)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        return (
            np.array_equal(self.initial, other.initial)
            and np.array_equal(self.solution, other.solution)
            and self.difficulty == other.difficulty
            and self.seed == other.seed
        )

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal

    def __hash__(self) -> int:
        return hash(
            (self.initial.tobytes(), self.solution.tobytes(), self.difficulty, self.seed)
        )


def _fill_diagonal_boxes(grid: Grid, rng: RandomSource) -> None:
    # The three boxes on the main diagonal share no row, column, or box.
    for start in range(0, SIZE, BOX_SIZE):
        digits = list(DIGITS)
        rng.shuffle(digits)
        box = np.array(digits, dtype=np.int8).reshape(BOX_SIZE, BOX_SIZE)
        grid[start : start + BOX_SIZE, start : start + BOX_SIZE] = box


def generate_solution(rng: RandomSource) -> Grid:
    grid = empty_grid()
    _fill_diagonal_boxes(grid, rng)
    if not solve(grid, rng):
        msg = "Failed to complete a grid from filled diagonal boxes."
        raise RuntimeError(msg)
    return grid


def reveal_count(difficulty: Difficulty, rng: RandomSource) -> int:
    low, high = REVEAL_RANGES[difficulty]
    return rng.next_int(low, high + 1)


def carve(solution: Grid, reveal: int, rng: RandomSource) -> Grid:
    """Clear cells of ``solution`` in shuffled order while the puzzle keeps a
    unique solution, stopping once only ``reveal`` clues remain.

    If uniqueness blocks the target, the result simply keeps more clues."""
    puzzle = copy_grid(solution)
    target = SIZE * SIZE - reveal
    positions = all_positions()
    rng.shuffle(positions)

    removed = 0
    for row, col in positions:
        if removed >= target:
            break
        backup = puzzle[row, col]
        puzzle[row, col] = EMPTY
        if count_solutions(puzzle, 2) == 1:
            removed += 1
        else:
            puzzle[row, col] = backup

    if removed < target:
        logger.warning(
            "Carving stopped at %d clues, target was %d", SIZE * SIZE - removed, reveal
        )
    return puzzle


def generate_puzzle(
    difficulty: Difficulty | str,
    seed: str | None = None,
    rng: np.random.Generator | int | None = None,
) -> Puzzle:
    """Generate a puzzle with a unique solution.

    With ``seed`` every random draw comes from a :class:`SeededRandom`, so the
    same seed and difficulty always give the same puzzle. Otherwise ``rng``
    (or fresh entropy) drives a numpy generator. Passing both is an error."""
    if seed is not None and rng is not None:
        msg = "Pass either a seed or an rng, not both."
        raise ValueError(msg)
    difficulty = Difficulty.parse(difficulty)
    source = make_random(seed, rng)
    logger.debug("Generating %s puzzle, seed=%r", difficulty.value, seed)

    solution = generate_solution(source)
    reveal = reveal_count(difficulty, source)
    initial = carve(solution, reveal, source)

    puzzle = Puzzle.frozen(initial, solution, difficulty, seed)
    logger.info(
        "Generated %s puzzle with %d clues (target %d)",
        difficulty.value,
        puzzle.clue_count,
        reveal,
    )
    return puzzle


def _generate_one(
    difficulty: Difficulty, seed: str | None, rng_seed: int | None
) -> Puzzle:
    return generate_puzzle(difficulty, seed=seed, rng=rng_seed)


def generate_puzzles(
    count: int,
    difficulty: Difficulty | str,
    *,
    seeds: Sequence[str] | None = None,
    rng: np.random.Generator | int | None = None,
    executor: Executor | None = None,
) -> tuple[Puzzle, ...]:
    """Generate independent puzzles, optionally across an executor.

    ``seeds`` gives one string seed per puzzle and overrides ``count``.
    Without seeds, per-puzzle integer seeds are split off ``rng``."""
    difficulty = Difficulty.parse(difficulty)
    if seeds is not None:
        jobs = [(s, None) for s in seeds]
    else:
        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng)
        rng_seeds = rng.integers(0, 2**32 - 1, size=count).tolist()
        jobs = [(None, s) for s in rng_seeds]

    job = partial(_generate_one, difficulty)
    seed_args = [s for s, _ in jobs]
    rng_args = [r for _, r in jobs]
    if executor is None:
        return tuple(map(job, seed_args, rng_args))
    return tuple(executor.map(job, seed_args, rng_args))
