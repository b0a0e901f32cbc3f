from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from concurrent.futures import Executor

    import numpy as np

from sudoku_engine.puzzle import daily, generator, rng
from sudoku_engine.puzzle.generator import Difficulty, Puzzle

__all__ = [
    "Difficulty",
    "Puzzle",
    "daily",
    "generator",
    "make_puzzle",
    "make_puzzle_batch",
    "rng",
]


logger = getLogger(__name__)


def make_puzzle(
    difficulty: Difficulty | str,
    seed: str | None = None,
    *,
    date: str | None = None,
) -> Puzzle:
    """One puzzle: the daily puzzle when ``date`` is given, else seeded or random."""
    if date is not None:
        if seed is not None:
            msg = "Pass either a seed or a daily date, not both."
            raise ValueError(msg)
        return daily.daily_puzzle(date, difficulty)
    return generator.generate_puzzle(difficulty, seed=seed)


def make_puzzle_batch(
    count: int,
    difficulty: Difficulty | str,
    rng: np.random.Generator | int | None = None,
    executor: Executor | None = None,
) -> tuple[Puzzle, ...]:
    puzzles = generator.generate_puzzles(count, difficulty, rng=rng, executor=executor)
    logger.debug("Example batch puzzle:\n%s", puzzles[0].initial if puzzles else None)
    return puzzles
