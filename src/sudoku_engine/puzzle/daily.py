from __future__ import annotations

import datetime as dt
from logging import getLogger

import numpy as np

from sudoku_engine.puzzle.generator import Difficulty, Puzzle, generate_puzzle
from sudoku_engine.puzzle.rng import hash_seed

__all__ = ["daily_seed", "daily_puzzle", "parse_date", "todays_puzzle"]


logger = getLogger(__name__)


def parse_date(value: dt.date | str) -> dt.date:
    """Accept a date, a datetime, or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(value.strip())
    except ValueError:
        msg = f"Invalid date {value!r}, expected YYYY-MM-DD."
        raise ValueError(msg) from None


def daily_seed(date: dt.date | str, difficulty: Difficulty | str) -> str:
    """Seed shared by every player for one day and difficulty.

    ``"YYYY-MM-DD-DIFFICULTY"`` is folded to a 32-bit hash and written in
    base 36."""
    base = f"{parse_date(date).isoformat()}-{Difficulty.parse(difficulty).value}"
    return np.base_repr(abs(hash_seed(base)), base=36).lower()


def daily_puzzle(date: dt.date | str, difficulty: Difficulty | str) -> Puzzle:
    date, difficulty = parse_date(date), Difficulty.parse(difficulty)
    seed = daily_seed(date, difficulty)
    logger.info("Daily %s puzzle for %s, seed %s", difficulty.value, date, seed)
    return generate_puzzle(difficulty, seed=seed)


def todays_puzzle(
    difficulty: Difficulty | str, today: dt.date | None = None
) -> Puzzle:
    if today is None:
        today = dt.datetime.now(dt.timezone.utc).date()
    return daily_puzzle(today, difficulty)
