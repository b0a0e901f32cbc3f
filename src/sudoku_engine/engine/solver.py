from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from logging import getLogger
from typing import TYPE_CHECKING

from sudoku_engine.board.grid import (
    DIGITS,
    EMPTY,
    SIZE,
    Grid,
    Position,
    box_index,
    check_grid,
    copy_grid,
)
from sudoku_engine.board.rules import is_consistent

if TYPE_CHECKING:
    from sudoku_engine.puzzle.rng import RandomSource

__all__ = [
    "count_solutions",
    "first_empty",
    "has_unique_solution",
    "solution_of",
    "solve",
]


logger = getLogger(__name__)


class _Search:
    """Backtracking state over one grid.

    Used digits per row, column, and box are kept as bitmasks so a placement
    test is a single lookup. Empty cells are visited in row-major order.
    Every trial placement is undone on leaving :meth:`_trial`, so the search
    state always returns to the givens."""

    def __init__(self, grid: Grid, rng: RandomSource | None = None) -> None:
        self.rng = rng
        self.rows = [0] * SIZE
        self.cols = [0] * SIZE
        self.boxes = [0] * SIZE
        self.empties: list[tuple[int, int, int]] = []
        self.assigned: list[int] = []
        for r in range(SIZE):
            for c in range(SIZE):
                value = int(grid[r, c])
                b = box_index(r, c)
                if value == EMPTY:
                    self.empties.append((r, c, b))
                else:
                    bit = 1 << value
                    self.rows[r] |= bit
                    self.cols[c] |= bit
                    self.boxes[b] |= bit

    def _digit_order(self) -> list[int]:
        digits = list(DIGITS)
        if self.rng is not None:
            self.rng.shuffle(digits)
        return digits

    def _allowed(self, r: int, c: int, b: int, digit: int) -> bool:
        return not (self.rows[r] | self.cols[c] | self.boxes[b]) & (1 << digit)

    @contextmanager
    def _trial(self, r: int, c: int, b: int, digit: int) -> Iterator[None]:
        bit = 1 << digit
        self.rows[r] |= bit
        self.cols[c] |= bit
        self.boxes[b] |= bit
        self.assigned.append(digit)
        try:
            yield
        finally:
            self.assigned.pop()
            self.rows[r] &= ~bit
            self.cols[c] &= ~bit
            self.boxes[b] &= ~bit

    def first_solution(self, index: int = 0) -> list[int] | None:
        """Digits for every empty cell of the first complete assignment."""
        if index == len(self.empties):
            return list(self.assigned)

        r, c, b = self.empties[index]
        for digit in self._digit_order():
            if self._allowed(r, c, b, digit):
                with self._trial(r, c, b, digit):
                    found = self.first_solution(index + 1)
                if found is not None:
                    return found
        return None

    def count(self, limit: int, index: int = 0) -> int:
        if index == len(self.empties):
            return 1

        r, c, b = self.empties[index]
        total = 0
        for digit in DIGITS:
            if self._allowed(r, c, b, digit):
                with self._trial(r, c, b, digit):
                    total += self.count(limit - total, index + 1)
                if total >= limit:
                    return total
        return total

    def write(self, grid: Grid, digits: list[int]) -> None:
        for (r, c, _b), digit in zip(self.empties, digits, strict=True):
            grid[r, c] = digit


def solve(grid: Grid, rng: RandomSource | None = None) -> bool:
    """Fill ``grid`` in place with a solution.

    Returns ``False`` and leaves ``grid`` untouched when no completion exists.
    Digits are tried in ascending order unless ``rng`` supplies a fresh
    shuffled order for each cell."""
    check_grid(grid)
    if not is_consistent(grid):
        logger.debug("Givens conflict, grid is unsatisfiable")
        return False

    search = _Search(grid, rng)
    digits = search.first_solution()
    if digits is None:
        return False
    search.write(grid, digits)
    return True


def count_solutions(grid: Grid, limit: int = 2) -> int:
    """Count completions of ``grid``, stopping once ``limit`` are found.

    The grid is not modified."""
    check_grid(grid)
    if limit < 1:
        msg = f"limit must be positive, got {limit}."
        raise ValueError(msg)
    if not is_consistent(grid):
        return 0
    return _Search(grid).count(limit)


def has_unique_solution(grid: Grid) -> bool:
    return count_solutions(grid, 2) == 1


def solution_of(grid: Grid, rng: RandomSource | None = None) -> Grid | None:
    solved = copy_grid(grid)
    return solved if solve(solved, rng) else None


def first_empty(grid: Grid) -> Position | None:
    """First empty cell in row-major order."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r, c] == EMPTY:
                return Position(r, c)
    return None
