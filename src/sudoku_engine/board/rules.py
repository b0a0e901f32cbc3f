from __future__ import annotations

from sudoku_engine.board.grid import (
    BOX_SIZE,
    EMPTY,
    SIZE,
    Grid,
    box_origin,
    check_digit,
    check_position,
    is_complete,
    peer_mask,
)

__all__ = [
    "box_values",
    "col_values",
    "is_consistent",
    "is_solved",
    "is_valid_placement",
    "row_values",
]


def row_values(grid: Grid, row: int) -> set[int]:
    return {int(v) for v in grid[row, :]} - {EMPTY}


def col_values(grid: Grid, col: int) -> set[int]:
    return {int(v) for v in grid[:, col]} - {EMPTY}


def box_values(grid: Grid, row: int, col: int) -> set[int]:
    r0, c0 = box_origin(row, col)
    return {int(v) for v in grid[r0 : r0 + BOX_SIZE, c0 : c0 + BOX_SIZE].flat} - {EMPTY}


def _occurs_elsewhere(grid: Grid, row: int, col: int, value: int) -> bool:
    return bool((grid[peer_mask(row, col)] == value).any())


def is_valid_placement(grid: Grid, row: int, col: int, value: int) -> bool:
    """Whether ``value`` may sit at ``(row, col)`` without repeating in its
    row, column, or box. The cell itself is never counted as a clash, so an
    already placed digit can be re-validated in place."""
    check_position(row, col)
    check_digit(value)
    return not _occurs_elsewhere(grid, row, col, value)


def is_consistent(grid: Grid) -> bool:
    """True when no filled cell repeats a digit within any unit."""
    for r in range(SIZE):
        for c in range(SIZE):
            value = int(grid[r, c])
            if value != EMPTY and _occurs_elsewhere(grid, r, c, value):
                return False
    return True


def is_solved(grid: Grid) -> bool:
    return is_complete(grid) and is_consistent(grid)
