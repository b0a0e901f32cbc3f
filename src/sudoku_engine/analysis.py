from __future__ import annotations

from enum import Enum
from logging import getLogger
from typing import NamedTuple

import numpy as np

from sudoku_engine.board.grid import (
    BOX_SIZE,
    DIGITS,
    EMPTY,
    SIZE,
    Grid,
    Position,
    box_origin,
    check_digit,
    check_position,
    is_complete,
    peer_mask,
)
from sudoku_engine.board.rules import is_valid_placement
from sudoku_engine.engine.solver import first_empty

__all__ = [
    "ConflictKind",
    "ConflictReport",
    "check_solution",
    "check_win",
    "find_all_conflicts",
    "find_conflicts",
    "get_candidates",
    "get_related_cells",
    "is_valid_move",
    "is_valid_pencil_mark",
    "next_hint",
]


logger = getLogger(__name__)


class ConflictKind(str, Enum):
    ROW = "row"
    COLUMN = "column"
    BOX = "box"
    NONE = "none"


class ConflictReport(NamedTuple):
    cells: frozenset[Position]
    kinds: frozenset[ConflictKind]

    @property
    def has_conflict(self) -> bool:
        return bool(self.cells)

    @property
    def conflict_type(self) -> ConflictKind:
        """The first violated unit in row, column, box order."""
        for kind in (ConflictKind.ROW, ConflictKind.COLUMN, ConflictKind.BOX):
            if kind in self.kinds:
                return kind
        return ConflictKind.NONE


def find_conflicts(grid: Grid, row: int, col: int, value: int) -> ConflictReport:
    """Cells other than ``(row, col)`` already holding ``value`` in the same
    row, column, or box. Works on grids that already contain clashes."""
    check_position(row, col)
    check_digit(value)
    cells: set[Position] = set()
    kinds: set[ConflictKind] = set()

    for c in range(SIZE):
        if c != col and grid[row, c] == value:
            cells.add(Position(row, c))
            kinds.add(ConflictKind.ROW)

    for r in range(SIZE):
        if r != row and grid[r, col] == value:
            cells.add(Position(r, col))
            kinds.add(ConflictKind.COLUMN)

    r0, c0 = box_origin(row, col)
    for r in range(r0, r0 + BOX_SIZE):
        for c in range(c0, c0 + BOX_SIZE):
            if (r, c) != (row, col) and grid[r, c] == value:
                cells.add(Position(r, c))
                kinds.add(ConflictKind.BOX)

    return ConflictReport(cells=frozenset(cells), kinds=frozenset(kinds))


def find_all_conflicts(grid: Grid) -> set[Position]:
    """Every filled cell that shares its digit with a peer."""
    conflicts: set[Position] = set()
    for r in range(SIZE):
        for c in range(SIZE):
            value = int(grid[r, c])
            if value == EMPTY:
                continue
            report = find_conflicts(grid, r, c, value)
            if report.has_conflict:
                conflicts.add(Position(r, c))
                conflicts.update(report.cells)
    return conflicts


def get_candidates(grid: Grid, row: int, col: int) -> set[int]:
    check_position(row, col)
    if grid[row, col] != EMPTY:
        return set()
    used = {int(v) for v in grid[peer_mask(row, col)]}
    return set(DIGITS) - used


def get_related_cells(row: int, col: int) -> set[Position]:
    check_position(row, col)
    return {Position(int(r), int(c)) for r, c in np.argwhere(peer_mask(row, col))}


def is_valid_move(grid: Grid, row: int, col: int, value: int) -> bool:
    """Whether writing ``value`` at ``(row, col)`` clashes with no peer,
    whatever the cell currently holds."""
    return is_valid_placement(grid, row, col, value)


def is_valid_pencil_mark(grid: Grid, row: int, col: int, value: int) -> bool:
    return is_valid_placement(grid, row, col, value)


def check_solution(grid: Grid, solution: Grid) -> bool:
    return bool(np.array_equal(grid, solution))


def check_win(grid: Grid, solution: Grid) -> bool:
    return is_complete(grid) and check_solution(grid, solution)


def next_hint(grid: Grid, solution: Grid) -> tuple[Position, int] | None:
    """The first empty cell in row-major order with its digit from ``solution``.

    Returns ``None`` once the grid is full."""
    pos = first_empty(grid)
    if pos is None:
        return None
    digit = int(solution[pos.row, pos.col])
    logger.debug("Hint: %d at r%dc%d", digit, pos.row, pos.col)
    return pos, digit
