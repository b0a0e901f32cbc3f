from sudoku_engine.board import grid, rules
from sudoku_engine.board.grid import Grid, Position, as_grid, copy_grid, empty_grid
from sudoku_engine.board.rules import is_valid_placement

__all__ = [
    "Grid",
    "Position",
    "as_grid",
    "copy_grid",
    "empty_grid",
    "grid",
    "is_valid_placement",
    "rules",
]
