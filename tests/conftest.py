import numpy as np
import pytest

from sudoku_engine.board.grid import Grid, as_grid, parse_grid

SOLVED_ROWS = [
    [1, 2, 3, 4, 5, 6, 7, 8, 9],
    [4, 5, 6, 7, 8, 9, 1, 2, 3],
    [7, 8, 9, 1, 2, 3, 4, 5, 6],
    [2, 3, 4, 5, 6, 7, 8, 9, 1],
    [5, 6, 7, 8, 9, 1, 2, 3, 4],
    [8, 9, 1, 2, 3, 4, 5, 6, 7],
    [3, 4, 5, 6, 7, 8, 9, 1, 2],
    [6, 7, 8, 9, 1, 2, 3, 4, 5],
    [9, 1, 2, 3, 4, 5, 6, 7, 8],
]

# A well-known puzzle with a single solution.
CLASSIC_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)
CLASSIC_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def solved() -> Grid:
    return as_grid(SOLVED_ROWS)


@pytest.fixture
def empty() -> Grid:
    return np.zeros((9, 9), dtype=np.int8)


@pytest.fixture
def classic_puzzle() -> Grid:
    return parse_grid(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution() -> Grid:
    return parse_grid(CLASSIC_SOLUTION)
