import numpy as np
import pytest

from sudoku_engine.board.grid import (
    Position,
    all_positions,
    as_grid,
    box_index,
    box_origin,
    cells_with_value,
    check_digit,
    check_position,
    copy_grid,
    count_filled,
    empty_grid,
    format_grid,
    is_complete,
    parse_grid,
    peer_mask,
    render_grid,
)


class TestGridConstruction:
    def test_empty_grid(self):
        grid = empty_grid()
        assert grid.shape == (9, 9)
        assert grid.dtype == np.int8
        assert count_filled(grid) == 0

    def test_as_grid_treats_none_as_empty(self):
        rows = [[None] * 9 for _ in range(9)]
        rows[4][4] = 7
        grid = as_grid(rows)
        assert grid[4, 4] == 7
        assert count_filled(grid) == 1

    def test_as_grid_copies_input(self, solved):
        grid = as_grid(solved)
        grid[0, 0] = 0
        assert solved[0, 0] == 1

    @pytest.mark.parametrize(
        "values",
        [
            np.zeros((8, 9), dtype=int),
            np.zeros((9, 10), dtype=int),
            [[0] * 9] * 3,
        ],
    )
    def test_as_grid_rejects_wrong_shape(self, values):
        with pytest.raises(ValueError, match="shape"):
            as_grid(values)

    def test_as_grid_rejects_out_of_range(self):
        values = np.zeros((9, 9), dtype=int)
        values[2, 3] = 10
        with pytest.raises(ValueError, match="range"):
            as_grid(values)

    def test_as_grid_rejects_floats(self):
        with pytest.raises(ValueError, match="integers"):
            as_grid(np.full((9, 9), 1.5))

    def test_copy_is_independent(self, solved):
        duplicate = copy_grid(solved)
        duplicate[8, 8] = 0
        assert solved[8, 8] == 8


class TestGeometry:
    def test_positions_are_row_major(self):
        positions = all_positions()
        assert len(positions) == 81
        assert positions[0] == Position(0, 0)
        assert positions[1] == Position(0, 1)
        assert positions[9] == Position(1, 0)

    def test_box_origin_and_index(self):
        assert box_origin(4, 7) == Position(3, 6)
        assert box_index(0, 0) == 0
        assert box_index(4, 4) == 4
        assert box_index(8, 2) == 6

    def test_peer_mask_has_twenty_cells(self):
        for row, col in [(0, 0), (4, 4), (8, 3)]:
            mask = peer_mask(row, col)
            assert mask.sum() == 20
            assert not mask[row, col]

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, 9), (9, 9)])
    def test_check_position(self, row, col):
        with pytest.raises(ValueError, match="outside"):
            check_position(row, col)

    @pytest.mark.parametrize("value", [0, 10, -3])
    def test_check_digit(self, value):
        with pytest.raises(ValueError, match="Digit"):
            check_digit(value)


class TestQueries:
    def test_is_complete(self, solved, empty):
        assert is_complete(solved)
        assert not is_complete(empty)

    def test_cells_with_value(self, solved):
        cells = cells_with_value(solved, 5)
        assert len(cells) == 9
        assert all(solved[r, c] == 5 for r, c in cells)

    def test_cells_with_empty_value(self, solved):
        assert cells_with_value(solved, 0) == []


class TestText:
    def test_parse_accepts_dots_and_zeros(self):
        text = "." * 40 + "5" + "0" * 40
        grid = parse_grid(text)
        assert grid[4, 4] == 5
        assert count_filled(grid) == 1

    def test_parse_rejects_short_text(self):
        with pytest.raises(ValueError, match="81"):
            parse_grid("123")

    def test_parse_rejects_letters(self):
        with pytest.raises(ValueError, match="Unexpected"):
            parse_grid("x" * 81)

    def test_format_grid(self, classic_puzzle):
        line = format_grid(classic_puzzle)
        assert len(line) == 81
        assert line.startswith("53..7....")

    def test_rendered_grid_parses_back(self, classic_puzzle):
        text = render_grid(classic_puzzle)
        assert len(text.splitlines()) == 11
        assert np.array_equal(parse_grid(text), classic_puzzle)
