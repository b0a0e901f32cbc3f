import pytest

from sudoku_engine import main as run
from sudoku_engine.board.grid import count_filled, format_grid, parse_grid
from sudoku_engine.cli import main
from sudoku_engine.puzzle.daily import daily_puzzle


def test_seeded_line_output(capsys):
    assert main(["--seed", "cli", "-d", "easy", "--format", "line"]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out) == 81
    assert 36 <= count_filled(parse_grid(out)) <= 40


def test_line_output_with_solution(capsys):
    assert main(["--seed", "cli", "-d", "EASY", "--format", "line", "--solution"]) == 0
    puzzle_text, solution_text = capsys.readouterr().out.split()
    assert count_filled(parse_grid(solution_text)) == 81
    assert len(puzzle_text) == 81


def test_daily_output_matches_library(capsys):
    assert main(["--daily", "2024-01-01", "-d", "EASY", "--format", "line"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == format_grid(daily_puzzle("2024-01-01", "EASY").initial)


def test_pretty_output(capsys):
    assert main(["--seed", "pretty", "-d", "EASY"]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert len(lines) == 11
    assert "------+-------+------" in lines


def test_invalid_date_reports_error(capsys):
    assert main(["--daily", "2024-02-31"]) == 2
    assert "Invalid date" in capsys.readouterr().err


def test_count_with_seed_is_rejected(capsys):
    assert main(["--seed", "x", "-n", "3"]) == 2
    assert "error" in capsys.readouterr().err


def test_unknown_difficulty_exits():
    with pytest.raises(SystemExit):
        main(["-d", "impossible"])


def test_seed_and_daily_are_exclusive():
    with pytest.raises(SystemExit):
        main(["--seed", "a", "--daily", "2024-01-01"])


def test_main_rejects_zero_count():
    with pytest.raises(ValueError, match="count"):
        run(count=0)


def test_seed_with_rng_seed_is_rejected(capsys):
    assert main(["--seed", "abc", "-d", "EASY", "--format", "line", "--rng-seed", "5"]) == 2
    captured = capsys.readouterr()
    assert "error" in captured.err
    assert captured.out == ""


@pytest.mark.parametrize(
    "kwargs", [{"seed": "abc", "rng_seed": 5}, {"date": "2024-01-01", "rng_seed": 5}]
)
def test_main_rejects_fixed_puzzle_with_rng_seed(kwargs):
    with pytest.raises(ValueError, match="rng-seed"):
        run(**kwargs)
