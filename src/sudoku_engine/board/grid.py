from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Final, NamedTuple

import numpy as np
import numpy.typing as npt

__all__ = [
    "BOX_SIZE",
    "DIGITS",
    "EMPTY",
    "SIZE",
    "Grid",
    "Position",
    "all_positions",
    "as_grid",
    "box_index",
    "box_origin",
    "cells_with_value",
    "check_grid",
    "check_digit",
    "check_position",
    "copy_grid",
    "count_filled",
    "empty_grid",
    "format_grid",
    "is_complete",
    "parse_grid",
    "peer_mask",
    "render_grid",
]

SIZE: Final[int] = 9
BOX_SIZE: Final[int] = 3
EMPTY: Final[int] = 0
DIGITS: Final[tuple[int, ...]] = tuple(range(1, SIZE + 1))

Grid = npt.NDArray[np.int8]


class Position(NamedTuple):
    row: int
    col: int


def empty_grid() -> Grid:
    return np.zeros((SIZE, SIZE), dtype=np.int8)


def as_grid(values: Sequence[Sequence[int | None]] | npt.ArrayLike) -> Grid:
    """Build a fresh grid from nested rows or an array, ``None`` meaning empty."""
    if isinstance(values, np.ndarray):
        raw = values
    else:
        raw = np.array([[EMPTY if v is None else v for v in row] for row in values])
    check_grid(raw)
    return raw.astype(np.int8, copy=True)


def check_grid(grid: npt.NDArray) -> None:
    """Raise ``ValueError`` unless ``grid`` is a 9x9 integer array of 0..9."""
    if grid.shape != (SIZE, SIZE):
        msg = f"Grid must have shape ({SIZE}, {SIZE}), got {grid.shape}."
        raise ValueError(msg)
    if not np.issubdtype(grid.dtype, np.integer):
        msg = f"Grid values must be integers, got dtype {grid.dtype}."
        raise ValueError(msg)
    if grid.min() < EMPTY or grid.max() > SIZE:
        msg = f"Grid values must be in range 0..{SIZE}."
        raise ValueError(msg)


def copy_grid(grid: Grid) -> Grid:
    return np.array(grid, dtype=np.int8, copy=True)


def check_position(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        msg = f"Position ({row}, {col}) is outside the {SIZE}x{SIZE} grid."
        raise ValueError(msg)


def check_digit(value: int) -> None:
    if value not in DIGITS:
        msg = f"Digit must be in range 1..{SIZE}, got {value!r}."
        raise ValueError(msg)


def box_origin(row: int, col: int) -> Position:
    return Position(BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE))


def box_index(row: int, col: int) -> int:
    return BOX_SIZE * (row // BOX_SIZE) + col // BOX_SIZE


def _build_peer_masks() -> npt.NDArray[np.bool_]:
    masks = np.zeros((SIZE, SIZE, SIZE, SIZE), dtype=bool)
    for r in range(SIZE):
        for c in range(SIZE):
            r0, c0 = box_origin(r, c)
            masks[r, c, r, :] = True
            masks[r, c, :, c] = True
            masks[r, c, r0 : r0 + BOX_SIZE, c0 : c0 + BOX_SIZE] = True
            masks[r, c, r, c] = False
    masks.setflags(write=False)
    return masks


_PEER_MASKS: Final = _build_peer_masks()


def peer_mask(row: int, col: int) -> npt.NDArray[np.bool_]:
    """Boolean (9, 9) mask of the 20 cells sharing a row, column, or box
    with (row, col), the cell itself excluded."""
    return _PEER_MASKS[row, col]


def all_positions() -> list[Position]:
    """The 81 positions in row-major order."""
    return [Position(r, c) for r in range(SIZE) for c in range(SIZE)]


def count_filled(grid: Grid) -> int:
    return int(np.count_nonzero(grid))


def is_complete(grid: Grid) -> bool:
    return count_filled(grid) == SIZE * SIZE


def cells_with_value(grid: Grid, value: int) -> list[Position]:
    if value == EMPTY:
        return []
    return [Position(int(r), int(c)) for r, c in np.argwhere(grid == value)]


def _iter_cells(text: str) -> Iterator[int]:
    for ch in text:
        if ch in ".0":
            yield EMPTY
        elif ch.isdigit():
            yield int(ch)
        elif not ch.isspace() and ch not in "|-+":
            msg = f"Unexpected character {ch!r} in grid text."
            raise ValueError(msg)


def parse_grid(text: str) -> Grid:
    """Parse 81 cells written as digits, with ``0`` or ``.`` for empty.

    Whitespace and box-drawing characters (``|``, ``-``, ``+``) are ignored,
    so the output of :func:`render_grid` parses back."""
    cells = list(_iter_cells(text))
    if len(cells) != SIZE * SIZE:
        msg = f"Expected {SIZE * SIZE} cells, got {len(cells)}."
        raise ValueError(msg)
    return as_grid(np.array(cells).reshape(SIZE, SIZE))


def format_grid(grid: Grid, empty: str = ".") -> str:
    return "".join(empty if v == EMPTY else str(int(v)) for v in grid.flatten())


def _render_row(row: Iterable[int], empty: str) -> str:
    chars = [empty if v == EMPTY else str(int(v)) for v in row]
    boxes = (" ".join(chars[i : i + BOX_SIZE]) for i in range(0, SIZE, BOX_SIZE))
    return " | ".join(boxes)


def render_grid(grid: Grid, empty: str = ".") -> str:
    lines = []
    for r in range(SIZE):
        if r and r % BOX_SIZE == 0:
            lines.append("------+-------+------")
        lines.append(_render_row(grid[r], empty))
    return "\n".join(lines)
