"""Grid addressing / geometry helpers.

Pure functions converting between flat cell indices, ``(row, column)`` pairs
and pixel coordinates. Pixel helpers take ``cell_size`` as a float so that a
canvas whose side is not a multiple of nine still spans the whole image.
"""

from typing import Tuple

from sudoku_board.types import (
    BLOCK_SIZE,
    CELL_COUNT,
    GRID_SIZE,
    CellIndex,
    Digit,
    Point,
)

PixelBox = Tuple[int, int, int, int]


def row_of(index: CellIndex) -> int:
    return index // GRID_SIZE


def column_of(index: CellIndex) -> int:
    return index % GRID_SIZE


def block_of(index: CellIndex) -> int:
    """Return the 3x3 block number (0 top-left, 8 bottom-right)."""
    return (row_of(index) // BLOCK_SIZE) * BLOCK_SIZE + column_of(index) // BLOCK_SIZE


def cell_index(row: int, column: int) -> CellIndex:
    return row * GRID_SIZE + column


def is_in_bounds(row: int, column: int) -> bool:
    """Return True if ``(row, column)`` addresses a cell of the 9x9 grid."""
    return 0 <= row < GRID_SIZE and 0 <= column < GRID_SIZE


def is_valid_index(index: CellIndex) -> bool:
    return 0 <= index < CELL_COUNT


def shares_house(a: CellIndex, b: CellIndex) -> bool:
    """Return True if two cells share a row, a column or a block."""
    return (
        row_of(a) == row_of(b)
        or column_of(a) == column_of(b)
        or block_of(a) == block_of(b)
    )


def to_pixel(value: float) -> int:
    return int(round(value))


def cell_box(row: int, column: int, cell_size: float) -> PixelBox:
    """Return the ``(x0, y0, x1, y1)`` pixel rectangle of a cell.

    ``x1``/``y1`` are exclusive, i.e. the first pixel of the neighbouring cell.
    """
    return (
        to_pixel(column * cell_size),
        to_pixel(row * cell_size),
        to_pixel((column + 1) * cell_size),
        to_pixel((row + 1) * cell_size),
    )


def cell_center(row: int, column: int, cell_size: float) -> Point:
    return ((column + 0.5) * cell_size, (row + 0.5) * cell_size)


def candidate_slot(digit: Digit) -> Tuple[int, int]:
    """Return the ``(sub_row, sub_column)`` of a candidate inside its cell."""
    return (digit - 1) // BLOCK_SIZE, (digit - 1) % BLOCK_SIZE


def candidate_center(row: int, column: int, digit: Digit, cell_size: float) -> Point:
    """Return the center of ``digit``'s pencilmark slot within a cell."""
    sub_row, sub_column = candidate_slot(digit)
    slot = cell_size / BLOCK_SIZE
    return (
        column * cell_size + (sub_column + 0.5) * slot,
        row * cell_size + (sub_row + 0.5) * slot,
    )
