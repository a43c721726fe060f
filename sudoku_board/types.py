"""Common type aliases and enumerations.

The board is always a 9x9 grid addressed either by ``(row, column)`` pairs or
by a flat ``CellIndex`` in ``0..80`` (row-major). Hint payloads speak in
abstract color names (:class:`HintColor`); the renderer maps them to concrete
palette values, see :mod:`sudoku_board.palette`.
"""

from enum import StrEnum, auto
from typing import Tuple

CellIndex = int
Digit = int
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]
Point = Tuple[float, float]

GRID_SIZE = 9
BLOCK_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE


class AreaKind(StrEnum):
    """Coarse highlight targets covering nine cells each."""

    ROW = auto()
    COLUMN = auto()
    BLOCK = auto()


class LinkKind(StrEnum):
    """Chain edge flavor; weak links render dashed, strong links solid."""

    STRONG = auto()
    WEAK = auto()


class HintColor(StrEnum):
    """Abstract hint color names understood by the palette mapping."""

    BLUE = auto()
    GREEN = auto()
    YELLOW = auto()
    ORANGE = auto()
    RED = auto()
    GRAY = auto()
    WHITE = auto()
    BLACK = auto()
