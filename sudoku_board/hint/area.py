"""Area hint.

An area names a whole row, column or 3x3 block. It is the coarsest highlight a
hint step can carry and expands to nine cells during annotation resolution.
"""

from dataclasses import dataclass

from sudoku_board.types import AreaKind


@dataclass(frozen=True)
class HintArea:
    """Row / column / block highlight.

    Attributes:
        kind: Which family of house ``index`` refers to.
        index: House number, ``0..8``. Blocks count left to right, top to bottom.
        color: Abstract hint color name.
    """

    kind: AreaKind
    index: int
    color: str
