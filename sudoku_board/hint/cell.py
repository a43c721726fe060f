"""Cell hint.

Per-cell instructions refine (and always override) area highlights. Actions
keep the solver's wire representation: ``select``/``unselect`` hold a single
digit and the candidate lists are comma separated strings such as ``"1,4,7"``.
They are only interpreted by :mod:`sudoku_board.annotations`.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CellActions:
    """Raw action strings attached to a cell hint.

    Attributes:
        select: Digit about to be placed in the cell.
        unselect: Digit about to be removed from the cell.
        highlight: Candidates to highlight.
        add: Candidates to add.
        remove: Candidates to eliminate.
    """

    select: str = ""
    unselect: str = ""
    highlight: str = ""
    add: str = ""
    remove: str = ""


@dataclass(frozen=True)
class HintCell:
    """Single cell highlight.

    Attributes:
        row: Row, ``0..8``.
        column: Column, ``0..8``.
        color: Abstract hint color name.
        fill: Fill the cell if True, otherwise draw a colored border.
        actions: Digit / candidate instructions.
    """

    row: int
    column: int
    color: str
    fill: bool = True
    actions: CellActions = field(default_factory=CellActions)
