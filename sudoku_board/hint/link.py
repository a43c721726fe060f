"""Chain link hint between two (cell, candidate) positions."""

from dataclasses import dataclass

from sudoku_board.types import Digit, LinkKind


@dataclass(frozen=True)
class HintLink:
    """Directed chain edge.

    Attributes:
        from_row: Row of the source cell.
        from_col: Column of the source cell.
        to_row: Row of the target cell.
        to_col: Column of the target cell.
        digit: Candidate the link refers to, ``1..9``.
        kind: Strong (solid) or weak (dashed).
    """

    from_row: int
    from_col: int
    to_row: int
    to_col: int
    digit: Digit
    kind: LinkKind = LinkKind.STRONG
