"""Hint annotation resolution.

Merges a hint step's area-level and cell-level instructions into a single
``PMap[CellIndex, CellAnnotation]`` (at most 81 entries) consumed by the
background and content compositors.

Override rule:

* Pass 1 walks ``areas`` and inserts a filled annotation with the area's color
  for each member cell that has no entry yet (the first area to reach a cell
  wins).
* Pass 2 walks ``cells`` and inserts or overwrites the entry for each cell
  hint, so per-cell instructions always take precedence over areas.

Action strings are parsed here; digits outside ``1..9`` and unparseable
tokens are dropped. Entries addressing cells outside the grid are skipped and
logged.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from sudoku_board.hint import HintCell, HintStep
from sudoku_board.types import BLOCK_SIZE, GRID_SIZE, AreaKind, CellIndex, Digit
from sudoku_board.utils.grid import cell_index, column_of, is_in_bounds, row_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellAnnotation:
    """Resolved hint state of one cell.

    Attributes:
        row: Row, ``0..8``.
        column: Column, ``0..8``.
        color: Abstract hint color name.
        fill: Translucent fill if True, colored border otherwise.
        select_digit: Digit about to be placed, if any.
        unselect_digit: Digit about to be removed, if any.
        highlight_digits: Candidates drawn in the selection color.
        add_digits: Candidates drawn in the success color.
        remove_digits: Candidates drawn in the error color.
    """

    row: int
    column: int
    color: str
    fill: bool
    select_digit: Optional[Digit] = None
    unselect_digit: Optional[Digit] = None
    highlight_digits: Tuple[Digit, ...] = ()
    add_digits: Tuple[Digit, ...] = ()
    remove_digits: Tuple[Digit, ...] = ()

    def has_candidates(self) -> bool:
        return bool(self.highlight_digits or self.add_digits or self.remove_digits)


AnnotationMap = PMap[CellIndex, CellAnnotation]


def parse_digit(text: str) -> Optional[Digit]:
    """Parse a single digit ``1..9``; anything else yields ``None``."""
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if 1 <= value <= 9 else None


def parse_digit_list(text: str) -> Tuple[Digit, ...]:
    """Parse a comma separated digit list, keeping order and dropping junk."""
    if not text:
        return ()
    digits: List[Digit] = []
    for token in text.split(","):
        digit = parse_digit(token)
        if digit is not None:
            digits.append(digit)
    return tuple(digits)


def area_indices(kind: AreaKind, index: int) -> List[CellIndex]:
    """Return the nine cell indices of a row, column or block."""
    if kind == AreaKind.ROW:
        return [cell_index(index, c) for c in range(GRID_SIZE)]
    if kind == AreaKind.COLUMN:
        return [cell_index(r, index) for r in range(GRID_SIZE)]
    top = (index // BLOCK_SIZE) * BLOCK_SIZE
    left = (index % BLOCK_SIZE) * BLOCK_SIZE
    return [
        cell_index(top + r, left + c)
        for r in range(BLOCK_SIZE)
        for c in range(BLOCK_SIZE)
    ]


def annotate_cell(cell: HintCell) -> CellAnnotation:
    """Build the annotation for a single cell hint."""
    actions = cell.actions
    return CellAnnotation(
        row=cell.row,
        column=cell.column,
        color=cell.color,
        fill=cell.fill,
        select_digit=parse_digit(actions.select) if actions.select else None,
        unselect_digit=parse_digit(actions.unselect) if actions.unselect else None,
        highlight_digits=parse_digit_list(actions.highlight),
        add_digits=parse_digit_list(actions.add),
        remove_digits=parse_digit_list(actions.remove),
    )


def resolve_annotations(hint_step: Optional[HintStep]) -> AnnotationMap:
    """Merge area and cell instructions into one annotation per cell."""
    if hint_step is None:
        return pmap()

    annotations: Dict[CellIndex, CellAnnotation] = {}

    for area in hint_step.areas:
        if not 0 <= area.index < GRID_SIZE:
            logger.warning("Ignoring %s area with index %d", area.kind, area.index)
            continue
        for idx in area_indices(area.kind, area.index):
            if idx not in annotations:
                annotations[idx] = CellAnnotation(
                    row=row_of(idx),
                    column=column_of(idx),
                    color=area.color,
                    fill=True,
                )

    for cell in hint_step.cells:
        if not is_in_bounds(cell.row, cell.column):
            logger.warning("Ignoring cell hint at (%d, %d)", cell.row, cell.column)
            continue
        annotations[cell_index(cell.row, cell.column)] = annotate_cell(cell)

    return pmap(annotations)
