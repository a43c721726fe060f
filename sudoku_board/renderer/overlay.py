"""Group and link overlays.

Both overlays are painted after the grid lines so they sit on top of the
board:

* Groups get a translucent fill, an outline that follows only the outer
  perimeter of the (possibly irregular or disconnected) cell set, and an
  optional name badge on the first listed cell.
* Links are straight strokes between two anchors. A cell holding a digit
  anchors at its center, an empty cell anchors at the candidate slot of the
  link's digit. Weak links are dashed, strong links solid.

The geometry (:func:`outline_segments`, :func:`link_anchor`) is kept separate
from the drawing so it can be checked without decoding pixels.
"""

import logging
from enum import StrEnum, auto
from typing import Dict, List, Sequence, Tuple

from PIL import ImageDraw

from sudoku_board.hint import HintGroup, HintLink
from sudoku_board.palette import Palette, hint_color, with_alpha
from sudoku_board.puzzle import PuzzleState
from sudoku_board.types import GRID_SIZE, Digit, LinkKind, Point
from sudoku_board.utils.grid import (
    candidate_center,
    cell_box,
    cell_center,
    cell_index,
    is_in_bounds,
    to_pixel,
)
from sudoku_board.utils.image import draw_dashed_line, load_font

logger = logging.getLogger(__name__)

GROUP_FILL_ALPHA = 0.2
GROUP_OUTLINE_WIDTH = 3
LABEL_FONT_SIZE = 12
LABEL_PADDING = 4
LABEL_HEIGHT = 16
LINK_WIDTH = 2


class Side(StrEnum):
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()


# (row, column) offset of the neighbour across each side
SIDE_OFFSETS: Dict[Side, Tuple[int, int]] = {
    Side.TOP: (-1, 0),
    Side.BOTTOM: (1, 0),
    Side.LEFT: (0, -1),
    Side.RIGHT: (0, 1),
}

Segment = Tuple[int, int, Side]


def valid_group_cells(group: HintGroup) -> List[Tuple[int, int]]:
    """Return the group's in-grid cells, deduplicated, in listed order."""
    cells: Dict[Tuple[int, int], None] = {}
    for row, column in group.cells:
        if not is_in_bounds(row, column):
            logger.warning("Ignoring group cell (%d, %d)", row, column)
            continue
        cells[(row, column)] = None
    return list(cells)


def outline_segments(cells: Sequence[Tuple[int, int]]) -> List[Segment]:
    """Trace the outer perimeter of a cell set.

    A side of a member cell is part of the outline iff the neighbouring cell
    across it is not a member (cells beyond the grid edge never are). Shared
    edges between two members therefore never produce a segment.
    """
    members = set(cells)
    segments: List[Segment] = []
    for row, column in cells:
        for side, (dr, dc) in SIDE_OFFSETS.items():
            if (row + dr, column + dc) not in members:
                segments.append((row, column, side))
    return segments


def segment_points(segment: Segment, cell_size: float) -> Tuple[Point, Point]:
    """Return the pixel endpoints of an outline segment."""
    row, column, side = segment
    x0, y0, x1, y1 = cell_box(row, column, cell_size)
    if side == Side.TOP:
        return (x0, y0), (x1, y0)
    if side == Side.BOTTOM:
        return (x0, y1), (x1, y1)
    if side == Side.LEFT:
        return (x0, y0), (x0, y1)
    return (x1, y0), (x1, y1)


def draw_group_label(
    draw: ImageDraw.ImageDraw,
    x: int,
    y: int,
    name: str,
    color: str,
    background: str,
) -> None:
    """Draw a small bordered badge with ``name`` whose top-left is ``(x, y)``."""
    font = load_font(LABEL_FONT_SIZE, bold=True)
    width = to_pixel(font.getlength(name)) + LABEL_PADDING * 2
    draw.rectangle(
        [x, y, x + width, y + LABEL_HEIGHT], fill=background, outline=color, width=1
    )
    draw.text(
        (x + LABEL_PADDING, y + LABEL_HEIGHT / 2),
        name,
        fill=color,
        font=font,
        anchor="lm",
    )


def draw_groups(
    draw: ImageDraw.ImageDraw,
    cell_size: float,
    palette: Palette,
    groups: Sequence[HintGroup],
) -> None:
    for group in groups:
        color = hint_color(group.color, palette)
        cells = valid_group_cells(group)
        if not cells:
            continue

        fill = with_alpha(color, GROUP_FILL_ALPHA)
        for row, column in cells:
            x0, y0, x1, y1 = cell_box(row, column, cell_size)
            draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=fill)

        for segment in outline_segments(cells):
            draw.line(
                list(segment_points(segment, cell_size)),
                fill=color,
                width=GROUP_OUTLINE_WIDTH,
            )

        if group.name:
            row, column = cells[0]
            x0, y0, _, _ = cell_box(row, column, cell_size)
            draw_group_label(draw, x0, y0, group.name, color, palette.background)


def link_anchor(
    row: int, column: int, digit: Digit, has_digit: bool, cell_size: float
) -> Point:
    """Return where a link attaches to a cell.

    Cells holding a digit anchor at their center; empty cells anchor at the
    pencilmark slot of ``digit``.
    """
    if has_digit:
        return cell_center(row, column, cell_size)
    return candidate_center(row, column, digit, cell_size)


def link_endpoints(
    link: HintLink, puzzle: PuzzleState, cell_size: float
) -> Tuple[Point, Point]:
    start = link_anchor(
        link.from_row,
        link.from_col,
        link.digit,
        puzzle.has_digit(cell_index(link.from_row, link.from_col)),
        cell_size,
    )
    end = link_anchor(
        link.to_row,
        link.to_col,
        link.digit,
        puzzle.has_digit(cell_index(link.to_row, link.to_col)),
        cell_size,
    )
    return start, end


def is_drawable_link(link: HintLink) -> bool:
    return (
        is_in_bounds(link.from_row, link.from_col)
        and is_in_bounds(link.to_row, link.to_col)
        and 1 <= link.digit <= GRID_SIZE
    )


def draw_links(
    draw: ImageDraw.ImageDraw,
    cell_size: float,
    palette: Palette,
    links: Sequence[HintLink],
    puzzle: PuzzleState,
) -> None:
    for link in links:
        if not is_drawable_link(link):
            logger.warning("Ignoring link %s", link)
            continue
        start, end = link_endpoints(link, puzzle, cell_size)
        if link.kind == LinkKind.WEAK:
            draw_dashed_line(draw, start, end, fill=palette.selected, width=LINK_WIDTH)
        else:
            draw.line([start, end], fill=palette.selected, width=LINK_WIDTH)
