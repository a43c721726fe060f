"""Board compositor.

Renders a puzzle state plus an optional hint step to a PNG. Layers are
painted bottom to top, each on top of the previous one:

1. Canvas background.
2. Cell backgrounds: block checkerboard, selection tint, hint fill / border,
   selected cell border.
3. Cell contents: placed / removed hint digit, clue, user entry, or hint
   candidates (first match wins).
4. Grid lines: thin between cells, bold between blocks and around the board.
5. Group overlays.
6. Link overlays.

Every render allocates its own image; module state is limited to constants,
the two palettes and the font cache, so concurrent renders need no locking.
Identical inputs produce byte-identical PNGs.
"""

import base64
import io
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from sudoku_board.annotations import AnnotationMap, CellAnnotation, resolve_annotations
from sudoku_board.hint import HintStep
from sudoku_board.palette import Palette, get_palette, hint_color, with_alpha
from sudoku_board.puzzle import PuzzleState, parse_puzzle
from sudoku_board.renderer.overlay import draw_groups, draw_links
from sudoku_board.types import BLOCK_SIZE, CELL_COUNT, GRID_SIZE, CellIndex, Digit
from sudoku_board.utils.grid import (
    block_of,
    candidate_center,
    cell_box,
    cell_center,
    column_of,
    is_valid_index,
    row_of,
    shares_house,
    to_pixel,
)
from sudoku_board.utils.image import draw_centered_text, load_font

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 450
SELECTION_ALPHA = 0.15
HINT_FILL_ALPHA = 0.3
CELL_BORDER_WIDTH = 3
THIN_LINE_WIDTH = 1
BOLD_LINE_WIDTH = 2
DIGIT_FONT_RATIO = 0.6
CANDIDATE_FONT_RATIO = 0.25


@dataclass(frozen=True)
class RenderOptions:
    """Per-call render settings.

    Attributes:
        size_pixels: Side of the square image; ``None`` uses the renderer default.
        dark_mode: Use the dark palette.
        hint_step: Hint to visualize.
        selected_index: Selected cell (``0..80``); its row, column and block
            are tinted and the cell itself gets a border.
    """

    size_pixels: Optional[int] = None
    dark_mode: bool = False
    hint_step: Optional[HintStep] = None
    selected_index: Optional[CellIndex] = None


@dataclass(frozen=True)
class RenderResult:
    """Encoded board image.

    Attributes:
        buffer: PNG bytes.
        width: Image width in pixels.
        height: Image height in pixels.
    """

    buffer: bytes
    width: int
    height: int

    def data_url(self) -> str:
        """Return the image as a ``data:image/png;base64,...`` URL."""
        return "data:image/png;base64," + base64.b64encode(self.buffer).decode("ascii")

    def to_array(self) -> npt.NDArray[np.uint8]:
        """Decode the PNG into an ``(H, W, 3)`` uint8 array."""
        with Image.open(io.BytesIO(self.buffer)) as image:
            return np.array(image.convert("RGB"), dtype=np.uint8)


def draw_cell_backgrounds(
    draw: ImageDraw.ImageDraw,
    cell_size: float,
    palette: Palette,
    annotations: AnnotationMap,
    selected_index: Optional[CellIndex],
) -> None:
    for i in range(CELL_COUNT):
        x0, y0, x1, y1 = cell_box(row_of(i), column_of(i), cell_size)
        box = [x0, y0, x1 - 1, y1 - 1]

        checker = (
            palette.background_secondary if block_of(i) % 2 == 0 else palette.background
        )
        draw.rectangle(box, fill=checker)

        if selected_index is not None and shares_house(i, selected_index):
            draw.rectangle(box, fill=with_alpha(palette.selected, SELECTION_ALPHA))

        annotation = annotations.get(i)
        if annotation is not None:
            color = hint_color(annotation.color, palette)
            if annotation.fill:
                draw.rectangle(box, fill=with_alpha(color, HINT_FILL_ALPHA))
            else:
                draw.rectangle(box, outline=color, width=CELL_BORDER_WIDTH)

        if i == selected_index:
            draw.rectangle(box, outline=palette.selected, width=CELL_BORDER_WIDTH)


def collect_candidates(
    annotation: CellAnnotation, palette: Palette
) -> List[Tuple[Digit, str]]:
    """Return ``(digit, color)`` pencilmarks of an annotation in draw order."""
    marks: List[Tuple[Digit, str]] = []
    marks.extend((digit, palette.selected) for digit in annotation.highlight_digits)
    marks.extend((digit, palette.success) for digit in annotation.add_digits)
    marks.extend((digit, palette.error) for digit in annotation.remove_digits)
    return marks


def cell_digit(
    index: CellIndex,
    puzzle: PuzzleState,
    annotation: Optional[CellAnnotation],
    palette: Palette,
) -> Optional[Tuple[Digit, str, bool]]:
    """Pick the full-size digit shown in a cell as ``(digit, color, bold)``.

    Priority: hint select, hint unselect, clue, user entry. ``None`` means the
    cell shows candidates (if any) instead.
    """
    if annotation is not None and annotation.select_digit:
        return annotation.select_digit, palette.success, True
    if annotation is not None and annotation.unselect_digit:
        return annotation.unselect_digit, palette.error, True
    if puzzle.given[index]:
        return puzzle.given[index], palette.label, True
    if puzzle.entered[index]:
        return puzzle.entered[index], palette.success, False
    return None


def draw_cell_contents(
    draw: ImageDraw.ImageDraw,
    cell_size: float,
    palette: Palette,
    puzzle: PuzzleState,
    annotations: AnnotationMap,
) -> None:
    digit_size = to_pixel(cell_size * DIGIT_FONT_RATIO)
    candidate_font = load_font(to_pixel(cell_size * CANDIDATE_FONT_RATIO))

    for i in range(CELL_COUNT):
        row, column = row_of(i), column_of(i)
        annotation = annotations.get(i)

        shown = cell_digit(i, puzzle, annotation, palette)
        if shown is not None:
            digit, color, bold = shown
            draw_centered_text(
                draw,
                cell_center(row, column, cell_size),
                str(digit),
                color,
                load_font(digit_size, bold=bold),
            )
            continue

        if annotation is None:
            continue
        for digit, color in collect_candidates(annotation, palette):
            draw_centered_text(
                draw,
                candidate_center(row, column, digit, cell_size),
                str(digit),
                color,
                candidate_font,
            )


def draw_grid_lines(
    draw: ImageDraw.ImageDraw, size: int, cell_size: float, palette: Palette
) -> None:
    last = size - 1

    for i in range(1, GRID_SIZE):
        if i % BLOCK_SIZE == 0:
            continue
        pos = to_pixel(i * cell_size)
        draw.line([(pos, 0), (pos, last)], fill=palette.grid_line, width=THIN_LINE_WIDTH)
        draw.line([(0, pos), (last, pos)], fill=palette.grid_line, width=THIN_LINE_WIDTH)

    for i in range(0, GRID_SIZE + 1, BLOCK_SIZE):
        pos = min(to_pixel(i * cell_size), last)
        draw.line(
            [(pos, 0), (pos, last)], fill=palette.grid_line_bold, width=BOLD_LINE_WIDTH
        )
        draw.line(
            [(0, pos), (last, pos)], fill=palette.grid_line_bold, width=BOLD_LINE_WIDTH
        )


def compose_board(
    puzzle: PuzzleState,
    size: int,
    palette: Palette,
    hint_step: Optional[HintStep] = None,
    selected_index: Optional[CellIndex] = None,
) -> Image.Image:
    """Paint every layer onto a fresh ``size`` x ``size`` RGB image."""
    if size < GRID_SIZE:
        raise ValueError(f"Image size must be at least {GRID_SIZE} pixels, got {size}")
    if selected_index is not None and not is_valid_index(selected_index):
        logger.warning("Ignoring selected index %d", selected_index)
        selected_index = None

    cell_size = size / GRID_SIZE
    annotations = resolve_annotations(hint_step)

    image = Image.new("RGB", (size, size), palette.background)
    draw = ImageDraw.Draw(image, "RGBA")

    draw_cell_backgrounds(draw, cell_size, palette, annotations, selected_index)
    draw_cell_contents(draw, cell_size, palette, puzzle, annotations)
    draw_grid_lines(draw, size, cell_size, palette)
    if hint_step is not None:
        draw_groups(draw, cell_size, palette, hint_step.groups)
        draw_links(draw, cell_size, palette, hint_step.links, puzzle)

    return image


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def render(
    original: str,
    entered: str,
    options: Optional[RenderOptions] = None,
) -> RenderResult:
    """Render a board to PNG.

    Arguments:
        original: 81 character clue string, ``'0'`` or ``'.'`` for empty cells.
        entered: 81 character user entry string, ``'0'`` for no entry.
        options: Size, palette, hint and selection; defaults to a plain light
            board of :data:`DEFAULT_SIZE` pixels.

    Raises:
        ValueError: ``options.size_pixels`` is smaller than one pixel per cell.
    """
    options = options or RenderOptions()
    size = options.size_pixels if options.size_pixels is not None else DEFAULT_SIZE
    logger.debug(
        "Rendering %dpx board (dark_mode=%s, hint=%s, selected=%s)",
        size,
        options.dark_mode,
        options.hint_step.title if options.hint_step is not None else None,
        options.selected_index,
    )

    image = compose_board(
        parse_puzzle(original, entered),
        size,
        get_palette(options.dark_mode),
        hint_step=options.hint_step,
        selected_index=options.selected_index,
    )
    return RenderResult(buffer=encode_png(image), width=size, height=size)


class BoardRenderer:
    size: int

    def __init__(self, size: int = DEFAULT_SIZE):
        self.size = size

    def render(
        self, original: str, entered: str, options: Optional[RenderOptions] = None
    ) -> RenderResult:
        options = options or RenderOptions()
        if options.size_pixels is None:
            options = replace(options, size_pixels=self.size)
        return render(original, entered, options)


def create_board_renderer(size: int = DEFAULT_SIZE) -> BoardRenderer:
    return BoardRenderer(size)
