"""Pillow drawing helpers.

Small primitives the board renderer composes: cached font lookup, centered
text and dashed strokes (``ImageDraw`` only draws solid lines).
"""

import math
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple, Union

from PIL import ImageDraw, ImageFont

from sudoku_board.types import Point

FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]
Color = Union[str, Tuple[int, ...]]

REGULAR_FONT = "DejaVuSans.ttf"
BOLD_FONT = "DejaVuSans-Bold.ttf"
DEFAULT_DASH: Tuple[float, float] = (5.0, 5.0)


@lru_cache(maxsize=64)
def load_font(size: int, bold: bool = False) -> FontType:
    """Return a TrueType font of ``size`` pixels.

    Falls back to Pillow's bundled default face when DejaVu is not installed.
    """
    size = max(1, size)
    try:
        return ImageFont.truetype(BOLD_FONT if bold else REGULAR_FONT, size)
    except OSError:
        return ImageFont.load_default(size)


def draw_centered_text(
    draw: ImageDraw.ImageDraw, center: Point, text: str, fill: Color, font: FontType
) -> None:
    """Draw ``text`` with its middle at ``center``."""
    draw.text(center, text, fill=fill, font=font, anchor="mm")


def dash_segments(
    start: Point, end: Point, dash: Optional[Sequence[float]] = None
) -> List[Tuple[Point, Point]]:
    """Split the segment ``start``-``end`` into visible dash pieces.

    ``dash`` alternates on / off lengths in pixels, starting with a dash at
    ``start``. The last dash is clipped to the segment.
    """
    on, off = dash if dash is not None else DEFAULT_DASH
    x0, y0 = start
    x1, y1 = end
    length = math.hypot(x1 - x0, y1 - y0)
    if length == 0:
        return []
    ux, uy = (x1 - x0) / length, (y1 - y0) / length

    pieces: List[Tuple[Point, Point]] = []
    pos = 0.0
    while pos < length:
        stop = min(pos + on, length)
        pieces.append(((x0 + ux * pos, y0 + uy * pos), (x0 + ux * stop, y0 + uy * stop)))
        pos = stop + off
    return pieces


def draw_dashed_line(
    draw: ImageDraw.ImageDraw,
    start: Point,
    end: Point,
    fill: Color,
    width: int = 1,
    dash: Optional[Sequence[float]] = None,
) -> None:
    for a, b in dash_segments(start, end, dash):
        draw.line([a, b], fill=fill, width=width)
