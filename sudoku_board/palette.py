"""Color palettes and hint color mapping.

Two fixed palettes (light and dark) hold every color the renderer paints
with. Hint payloads never carry RGB values; they name an abstract
:class:`~sudoku_board.types.HintColor` which :func:`hint_color` resolves to
one of the palette's semantic slots. Unknown names fall back to the selection
color.
"""

from dataclasses import dataclass
from typing import Dict

from PIL import ImageColor

from sudoku_board.types import RGBA, HintColor


@dataclass(frozen=True)
class Palette:
    """Named color set, values are ``#RRGGBB`` strings.

    Attributes:
        background: Canvas color, also the light checkerboard tone.
        background_secondary: Darker checkerboard tone.
        label: Clue digits.
        label_secondary: Default candidate color.
        grid_line: Thin separator between cells.
        grid_line_bold: Thick separator between blocks.
        selected: Selection / highlight color.
        success: Placed and entered digits.
        warning: Caution highlight.
        warning_secondary: Mild caution highlight.
        error: Removed digits and eliminations.
    """

    background: str
    background_secondary: str
    label: str
    label_secondary: str
    grid_line: str
    grid_line_bold: str
    selected: str
    success: str
    warning: str
    warning_secondary: str
    error: str


LIGHT_PALETTE = Palette(
    background="#FFFFFF",
    background_secondary="#F2F2F7",
    label="#000000",
    label_secondary="#3C3C43",
    grid_line="#8E8E93",
    grid_line_bold="#000000",
    selected="#AF52DE",
    success="#007AFF",
    warning="#FF9500",
    warning_secondary="#FFCC00",
    error="#FF3B30",
)

DARK_PALETTE = Palette(
    background="#000000",
    background_secondary="#1C1C1E",
    label="#FFFFFF",
    label_secondary="#EBEBF5",
    grid_line="#8E8E93",
    grid_line_bold="#FFFFFF",
    selected="#BF5AF2",
    success="#0A84FF",
    warning="#FF9F0A",
    warning_secondary="#FFD60A",
    error="#FF453A",
)


def get_palette(dark_mode: bool) -> Palette:
    return DARK_PALETTE if dark_mode else LIGHT_PALETTE


# Map hint color names to Palette slots
HINT_COLOR_SLOTS: Dict[str, str] = {
    HintColor.BLUE: "selected",
    HintColor.GREEN: "success",
    HintColor.YELLOW: "warning_secondary",
    HintColor.ORANGE: "warning",
    HintColor.RED: "error",
    HintColor.GRAY: "label_secondary",
    HintColor.WHITE: "background",
    HintColor.BLACK: "label",
}
DEFAULT_HINT_SLOT = "selected"


def hint_color(name: str, palette: Palette) -> str:
    """Resolve an abstract hint color name to a palette value.

    Names outside :class:`HintColor` resolve to the selection color.
    """
    slot = HINT_COLOR_SLOTS.get(name, DEFAULT_HINT_SLOT)
    return getattr(palette, slot)


def with_alpha(color: str, alpha: float) -> RGBA:
    """Return ``color`` as an RGBA tuple with ``alpha`` in ``[0, 1]``."""
    r, g, b = ImageColor.getrgb(color)[:3]
    return (r, g, b, int(round(alpha * 255)))
