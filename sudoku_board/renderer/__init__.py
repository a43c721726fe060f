"""Rendering subpackage.

Turns a puzzle state plus an optional hint step into a PNG. The renderer
focuses on:

* Resolving overlapping area / cell hint instructions into one annotation
  per cell (cell instructions win).
* Tracing perimeter outlines around arbitrary groups of cells.
* Anchoring chain links at cell centers or candidate slots depending on
  whether the cell currently holds a digit.

Pure Pillow drawing; every call is independent and deterministic. See
:mod:`sudoku_board.renderer.board` for the layer order and
:mod:`sudoku_board.renderer.overlay` for groups and links.
"""

from .board import (
    DEFAULT_SIZE,
    BoardRenderer,
    RenderOptions,
    RenderResult,
    create_board_renderer,
    render,
)

__all__ = [
    "DEFAULT_SIZE",
    "BoardRenderer",
    "RenderOptions",
    "RenderResult",
    "create_board_renderer",
    "render",
]
