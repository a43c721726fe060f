"""Hint step model.

Immutable dataclasses describing what a solving technique wants to show on
the board: coarse :class:`HintArea` highlights, per-cell :class:`HintCell`
instructions, outlined :class:`HintGroup` clusters and :class:`HintLink`
chain edges, bundled in a :class:`HintStep`. Use
:func:`hint_step_from_dict` to build one from the solving engine's JSON.
"""

from .area import HintArea
from .cell import CellActions, HintCell
from .group import HintGroup
from .link import HintLink
from .step import HintStep, hint_step_from_dict

__all__ = [
    "CellActions",
    "HintArea",
    "HintCell",
    "HintGroup",
    "HintLink",
    "HintStep",
    "hint_step_from_dict",
]
