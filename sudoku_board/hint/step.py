"""Hint step container and JSON decoding.

A :class:`HintStep` is produced once per solving-engine call and rendered
once. :func:`hint_step_from_dict` decodes the engine's JSON payload (camelCase
keys, ``type`` discriminators, comma separated candidate lists) into the
immutable dataclasses of this package.

Payload schema::

    {
        "title": str, "text": str,
        "areas": [{"type": "row|column|block", "index": int, "color": str}],
        "cells": [{"row": int, "column": int, "color": str, "fill": bool,
                   "actions": {"select": str, "unselect": str,
                               "highlight": str, "add": str, "remove": str}}],
        "groups": [{"cells": [[row, col], ...], "color": str, "name": str}],
        "links": [{"fromRow": int, "fromCol": int, "toRow": int,
                   "toCol": int, "digit": int, "type": "strong|weak"}],
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from sudoku_board.hint.area import HintArea
from sudoku_board.hint.cell import CellActions, HintCell
from sudoku_board.hint.group import HintGroup
from sudoku_board.hint.link import HintLink
from sudoku_board.types import AreaKind, LinkKind


@dataclass(frozen=True)
class HintStep:
    """One explanatory step of a solving technique.

    Attributes:
        title: Short headline (e.g. technique name).
        text: Explanation shown next to the image.
        areas: Row / column / block highlights.
        cells: Per-cell instructions, override ``areas``.
        groups: Outlined cell clusters.
        links: Chain edges.
    """

    title: str = ""
    text: str = ""
    areas: Tuple[HintArea, ...] = ()
    cells: Tuple[HintCell, ...] = ()
    groups: Tuple[HintGroup, ...] = ()
    links: Tuple[HintLink, ...] = ()


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _area_from_dict(data: Mapping[str, Any]) -> HintArea:
    try:
        kind = AreaKind(data["type"])
    except ValueError:
        raise ValueError(f"Unknown area type: {data['type']!r}")
    return HintArea(kind=kind, index=int(data["index"]), color=_as_text(data.get("color")))


def _actions_from_dict(data: Optional[Mapping[str, Any]]) -> CellActions:
    if not data:
        return CellActions()
    return CellActions(
        select=_as_text(data.get("select")),
        unselect=_as_text(data.get("unselect")),
        highlight=_as_text(data.get("highlight")),
        add=_as_text(data.get("add")),
        remove=_as_text(data.get("remove")),
    )


def _cell_from_dict(data: Mapping[str, Any]) -> HintCell:
    return HintCell(
        row=int(data["row"]),
        column=int(data["column"]),
        color=_as_text(data.get("color")),
        fill=bool(data.get("fill", True)),
        actions=_actions_from_dict(data.get("actions")),
    )


def _group_from_dict(data: Mapping[str, Any]) -> HintGroup:
    cells = tuple((int(pair[0]), int(pair[1])) for pair in data.get("cells", []))
    name = data.get("name")
    return HintGroup(
        cells=cells,
        color=_as_text(data.get("color")),
        name=str(name) if name else None,
    )


def _link_from_dict(data: Mapping[str, Any]) -> HintLink:
    try:
        kind = LinkKind(data.get("type", LinkKind.STRONG))
    except ValueError:
        raise ValueError(f"Unknown link type: {data['type']!r}")
    return HintLink(
        from_row=int(data["fromRow"]),
        from_col=int(data["fromCol"]),
        to_row=int(data["toRow"]),
        to_col=int(data["toCol"]),
        digit=int(data["digit"]),
        kind=kind,
    )


def hint_step_from_dict(data: Mapping[str, Any]) -> HintStep:
    """Decode a solver hint step payload.

    Missing lists decode as empty. A missing required key raises ``KeyError``;
    an unknown area or link type raises ``ValueError``.
    """
    return HintStep(
        title=_as_text(data.get("title")),
        text=_as_text(data.get("text")),
        areas=tuple(_area_from_dict(a) for a in data.get("areas") or []),
        cells=tuple(_cell_from_dict(c) for c in data.get("cells") or []),
        groups=tuple(_group_from_dict(g) for g in data.get("groups") or []),
        links=tuple(_link_from_dict(link) for link in data.get("links") or []),
    )
