import json
import logging

import streamlit as st

from sudoku_board.hint import HintStep, hint_step_from_dict
from sudoku_board.puzzle import parse_puzzle
from sudoku_board.renderer import DEFAULT_SIZE, RenderOptions, render

logging.basicConfig(level=logging.INFO)

EXAMPLE_PUZZLE = (
    "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
)
EXAMPLE_HINT = {
    "title": "Naked Single",
    "text": "Cell R1C3 can only be 4",
    "areas": [{"type": "row", "index": 0, "color": "green"}],
    "cells": [
        {
            "row": 0,
            "column": 2,
            "color": "blue",
            "fill": True,
            "actions": {"select": "4"},
        }
    ],
}

st.set_page_config(layout="wide", page_title="Sudoku Board Preview")

left_col, right_col = st.columns([0.4, 0.6])

with left_col:
    st.subheader("Board")
    original: str = st.text_input("Original (81 chars)", EXAMPLE_PUZZLE)
    entered: str = st.text_input("Entered (81 chars)", "0" * 81)
    size: int = st.slider("Size (px)", 90, 900, DEFAULT_SIZE, step=9)
    dark_mode: bool = st.toggle("Dark mode", value=False)
    select_cell: bool = st.checkbox("Select a cell", value=False)
    selected_index = (
        int(st.number_input("Selected index", 0, 80, 0)) if select_cell else None
    )

    st.subheader("Hint step")
    hint_text: str = st.text_area(
        "Solver hint JSON (empty for none)", json.dumps(EXAMPLE_HINT, indent=2), height=320
    )

hint_step: HintStep | None = None
if hint_text.strip():
    try:
        hint_step = hint_step_from_dict(json.loads(hint_text))
    except (json.JSONDecodeError, KeyError, ValueError) as e:
        left_col.error(f"Invalid hint payload: {e}")

with right_col:
    result = render(
        original,
        entered,
        RenderOptions(
            size_pixels=size,
            dark_mode=dark_mode,
            hint_step=hint_step,
            selected_index=selected_index,
        ),
    )
    if hint_step is not None and hint_step.title:
        st.markdown(f"**{hint_step.title}**")
        st.caption(hint_step.text)
    st.image(result.buffer, width=result.width)
    st.caption(
        f"{result.width}x{result.height}px, "
        f"{parse_puzzle(original, entered).clue_count()} clues"
    )
    st.download_button("Download PNG", result.buffer, "board.png", "image/png")
