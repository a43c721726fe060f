import logging

import pytest

from sudoku_board.hint import CellActions, HintCell, HintGroup, HintLink, HintStep
from sudoku_board.palette import DARK_PALETTE, LIGHT_PALETTE
from sudoku_board.renderer import (
    BoardRenderer,
    RenderOptions,
    create_board_renderer,
    render,
)
from sudoku_board.types import LinkKind
from tests.test_utils import (
    CELL,
    EMPTY_BOARD,
    SAMPLE_PUZZLE,
    SIZE,
    blend,
    cell_interior,
    close_to,
    colors_in,
    pixel,
    render_pixels,
    rgb,
    row_area_step,
    single_cell_step,
)

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@pytest.mark.parametrize("size", [450, 600, 200, 100])
def test_image_is_square_png_of_requested_size(size: int) -> None:
    result = render(SAMPLE_PUZZLE, EMPTY_BOARD, RenderOptions(size_pixels=size))
    assert result.buffer.startswith(PNG_MAGIC)
    assert result.width == size
    assert result.height == size
    assert result.to_array().shape == (size, size, 3)


def test_default_size() -> None:
    result = render(SAMPLE_PUZZLE, EMPTY_BOARD)
    assert (result.width, result.height) == (450, 450)


def test_board_renderer_defaults_and_overrides() -> None:
    assert create_board_renderer().render(SAMPLE_PUZZLE, EMPTY_BOARD).width == 450
    renderer = create_board_renderer(600)
    assert renderer.render(SAMPLE_PUZZLE, EMPTY_BOARD).width == 600
    override = renderer.render(SAMPLE_PUZZLE, EMPTY_BOARD, RenderOptions(size_pixels=180))
    assert override.width == 180
    assert BoardRenderer().size == 450


@pytest.mark.parametrize("size", [0, -10, 8])
def test_invalid_size_raises(size: int) -> None:
    with pytest.raises(ValueError):
        render(SAMPLE_PUZZLE, EMPTY_BOARD, RenderOptions(size_pixels=size))


def test_rendering_is_deterministic() -> None:
    step = HintStep(
        cells=(HintCell(0, 2, "green", actions=CellActions(select="4")),),
        groups=(HintGroup(cells=((4, 4), (4, 5)), color="orange", name="ALS"),),
        links=(HintLink(0, 2, 4, 4, 4, LinkKind.WEAK),),
    )
    options = RenderOptions(dark_mode=True, hint_step=step, selected_index=40)
    first = render(SAMPLE_PUZZLE, EMPTY_BOARD, options)
    second = render(SAMPLE_PUZZLE, EMPTY_BOARD, options)
    assert first.buffer == second.buffer


def test_data_url() -> None:
    url = render(SAMPLE_PUZZLE, EMPTY_BOARD).data_url()
    assert url.startswith("data:image/png;base64,iVBORw0KGgo")


@pytest.mark.parametrize("dark_mode", [False, True])
def test_empty_board_shows_only_shading_and_lines(dark_mode: bool) -> None:
    palette = DARK_PALETTE if dark_mode else LIGHT_PALETTE
    _, pixels = render_pixels(dark_mode=dark_mode)
    for row in range(9):
        for column in range(9):
            block = (row // 3) * 3 + column // 3
            expected = (
                palette.background_secondary if block % 2 == 0 else palette.background
            )
            assert colors_in(cell_interior(pixels, row, column)) == {rgb(expected)}


def test_clues_use_label_color() -> None:
    _, pixels = render_pixels(SAMPLE_PUZZLE)
    label = rgb(LIGHT_PALETTE.label)
    clue_cells = [i for i, ch in enumerate(SAMPLE_PUZZLE) if ch != "0"]
    assert len(clue_cells) == 30
    for i in range(81):
        has_label = label in colors_in(cell_interior(pixels, i // 9, i % 9))
        assert has_label == (i in clue_cells)


def test_entered_digit_differs_from_clue() -> None:
    entered = "00" + "4" + "0" * 78
    _, pixels = render_pixels(SAMPLE_PUZZLE, entered)
    clue = colors_in(cell_interior(pixels, 0, 0))
    user = colors_in(cell_interior(pixels, 0, 2))
    assert rgb(LIGHT_PALETTE.label) in clue
    assert rgb(LIGHT_PALETTE.success) in user
    assert rgb(LIGHT_PALETTE.label) not in user


def test_clue_wins_over_entered_digit() -> None:
    _, pixels = render_pixels(SAMPLE_PUZZLE, "9" * 81)
    colors = colors_in(cell_interior(pixels, 0, 0))
    assert rgb(LIGHT_PALETTE.label) in colors
    assert rgb(LIGHT_PALETTE.success) not in colors


def test_select_action_draws_digit_in_success_color() -> None:
    step = single_cell_step(0, 2, color="green", select="4")
    _, pixels = render_pixels(SAMPLE_PUZZLE, hint_step=step)
    assert rgb(LIGHT_PALETTE.success) in colors_in(cell_interior(pixels, 0, 2))


def test_select_action_replaces_clue() -> None:
    step = single_cell_step(0, 0, color="gray", select="4")
    _, pixels = render_pixels(SAMPLE_PUZZLE, hint_step=step)
    colors = colors_in(cell_interior(pixels, 0, 0))
    assert rgb(LIGHT_PALETTE.success) in colors
    assert rgb(LIGHT_PALETTE.label) not in colors


def test_unselect_action_draws_digit_in_error_color() -> None:
    step = single_cell_step(4, 4, color="gray", unselect="7")
    _, pixels = render_pixels(hint_step=step)
    assert rgb(LIGHT_PALETTE.error) in colors_in(cell_interior(pixels, 4, 4))


def test_row_area_fills_only_that_row() -> None:
    _, pixels = render_pixels(hint_step=row_area_step(0, "green"))
    fill = LIGHT_PALETTE.success
    for column in range(9):
        block = column // 3
        base = (
            LIGHT_PALETTE.background_secondary
            if block % 2 == 0
            else LIGHT_PALETTE.background
        )
        x, y = column * CELL + 10, 10
        assert close_to(pixel(pixels, x, y), blend(base, fill, 0.3))
    assert pixel(pixels, 10, CELL + 10) == rgb(LIGHT_PALETTE.background_secondary)


def test_unfilled_cell_hint_draws_border() -> None:
    step = single_cell_step(4, 4, color="red", fill=False)
    _, pixels = render_pixels(hint_step=step)
    x0, y0 = 4 * CELL, 4 * CELL
    assert pixel(pixels, x0 + 2, y0 + CELL // 2) == rgb(LIGHT_PALETTE.error)
    assert pixel(pixels, x0 + CELL // 2, y0 + 10) == rgb(LIGHT_PALETTE.background_secondary)


def test_selection_tints_houses_and_borders_selected_cell() -> None:
    _, pixels = render_pixels(selected_index=40)
    palette = LIGHT_PALETTE
    on_light = blend(palette.background, palette.selected, 0.15)
    on_dark = blend(palette.background_secondary, palette.selected, 0.15)
    # same row, same block, same column
    assert close_to(pixel(pixels, 10, 4 * CELL + 10), on_light)
    assert close_to(pixel(pixels, 3 * CELL + 10, 3 * CELL + 10), on_dark)
    assert close_to(pixel(pixels, 4 * CELL + 25, 8 * CELL + 10), on_light)
    # unrelated cell
    assert pixel(pixels, 10, 10) == rgb(palette.background_secondary)
    # selected cell border
    assert pixel(pixels, 4 * CELL + 2, 4 * CELL + 25) == rgb(palette.selected)


def test_out_of_range_selection_is_ignored(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        _, pixels = render_pixels(selected_index=81)
    assert pixel(pixels, 10, 10) == rgb(LIGHT_PALETTE.background_secondary)
    assert "selected index" in caplog.text


def test_grid_lines() -> None:
    _, pixels = render_pixels()
    assert pixel(pixels, CELL, 25) == rgb(LIGHT_PALETTE.grid_line)
    assert pixel(pixels, 25, CELL) == rgb(LIGHT_PALETTE.grid_line)
    bold = rgb(LIGHT_PALETTE.grid_line_bold)
    assert bold in {pixel(pixels, x, 25) for x in (3 * CELL - 1, 3 * CELL, 3 * CELL + 1)}
    assert bold in {pixel(pixels, 25, y) for y in (6 * CELL - 1, 6 * CELL, 6 * CELL + 1)}
    assert pixel(pixels, 0, 25) == bold
    assert pixel(pixels, SIZE - 1, 25) == bold


def test_group_outline_skips_shared_edge() -> None:
    group = HintGroup(cells=((4, 4), (4, 5)), color="orange")
    _, pixels = render_pixels(hint_step=HintStep(groups=(group,)))
    outline = rgb(LIGHT_PALETTE.warning)
    # outer top edge of both cells
    assert pixel(pixels, 4 * CELL + 25, 4 * CELL) == outline
    assert pixel(pixels, 5 * CELL + 25, 4 * CELL) == outline
    # right edge of the pair
    assert pixel(pixels, 6 * CELL, 4 * CELL + 25) == outline
    # shared edge between the two members
    assert pixel(pixels, 5 * CELL, 4 * CELL + 25) != outline
    # translucent fill inside
    assert close_to(
        pixel(pixels, 4 * CELL + 10, 4 * CELL + 10),
        blend(LIGHT_PALETTE.background_secondary, LIGHT_PALETTE.warning, 0.2),
    )


def test_named_group_draws_badge() -> None:
    group = HintGroup(cells=((4, 4),), color="red", name="ALS A")
    _, pixels = render_pixels(hint_step=HintStep(groups=(group,)))
    badge = cell_interior(pixels, 4, 4, margin=0)[3:18, 3:20]
    assert rgb(LIGHT_PALETTE.background) in colors_in(badge)
    assert rgb(LIGHT_PALETTE.error) in colors_in(badge)


def _link_rows(pixels, y: int, x_from: int, x_to: int):
    band = pixels[y - 3 : y + 4]
    return [
        rgb(LIGHT_PALETTE.selected) in colors_in(band[:, x : x + 1])
        for x in range(x_from, x_to)
    ]


def test_strong_link_is_solid() -> None:
    link = HintLink(4, 0, 4, 8, digit=5, kind=LinkKind.STRONG)
    _, pixels = render_pixels(hint_step=HintStep(links=(link,)))
    assert all(_link_rows(pixels, 4 * CELL + 25, 40, 410))


def test_weak_link_is_dashed() -> None:
    link = HintLink(4, 0, 4, 8, digit=5, kind=LinkKind.WEAK)
    _, pixels = render_pixels(hint_step=HintStep(links=(link,)))
    covered = _link_rows(pixels, 4 * CELL + 25, 40, 410)
    assert any(covered)
    assert not all(covered)


def test_invalid_hint_entries_do_not_fail_render(caplog: pytest.LogCaptureFixture) -> None:
    step = HintStep(
        cells=(HintCell(12, 0, "green", actions=CellActions(select="4")),),
        groups=(HintGroup(cells=((9, 9),), color="red", name="X"),),
        links=(HintLink(0, 0, 0, 10, 5),),
    )
    with caplog.at_level(logging.WARNING):
        result, pixels = render_pixels(hint_step=step)
    assert result.width == SIZE
    assert len(caplog.records) == 3
    _, plain = render_pixels()
    assert (pixels == plain).all()
