import pytest
from whack_a_mole.layout import GridLayout


def test_default_grid_is_three_by_three():
    layout = GridLayout((1280, 720), 9, top=240)
    assert layout.columns == 3
    assert layout.rows == 3
    assert len(layout.rects()) == 9


def test_cell_at_center_of_every_cell_round_trips():
    layout = GridLayout((1280, 720), 9, top=240)
    for i, (x, y, w, h) in enumerate(layout.rects()):
        assert layout.cell_at(x + w / 2, y + h / 2) == i


def test_points_outside_cells_map_to_nothing():
    layout = GridLayout((1280, 720), 9, top=240)
    x, y, w, h = layout.cell_rect(0)
    assert layout.cell_at(x - 1, y) is None
    assert layout.cell_at(x, y - 1) is None
    # the gap right of cell 0
    assert layout.cell_at(x + w + layout.gap / 2, y + 1) is None
    # right of the last column
    x8, y8, w8, h8 = layout.cell_rect(8)
    assert layout.cell_at(x8 + w8 + layout.gap + 1, y8 + 1) is None
    assert layout.cell_at(x8 + 1, y8 + h8 + layout.gap + 1) is None


def test_partial_last_row():
    layout = GridLayout((1280, 720), 5, columns=3, top=100)
    assert layout.rows == 2
    x, y, w, h = layout.cell_rect(4)
    # slot 5 would be right of cell 4 but does not exist
    assert layout.cell_at(x + w + layout.gap + 1, y + 1) is None


def test_cells_shrink_to_fit_small_screens():
    layout = GridLayout((320, 480), 9, top=200)
    for x, y, w, h in layout.rects():
        assert x >= 0 and x + w <= 320
        assert y + h <= 480


def test_cell_rect_out_of_range():
    with pytest.raises(IndexError):
        GridLayout((1280, 720), 9).cell_rect(9)
