import pytest

from outposthd import constants
from outposthd.icon_grid import BUTTON_LEFT, BUTTON_RIGHT, IconGrid, IconGridItem


def make_grid(names=("alpha", "bravo", "charlie")):
    grid = IconGrid(100, 100, 64)
    grid.set_icon_size(20)
    grid.set_icon_margin(0)
    for index, name in enumerate(names):
        grid.add_item(name, index, index * 10)
    return grid


def recorder(grid):
    received = []
    grid.selection_changed.connect(received.append)
    return received


def test_new_grid_is_empty_with_no_selection():
    grid = IconGrid(100, 100, 64)
    assert grid.empty
    assert grid.selection_index == constants.NO_SELECTION
    assert grid.highlight_index == constants.NO_SELECTION
    assert grid.grid_size == (0, 0)


def test_grid_size_fits_within_dimensions():
    grid = IconGrid(137, 91, 64)
    grid.set_icon_size(16)
    grid.set_icon_margin(3)
    cols, rows = grid.grid_size
    cell = 16 + 3
    assert cols * cell <= 137 - 6 < (cols + 1) * cell
    assert rows * cell <= 91 - 6 < (rows + 1) * cell


def test_resize_recomputes_grid():
    grid = IconGrid(100, 100, 64)
    grid.set_icon_size(20)
    before = grid.grid_size
    grid.resize(200, 200)
    assert grid.grid_size[0] > before[0]
    assert grid.grid_size[1] > before[1]


def test_add_item_sheet_position():
    grid = IconGrid(100, 100, 64)
    grid.set_icon_size(16)
    item = grid.add_item("x", 5, 0)
    assert item.pos == (16.0, 16.0)
    assert grid.item_name(0) == "x"


def test_add_item_without_icon_size_raises():
    grid = IconGrid(100, 100, 64)
    with pytest.raises(ValueError):
        grid.add_item("x", 0, 0)


def test_item_defaults():
    item = IconGridItem()
    assert item.meta == 0
    assert item.available is True
    assert item.name == ""


def test_add_item_sorted_orders_by_name():
    grid = IconGrid(100, 100, 64)
    grid.set_icon_size(16)
    for name in ["zulu", "alpha", "mike"]:
        grid.add_item_sorted(name, 0, 0)
    names = [item.name for item in grid.items]
    assert names == sorted(names)


def test_sort_respects_auto_sort_flag():
    grid = IconGrid(100, 100, 64)
    grid.set_icon_size(16)
    grid.auto_sort = False
    grid.add_item_sorted("zulu", 0, 0)
    grid.add_item_sorted("alpha", 0, 0)
    assert [item.name for item in grid.items] == ["zulu", "alpha"]


def test_item_exists_case_insensitive():
    grid = make_grid()
    assert grid.item_exists("ALPHA")
    assert not grid.item_exists("delta")


def test_item_available_round_trip():
    grid = make_grid()
    assert grid.item_available("bravo") is True
    grid.set_item_available("Bravo", False)
    assert grid.item_available("bravo") is False
    assert grid.item_available("missing") is False


def test_item_available_on_empty_grid_is_false():
    grid = IconGrid(100, 100, 64)
    assert grid.item_available("anything") is False


def test_remove_item_clears_selection():
    grid = make_grid()
    grid.select(1)
    grid.remove_item("BRAVO")
    assert not grid.item_exists("bravo")
    assert len(grid.items) == 2
    assert grid.selection_index == constants.NO_SELECTION


def test_remove_missing_item_keeps_items():
    grid = make_grid()
    grid.remove_item("delta")
    assert len(grid.items) == 3


def test_drop_all_items():
    grid = make_grid()
    grid.select(2)
    grid.drop_all_items()
    assert grid.empty
    assert grid.selection_index == constants.NO_SELECTION


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_select_out_of_range_is_ignored(index):
    grid = make_grid()
    grid.select(1)
    grid.select(index)
    assert grid.selection_index == 1


def test_select_meta_selects_first_match():
    grid = make_grid()
    grid.select_meta(20)
    assert grid.item_name(grid.selection_index) == "charlie"
    grid.select_meta(999)
    assert grid.item_name(grid.selection_index) == "charlie"


def test_item_name_negative_index_raises():
    grid = make_grid()
    with pytest.raises(IndexError):
        grid.item_name(-1)


def test_increment_wraps_and_emits():
    grid = make_grid()
    received = recorder(grid)
    grid.select(2)
    grid.increment_selection()
    assert grid.selection_index == 0
    assert received == [grid.items[0]]


def test_decrement_wraps_and_emits():
    grid = make_grid()
    received = recorder(grid)
    grid.select(0)
    grid.decrement_selection()
    assert grid.selection_index == len(grid.items) - 1
    assert received[-1].name == "charlie"


def test_decrement_on_empty_emits_none():
    grid = IconGrid(100, 100, 64)
    received = recorder(grid)
    grid.decrement_selection()
    assert grid.selection_index == constants.NO_SELECTION
    assert received == [None]


def test_increment_on_empty_emits_none():
    grid = IconGrid(100, 100, 64)
    received = recorder(grid)
    grid.increment_selection()
    assert received == [None]


def test_hide_clears_selection():
    grid = make_grid()
    grid.select(1)
    grid.hide()
    assert grid.visible is False
    assert grid.selection_index == constants.NO_SELECTION


def test_mouse_down_selects_clicked_icon():
    grid = make_grid()
    received = recorder(grid)
    grid.on_mouse_down(BUTTON_LEFT, 25, 5)
    assert grid.item_name(grid.selection_index) == "bravo"
    assert received[-1].name == "bravo"


def test_mouse_down_respects_position():
    grid = make_grid()
    grid.position = (300, 200)
    grid.on_mouse_down(BUTTON_LEFT, 305, 205)
    assert grid.item_name(grid.selection_index) == "alpha"


def test_mouse_down_on_empty_cell_emits_none():
    grid = make_grid()
    received = recorder(grid)
    grid.select(0)
    grid.on_mouse_down(BUTTON_LEFT, 5, 45)
    assert grid.selection_index == constants.NO_SELECTION
    assert received == [None]


def test_mouse_down_ignores_other_buttons_and_hidden():
    grid = make_grid()
    received = recorder(grid)
    grid.on_mouse_down(BUTTON_RIGHT, 5, 5)
    grid.visible = False
    grid.on_mouse_down(BUTTON_LEFT, 5, 5)
    assert received == []
    assert grid.selection_index == constants.NO_SELECTION


def test_mouse_down_outside_grid_does_nothing():
    grid = make_grid()
    received = recorder(grid)
    grid.on_mouse_down(BUTTON_LEFT, 500, 500)
    assert received == []


def test_mouse_motion_highlights_and_clears():
    grid = make_grid()
    grid.on_mouse_motion(45, 5)
    assert grid.item_name(grid.highlight_index) == "charlie"
    grid.on_mouse_motion(500, 500)
    assert grid.highlight_index == constants.NO_SELECTION
    grid.on_mouse_motion(5, 45)
    assert grid.highlight_index == constants.NO_SELECTION


def test_mouse_motion_without_focus_does_nothing():
    grid = make_grid()
    grid.has_focus = False
    grid.on_mouse_motion(5, 5)
    assert grid.highlight_index == constants.NO_SELECTION