"""A grid of selectable icons taken from an icon sheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from outposthd import constants
from outposthd.signals import Signal

BUTTON_LEFT = 1
BUTTON_MIDDLE = 2
BUTTON_RIGHT = 3


@dataclass
class IconGridItem:
    """One icon in the grid.

    ``pos`` is the top-left corner of the icon on the icon sheet.
    """

    name: str = ""
    meta: int = 0
    available: bool = True
    pos: tuple[float, float] = (0.0, 0.0)


def _same_name(left: str, right: str) -> bool:
    return left.lower() == right.lower()


class IconGrid:
    """A 2D grid of icons that can be selected and highlighted with the mouse.

    ``selection_changed`` is emitted with the selected :class:`IconGridItem`,
    or ``None`` when nothing is selected.
    """

    def __init__(self, width: int, height: int, sheet_width: int) -> None:
        self.position: tuple[int, int] = (0, 0)
        self.width = width
        self.height = height
        self.sheet_width = sheet_width

        self.icon_size = 0
        self.icon_margin = 0

        self.visible = True
        self.has_focus = True
        self.show_tooltip = False
        self.auto_sort = True

        self.items: list[IconGridItem] = []
        self.selection_index = constants.NO_SELECTION
        self.highlight_index = constants.NO_SELECTION
        self.grid_size: tuple[int, int] = (0, 0)

        self.selection_changed = Signal()
        self._update_grid()

    @property
    def empty(self) -> bool:
        """Whether the grid holds no items."""
        return not self.items

    def resize(self, width: int, height: int) -> None:
        """Change the grid's dimensions and recompute its columns and rows."""
        self.width = width
        self.height = height
        self._update_grid()

    def set_icon_size(self, size: int) -> None:
        """Set the edge length of an icon in pixels."""
        self.icon_size = size
        self._update_grid()

    def set_icon_margin(self, margin: int) -> None:
        """Set the spacing between icons and between icons and the grid edges."""
        self.icon_margin = margin
        self._update_grid()

    @property
    def _cell(self) -> int:
        return self.icon_size + self.icon_margin

    def _update_grid(self) -> None:
        cell = self._cell
        if cell <= 0:
            self.grid_size = (0, 0)
            return
        cols = int((self.width - self.icon_margin * 2) / cell)
        rows = int((self.height - self.icon_margin * 2) / cell)
        self.grid_size = (cols, rows)

    def item_name(self, index: int) -> str:
        """Return the name of the item at ``index``."""
        if index < 0:
            raise IndexError(f"item index out of range: {index}")
        return self.items[index].name

    def add_item(self, name: str, sheet_index: int, meta: int = 0) -> IconGridItem:
        """Append an item whose icon is cell ``sheet_index`` of the icon sheet."""
        if self.icon_size <= 0:
            raise ValueError("icon size must be set before adding items")
        sheet_columns = self.sheet_width // self.icon_size
        if sheet_columns == 0:
            raise ValueError("icon sheet is narrower than one icon")
        x = (sheet_index % sheet_columns) * self.icon_size
        y = (sheet_index // sheet_columns) * self.icon_size
        item = IconGridItem(name=name, meta=meta, pos=(float(x), float(y)))
        self.items.append(item)
        return item

    def add_item_sorted(self, name: str, sheet_index: int, meta: int = 0) -> IconGridItem:
        """Append an item and then sort the grid."""
        item = self.add_item(name, sheet_index, meta)
        self.sort()
        return item

    def _find(self, name: str) -> Optional[IconGridItem]:
        return next((item for item in self.items if _same_name(item.name, name)), None)

    def remove_item(self, name: str) -> None:
        """Remove the first item named ``name`` (case-insensitive) and clear the selection."""
        item = self._find(name)
        if item is None:
            return
        self.items.remove(item)
        self.clear_selection()
        self.sort()

    def item_exists(self, name: str) -> bool:
        """Whether an item named ``name`` (case-insensitive) is in the grid."""
        return self._find(name) is not None

    def set_item_available(self, name: str, available: bool) -> None:
        """Mark the item named ``name`` as available or not."""
        item = self._find(name)
        if item is not None:
            item.available = available

    def item_available(self, name: str) -> bool:
        """Whether the item named ``name`` is available; ``False`` if absent."""
        item = self._find(name)
        return item.available if item is not None else False

    def drop_all_items(self) -> None:
        """Remove every item and clear the selection."""
        self.items.clear()
        self.clear_selection()

    def clear_selection(self) -> None:
        """Clear both the highlighted and the selected item."""
        self.highlight_index = constants.NO_SELECTION
        self.selection_index = constants.NO_SELECTION

    def select(self, index: int) -> None:
        """Select the item at ``index``; an out-of-range index is ignored."""
        if 0 <= index < len(self.items):
            self.selection_index = index

    def select_meta(self, meta: int) -> None:
        """Select the first item whose meta value is ``meta``, if there is one."""
        for index, item in enumerate(self.items):
            if item.meta == meta:
                self.selection_index = index
                return

    def increment_selection(self) -> None:
        """Move the selection to the next item, wrapping to the first."""
        if not self.items:
            self.selection_index = constants.NO_SELECTION
        else:
            self.selection_index += 1
            if self.selection_index >= len(self.items):
                self.selection_index = 0
        self._raise_changed()

    def decrement_selection(self) -> None:
        """Move the selection to the previous item, wrapping to the last."""
        self.selection_index -= 1
        if self.selection_index < 0:
            self.selection_index = len(self.items) - 1
        self._raise_changed()

    def _raise_changed(self) -> None:
        if self.selection_index != constants.NO_SELECTION:
            self.selection_changed(self.items[self.selection_index])
        else:
            self.selection_changed(None)

    def hide(self) -> None:
        """Hide the grid and clear its selection."""
        self.visible = False
        self.clear_selection()

    def show(self) -> None:
        self.visible = True

    def sort(self) -> None:
        """Order the items by name, if the grid keeps itself sorted."""
        if self.auto_sort:
            self.items.sort(key=lambda item: item.name)

    def _index_at(self, x: int, y: int) -> Optional[int]:
        """Return the grid index under (x, y), or ``None`` outside the icon area."""
        if not self.items or self._cell <= 0:
            return None
        left, top = self.position
        cols, rows = self.grid_size
        cell = self._cell
        inside = left <= x <= left + cols * cell and top <= y <= top + rows * cell
        if not inside:
            return None
        return (x - left) // cell + cols * ((y - top) // cell)

    def on_mouse_down(self, button: int, x: int, y: int) -> None:
        """Select the icon under a left click."""
        if not self.visible or not self.has_focus:
            return
        if button != BUTTON_LEFT:
            return
        index = self._index_at(x, y)
        if index is None:
            return
        self.selection_index = (
            index if index < len(self.items) else constants.NO_SELECTION
        )
        self._raise_changed()

    def on_mouse_motion(self, x: int, y: int) -> None:
        """Highlight the icon under the mouse pointer."""
        if not self.visible or not self.has_focus:
            return
        index = self._index_at(x, y)
        if index is None or index >= len(self.items):
            self.highlight_index = constants.NO_SELECTION
        else:
            self.highlight_index = index