# outposthd

Game logic for a colony-management simulation on a distant planet: the
numeric and text constants the game is built on, production costs, robot
pool helpers, product transfers between storage pools, resource trend
tracking, the selectable icon grid used for build menus, the in-game
dialogs and the warehouse report.

The package has no third-party dependencies. Every piece is plain Python
state and functions that a front end can drive and render however it likes.

## What is inside

| Module | Purpose |
| --- | --- |
| `outposthd.constants` | Game numbers, names of structures and products, UI strings, font and pointer paths, and `robot_breakdown_message(robot_name, x, y)` |
| `outposthd.signals` | `Signal`, a callback list with `connect`, `disconnect` and calling; a slot is connected at most once and slots run in connection order |
| `outposthd.production_cost` | `ProductionCost`, a dataclass of turns and materials needed to build an item, with `clear()` |
| `outposthd.font_manager` | `FontManager`, a cache of fonts keyed by name and point size, loaded through a caller-supplied `loader(name, size)` |
| `outposthd.robot_pool` | `clear_robots`, `first_idle`, `idle_count`, `control_count`, `remove_robot` over any sequence of objects with `idle` and `dead` |
| `outposthd.products` | `transfer_products(source, destination, product_types, storage_required, storage_per_unit)`, moving as many products as fit |
| `outposthd.state_stack` | `Wrapper`, an abstract game state with `initialize`, `update`, `activate`, `deactivate` and an `active` property; `WrapperStack` is a list of them |
| `outposthd.settings` | `Configuration`, `apply_defaults`, `validate_video_resolution` and `WindowEventWrapper`, which keeps the configuration in step with maximize, restore and resize |
| `outposthd.resource_trend` | `ResourceTrend`, `compare_resources`, `trend_icon_slice`, `trend_color` and `ResourceBreakdown` with `check` and `deltas` |
| `outposthd.dialogs` | `GameOptionsDialog`, `GameOverDialog`, `AnnouncementType` and `MajorEventAnnouncement` |
| `outposthd.icon_grid` | `IconGrid` and `IconGridItem`: layout, case-insensitive item lookup, selection, highlighting and mouse handling |
| `outposthd.warehouse_report` | `StructureState`, `WarehouseFilter`, `CapacitySummary`, `ProductItem`, `uses_state_string`, `warehouse_status`, `compute_capacity`, `filter_warehouses`, `product_items` |

## Examples

Signals connect any callable and call each one in turn:

```python
from outposthd.signals import Signal

saved = []
on_save = Signal()
on_save.connect(lambda: saved.append(True))
on_save()
assert saved == [True]
```

Fonts are loaded once per name and size, then served from the cache:

```python
from outposthd.font_manager import FontManager
from outposthd.constants import FONT_PRIMARY, FONT_PRIMARY_NORMAL

fonts = FontManager(loader=lambda name, size: (name, size))
first = fonts.font(FONT_PRIMARY, FONT_PRIMARY_NORMAL)
again = fonts.font(FONT_PRIMARY, FONT_PRIMARY_NORMAL)
assert first is again and len(fonts) == 1
```

An icon grid lays items out in rows and columns and tracks selection:

```python
from outposthd.icon_grid import IconGrid

grid = IconGrid(width=200, height=100, sheet_width=256)
grid.set_icon_size(46)
grid.set_icon_margin(2)
grid.add_item_sorted("Smelter", 3, 0)
grid.add_item_sorted("Agricultural Dome", 1, 0)
grid.select(0)
print(grid.item_name(0))   # "Agricultural Dome": items are kept sorted by name
```

The options dialog forwards its buttons to signals:

```python
from outposthd.dialogs import GameOptionsDialog

dialog = GameOptionsDialog()
dialog.save_game.connect(lambda: print("saving"))
dialog.click("save")       # buttons: "save", "load", "return", "close"
```

Resource trends compare this turn's amount with last turn's:

```python
from outposthd.resource_trend import compare_resources, trend_color

trend = compare_resources(120, 100)
print(trend, trend_color(trend))   # ResourceTrend.UP (0, 185, 0, 255)
```

Configuration defaults are filled in before the game starts:

```python
from outposthd.settings import Configuration, apply_defaults, validate_video_resolution

config = Configuration()
apply_defaults(config, config_exists=False)
validate_video_resolution(config)
print(config.graphics_width, config.graphics_height, config.option("maximized"))
# 1000 700 true
```

## What it does not do

The package has no command to start a game, no window, renderer, audio or
input handling, and no game loop: `Wrapper` only describes a state, and
nothing here runs a stack of them. `Configuration` lives in memory only and
is neither read from nor written to a file, and there is no saving or
loading of games. The dialogs, icon grid and reports keep their state and
raise their signals, but drawing them is left to the caller.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.