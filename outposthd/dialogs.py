"""Modal windows: game options, game over and major event announcements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from outposthd import constants
from outposthd.signals import Signal


@dataclass
class _Button:
    text: str
    position: tuple[int, int]
    size: tuple[int, int]
    enabled: bool = True
    clicked: Signal = field(default_factory=Signal)

    def click(self) -> None:
        if self.enabled:
            self.clicked()


class _Window:
    def __init__(self, title: str, size: tuple[int, int]) -> None:
        self.title = title
        self.position = (0, 0)
        self.size = size
        self.anchored = True
        self.visible = True
        self.enabled = True

    def hide(self) -> None:
        self.visible = False

    def show(self) -> None:
        self.visible = True


class GameOptionsDialog(_Window):
    """In-game options menu offering save, load, return and quit to menu."""

    def __init__(self) -> None:
        super().__init__(constants.WINDOW_SYSTEM_TITLE, (210, 160))
        self.save_game = Signal()
        self.load_game = Signal()
        self.return_to_game = Signal()
        self.return_to_main_menu = Signal()
        self.buttons: dict[str, _Button] = {
            "save": _Button("Save current game", (5, 25), (200, 25)),
            "load": _Button("Load a saved game", (5, 53), (200, 25)),
            "return": _Button("Return to current game", (5, 91), (200, 25)),
            "close": _Button("Return to Main Menu", (5, 129), (200, 25)),
        }
        self.buttons["save"].clicked.connect(self.save_game)
        self.buttons["load"].clicked.connect(self.load_game)
        self.buttons["return"].clicked.connect(self.return_to_game)
        self.buttons["close"].clicked.connect(self.return_to_main_menu)

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the dialog together with all of its buttons."""
        self.enabled = enabled
        for button in self.buttons.values():
            button.enabled = enabled

    def click(self, button: str) -> None:
        """Click the named button: ``save``, ``load``, ``return`` or ``close``."""
        try:
            target = self.buttons[button]
        except KeyError:
            raise ValueError(f"unknown button: {button!r}") from None
        target.click()


class GameOverDialog(_Window):
    """Shown when the colony has died."""

    HEADER_IMAGE = "ui/interface/game_over.png"
    MESSAGE = "You have failed. Your colony is dead."

    def __init__(self) -> None:
        super().__init__("", (522, 340))
        self.header = self.HEADER_IMAGE
        self.message = self.MESSAGE
        self.return_to_main_menu = Signal()
        self.close_button = _Button("Return to Main Menu", (5, 310), (512, 25))
        self.close_button.clicked.connect(self.return_to_main_menu)

    def click_close(self) -> None:
        """Click the close button, which asks to return to the main menu."""
        self.close_button.click()


class AnnouncementType(Enum):
    """Major events that interrupt play with an announcement."""

    COLONY_SHIP_CRASH = "colony_ship_crash"
    COLONY_SHIP_CRASH_WITH_COLONISTS = "colony_ship_crash_with_colonists"


_ANNOUNCEMENTS: dict[AnnouncementType, tuple[str, str]] = {
    AnnouncementType.COLONY_SHIP_CRASH: (
        "ui/interface/colony_ship_crash.png",
        "Colony ship deorbited and crashed on the surface.",
    ),
    AnnouncementType.COLONY_SHIP_CRASH_WITH_COLONISTS: (
        "ui/interface/colony_ship_crash.png",
        "Colony ship deorbited and crashed on the surface but you left colonists on board!",
    ),
}


class MajorEventAnnouncement(_Window):
    """A window announcing a major event, closed with an Okay button."""

    def __init__(self) -> None:
        super().__init__("", (522, 340))
        self.header = ""
        self.message = ""
        self.close_button = _Button("Okay", (5, 310), (512, 25))
        self.close_button.clicked.connect(self.hide)

    def announce(self, kind: AnnouncementType) -> None:
        """Set the header image and message for ``kind``."""
        try:
            self.header, self.message = _ANNOUNCEMENTS[kind]
        except (KeyError, TypeError):
            raise ValueError(f"invalid announcement type: {kind!r}") from None

    def click_close(self) -> None:
        """Click the Okay button, which hides the window."""
        self.close_button.click()