"""Game configuration defaults and window-event driven settings updates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from outposthd import constants

OPTION_SKIP_SPLASH = "skip-splash"
OPTION_MAXIMIZED = "maximized"


@dataclass
class Configuration:
    """Video settings plus free-form string options."""

    graphics_width: int = 800
    graphics_height: int = 600
    fullscreen: bool = False
    options: dict[str, str] = field(default_factory=dict)

    def option(self, name: str, value: Optional[str] = None) -> str:
        """Return option ``name`` (empty if unset), or set it when ``value`` is given."""
        if value is not None:
            self.options[name] = value
            return value
        return self.options.get(name, "")


def apply_defaults(config: Configuration, config_exists: bool) -> None:
    """Fill in the settings the game expects when they are missing.

    Without a configuration file the window starts at the minimum size in
    windowed mode. The splash screen is shown and the window maximized
    unless the options say otherwise.
    """
    if not config_exists:
        config.graphics_width = constants.MINIMUM_WINDOW_WIDTH
        config.graphics_height = constants.MINIMUM_WINDOW_HEIGHT
        config.fullscreen = False

    if not config.option(OPTION_SKIP_SPLASH):
        config.option(OPTION_SKIP_SPLASH, "false")
    if not config.option(OPTION_MAXIMIZED):
        config.option(OPTION_MAXIMIZED, "true")


def validate_video_resolution(config: Configuration) -> None:
    """Raise the resolution to the minimum window size and force windowed mode."""
    config.graphics_width = max(config.graphics_width, constants.MINIMUM_WINDOW_WIDTH)
    config.graphics_height = max(config.graphics_height, constants.MINIMUM_WINDOW_HEIGHT)
    config.fullscreen = False


class WindowEventWrapper:
    """Keeps the configuration in step with window maximize, restore and resize."""

    def __init__(self, config: Configuration) -> None:
        self.config = config

    @property
    def maximized(self) -> bool:
        return self.config.option(OPTION_MAXIMIZED) == "true"

    def on_window_maximized(self) -> None:
        self.config.option(OPTION_MAXIMIZED, "true")

    def on_window_restored(self) -> None:
        self.config.option(OPTION_MAXIMIZED, "false")

    def on_window_resized(self, width: int, height: int) -> None:
        """Remember the new size, unless the window is maximized."""
        if self.maximized:
            return
        self.config.graphics_width = width
        self.config.graphics_height = height