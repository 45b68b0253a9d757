"""Resource trends shown in the resource breakdown panel."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

RESOURCE_NAMES = ("common_metals", "common_minerals", "rare_metals", "rare_minerals")

Color = tuple[int, int, int, int]
WHITE: Color = (255, 255, 255, 255)


class ResourceAmounts(Protocol):
    """What the breakdown needs from a pool of refined resources."""

    common_metals: int
    common_minerals: int
    rare_metals: int
    rare_minerals: int


class ResourceTrend(Enum):
    """Direction a resource amount moved since the previous turn."""

    NONE = "none"
    UP = "up"
    DOWN = "down"


_ICON_SLICE: dict[ResourceTrend, tuple[float, float]] = {
    ResourceTrend.NONE: (16.0, 64.0),
    ResourceTrend.UP: (8.0, 64.0),
    ResourceTrend.DOWN: (0.0, 64.0),
}

_TEXT_COLOR: dict[ResourceTrend, Color] = {
    ResourceTrend.NONE: (255, 255, 255, 255),
    ResourceTrend.UP: (0, 185, 0, 255),
    ResourceTrend.DOWN: (255, 0, 0, 255),
}


def compare_resources(current: int, previous: int) -> ResourceTrend:
    """Return the trend from ``previous`` to ``current``."""
    if current > previous:
        return ResourceTrend.UP
    if current < previous:
        return ResourceTrend.DOWN
    return ResourceTrend.NONE


def trend_icon_slice(trend: ResourceTrend) -> tuple[float, float]:
    """Return the icon sheet position of the arrow drawn for ``trend``."""
    return _ICON_SLICE[trend]


def trend_color(trend: ResourceTrend) -> Color:
    """Return the text colour used for a change with ``trend``."""
    return _TEXT_COLOR[trend]


class ResourceBreakdown:
    """Tracks how each refined resource changed between turns."""

    def __init__(self) -> None:
        self.trends: dict[str, ResourceTrend] = {
            name: ResourceTrend.NONE for name in RESOURCE_NAMES
        }
        self.colors: dict[str, Color] = {name: WHITE for name in RESOURCE_NAMES}

    def check(
        self, current: ResourceAmounts, previous: ResourceAmounts
    ) -> dict[str, ResourceTrend]:
        """Recompute the trend and colour of every resource and return the trends."""
        for name in RESOURCE_NAMES:
            trend = compare_resources(getattr(current, name), getattr(previous, name))
            self.trends[name] = trend
            self.colors[name] = trend_color(trend)
        return dict(self.trends)

    def deltas(
        self, current: ResourceAmounts, previous: ResourceAmounts
    ) -> dict[str, int]:
        """Return the change in every resource since ``previous``."""
        return {
            name: getattr(current, name) - getattr(previous, name)
            for name in RESOURCE_NAMES
        }