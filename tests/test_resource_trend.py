from dataclasses import dataclass

import pytest

from outposthd.resource_trend import (
    RESOURCE_NAMES,
    ResourceBreakdown,
    ResourceTrend,
    compare_resources,
    trend_color,
    trend_icon_slice,
)


@dataclass
class Pool:
    common_metals: int = 0
    common_minerals: int = 0
    rare_metals: int = 0
    rare_minerals: int = 0


@pytest.mark.parametrize(
    "current, previous, expected",
    [
        (5, 3, ResourceTrend.UP),
        (3, 5, ResourceTrend.DOWN),
        (4, 4, ResourceTrend.NONE),
    ],
)
def test_compare_resources(current, previous, expected):
    assert compare_resources(current, previous) is expected


def test_icon_slices_fixed_by_source():
    assert trend_icon_slice(ResourceTrend.NONE) == (16.0, 64.0)
    assert trend_icon_slice(ResourceTrend.UP) == (8.0, 64.0)
    assert trend_icon_slice(ResourceTrend.DOWN) == (0.0, 64.0)


def test_colors_fixed_by_source():
    assert trend_color(ResourceTrend.NONE) == (255, 255, 255, 255)
    assert trend_color(ResourceTrend.UP) == (0, 185, 0, 255)
    assert trend_color(ResourceTrend.DOWN) == (255, 0, 0, 255)


def test_initial_state_is_flat():
    breakdown = ResourceBreakdown()
    assert set(breakdown.trends.values()) == {ResourceTrend.NONE}
    assert set(breakdown.colors.values()) == {trend_color(ResourceTrend.NONE)}


def test_check_sets_trends_and_colors():
    breakdown = ResourceBreakdown()
    current = Pool(common_metals=10, common_minerals=2, rare_metals=7, rare_minerals=7)
    previous = Pool(common_metals=4, common_minerals=9, rare_metals=7, rare_minerals=1)
    trends = breakdown.check(current, previous)
    assert trends == {
        "common_metals": ResourceTrend.UP,
        "common_minerals": ResourceTrend.DOWN,
        "rare_metals": ResourceTrend.NONE,
        "rare_minerals": ResourceTrend.UP,
    }
    for name in RESOURCE_NAMES:
        assert breakdown.colors[name] == trend_color(trends[name])


def test_deltas_agree_with_trends():
    breakdown = ResourceBreakdown()
    current = Pool(10, 2, 7, 7)
    previous = Pool(4, 9, 7, 1)
    deltas = breakdown.deltas(current, previous)
    trends = breakdown.check(current, previous)
    for name in RESOURCE_NAMES:
        assert deltas[name] == getattr(current, name) - getattr(previous, name)
        assert compare_resources(deltas[name], 0) is trends[name]


def test_deltas_zero_for_same_pool():
    pool = Pool(3, 4, 5, 6)
    assert set(ResourceBreakdown().deltas(pool, pool).values()) == {0}