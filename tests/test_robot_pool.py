from dataclasses import dataclass

from outposthd.robot_pool import (
    clear_robots,
    control_count,
    first_idle,
    idle_count,
    remove_robot,
)


@dataclass(eq=False)
class Bot:
    idle: bool = True
    dead: bool = False


def test_first_idle_skips_busy_robots():
    busy = Bot(idle=False)
    free = Bot(idle=True)
    assert first_idle([busy, free]) is free


def test_first_idle_none_when_all_busy():
    assert first_idle([Bot(idle=False), Bot(idle=False)]) is None


def test_idle_count_matches_idle_robots():
    robots = [Bot(idle=True), Bot(idle=False), Bot(idle=True)]
    assert idle_count(robots) == len([r for r in robots if r.idle])


def test_control_count_ignores_idle_and_dead():
    working = Bot(idle=False)
    robots = [working, Bot(idle=True), Bot(idle=False, dead=True)]
    assert control_count(robots) == 1


def test_control_count_empty():
    assert control_count([]) == 0


def test_remove_robot_only_removes_target():
    a, b = Bot(), Bot()
    robots = [a, b]
    remove_robot(robots, a)
    assert robots == [b]


def test_remove_missing_robot_leaves_list():
    a = Bot()
    robots = [a]
    remove_robot(robots, Bot())
    assert robots == [a]


def test_clear_robots_empties_list():
    robots = [Bot(), Bot()]
    clear_robots(robots)
    assert robots == []