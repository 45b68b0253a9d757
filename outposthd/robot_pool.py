"""Helpers for managing collections of robots in a robot pool."""

from __future__ import annotations

from typing import MutableSequence, Optional, Protocol, Sequence, TypeVar


class RobotLike(Protocol):
    """What the helpers need from a robot."""

    @property
    def idle(self) -> bool: ...

    @property
    def dead(self) -> bool: ...


RobotT = TypeVar("RobotT", bound=RobotLike)


def clear_robots(robots: MutableSequence[RobotLike]) -> None:
    """Remove every robot from ``robots``."""
    robots.clear()


def first_idle(robots: Sequence[RobotT]) -> Optional[RobotT]:
    """Return the first idle robot, or ``None`` if none is idle."""
    return next((robot for robot in robots if robot.idle), None)


def idle_count(robots: Sequence[RobotLike]) -> int:
    """Return how many robots are idle."""
    return sum(1 for robot in robots if robot.idle)


def control_count(robots: Sequence[RobotLike]) -> int:
    """Return how many robots are busy and alive, and so need command capacity."""
    return sum(1 for robot in robots if not robot.idle and not robot.dead)


def remove_robot(robots: MutableSequence[RobotT], robot: RobotT) -> None:
    """Remove ``robot`` from ``robots`` if it is there."""
    if robot in robots:
        robots.remove(robot)