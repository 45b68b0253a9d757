"""Base class for game states that can be stacked and switched between."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Wrapper(ABC):
    """A game state that can be pushed onto a state stack.

    Only the state on top of the stack is active. Subclasses hook their
    event handlers up in :meth:`_activate` and release them in
    :meth:`_deactivate`.
    """

    def __init__(self) -> None:
        self._active = False

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the state before its first update."""

    @abstractmethod
    def update(self) -> Optional[object]:
        """Run one frame and return the next state, or ``None`` to finish."""

    @abstractmethod
    def _activate(self) -> None:
        """Called when the state becomes the top of the stack."""

    @abstractmethod
    def _deactivate(self) -> None:
        """Called when the state stops being the top of the stack."""

    def activate(self) -> None:
        """Mark the state active and let it rehook its handlers."""
        self._active = True
        self._activate()

    def deactivate(self) -> None:
        """Mark the state inactive and let it unhook its handlers."""
        self._active = False
        self._deactivate()

    @property
    def active(self) -> bool:
        """Whether the state is currently the active one."""
        return self._active


WrapperStack = list[Wrapper]