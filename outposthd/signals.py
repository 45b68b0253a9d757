"""A small observer-style signal used to wire UI events to handlers."""

from __future__ import annotations

from typing import Any, Callable, Iterator

Slot = Callable[..., Any]


class Signal:
    """A list of callables invoked together when the signal is emitted.

    A slot is connected at most once; connecting it again has no effect.
    Slots are called in the order they were connected.
    """

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def connect(self, slot: Slot) -> None:
        """Attach ``slot`` so it is called whenever the signal is emitted."""
        if slot not in self._slots:
            self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Detach ``slot``; detaching a slot that is not connected does nothing."""
        if slot in self._slots:
            self._slots.remove(slot)

    def __call__(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Slot]:
        return iter(list(self._slots))

    def __bool__(self) -> bool:
        return True