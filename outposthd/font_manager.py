"""Caching lookup table for fonts keyed by file name and point size."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

FontT = TypeVar("FontT")


class FontManager(Generic[FontT]):
    """Loads fonts on first request and hands back the cached object afterwards.

    ``loader`` is called as ``loader(name, size)`` to create a font that has
    not been requested before.
    """

    def __init__(self, loader: Callable[[str, int], FontT]) -> None:
        self._loader = loader
        self._fonts: dict[tuple[str, int], FontT] = {}

    def font(self, name: str, size: int) -> FontT:
        """Return the font ``name`` at ``size`` points, loading it if needed."""
        key = (name, size)
        try:
            return self._fonts[key]
        except KeyError:
            loaded = self._loader(name, int(size))
            self._fonts[key] = loaded
            return loaded

    def __len__(self) -> int:
        return len(self._fonts)