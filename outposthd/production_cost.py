"""Resource cost and turn count needed to produce an item."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ProductionCost:
    """Materials consumed per turn and the number of turns needed to build."""

    turns_to_build: int = 0
    common_metals: int = 0
    common_minerals: int = 0
    rare_metals: int = 0
    rare_minerals: int = 0

    def clear(self) -> None:
        """Reset every cost and the turn count to zero."""
        self.turns_to_build = 0
        self.common_metals = 0
        self.common_minerals = 0
        self.rare_metals = 0
        self.rare_minerals = 0