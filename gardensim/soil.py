"""A single cell of garden soil."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from gardensim.plants import Plant

MAX_WATER = 10
EMPTY_SYMBOL = "."


@dataclass
class Soil:
    """Water and nutrient levels of one cell, plus the plant growing there."""

    water: int = 5
    nutrients: int = 5
    plant: Optional[Plant] = None

    def add_water(self, amount: int) -> None:
        """Add water, capped at the soil's maximum."""
        self.water = min(self.water + amount, MAX_WATER)

    def remove_nutrients(self, amount: int) -> None:
        """Remove nutrients, never going below zero."""
        self.nutrients = max(self.nutrients - amount, 0)

    def place_plant(self, plant: Plant) -> None:
        """Put a plant in this cell."""
        self.plant = plant

    def remove_plant(self) -> None:
        """Remove the plant from this cell, if any."""
        self.plant = None

    def has_plant(self) -> bool:
        return self.plant is not None

    def render(self) -> str:
        """The one-character map symbol of this cell."""
        return self.plant.symbol if self.plant is not None else EMPTY_SYMBOL

    def describe(self) -> str:
        """A detailed one-line description of this cell."""
        text = f"Água: {self.water} | Nutrientes: {self.nutrients} | Planta: "
        if self.plant is None:
            return text + "Nenhuma"
        state = "viva" if self.plant.alive else "morta"
        return f"{text}{self.plant.symbol} ({state})"