"""Plants that grow in the garden."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Optional

from gardensim.settings import (
    CactusSettings,
    ExoticSettings,
    GardenSettings,
    RosebushSettings,
    WeedSettings,
)

if TYPE_CHECKING:
    from gardensim.soil import Soil


class Plant(ABC):
    """A living plant with its own water and nutrient reserves."""

    symbol: ClassVar[str]
    name: ClassVar[str]
    death_message: ClassVar[str]

    def __init__(self, water: int = 0, nutrients: int = 0) -> None:
        self.water = water
        self.nutrients = nutrients
        self.alive = True

    @abstractmethod
    def act(self, soil: Soil) -> Optional[str]:
        """Live through one instant; return a message if the plant died."""

    def die(self, soil: Soil) -> str:
        """Kill the plant, clear it from the soil and return the death message."""
        self.alive = False
        soil.remove_plant()
        return self.death_message

    def add_water(self, amount: int) -> None:
        self.water += amount

    def add_nutrients(self, amount: int) -> None:
        self.nutrients += amount

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(water={self.water}, "
            f"nutrients={self.nutrients}, alive={self.alive})"
        )


class Cactus(Plant):
    """A hardy plant that slowly accumulates water and nutrients."""

    symbol = "C"
    name = "Cacto"
    death_message = "Morreu um cacto."

    def __init__(self) -> None:
        super().__init__(GardenSettings.water_min, GardenSettings.nutrients_min)

    def act(self, soil: Soil) -> Optional[str]:
        self.water += CactusSettings.water_absorption_percent // 10
        self.nutrients += CactusSettings.nutrient_absorption
        return None


class _DemandingPlant(Plant):
    """A plant that loses reserves every instant and dies outside its limits."""

    settings: ClassVar[type]

    def __init__(self) -> None:
        super().__init__(self.settings.initial_water, self.settings.initial_nutrients)

    def act(self, soil: Soil) -> Optional[str]:
        s = self.settings
        self.water -= s.water_loss
        self.nutrients -= s.nutrient_loss
        soil.remove_nutrients(s.nutrient_absorption)
        soil.add_water(s.water_absorption)
        if (
            self.water < s.dies_water_below
            or self.nutrients < s.dies_nutrients_below
            or self.nutrients > s.dies_nutrients_above
        ):
            return self.die(soil)
        return None


class Rosebush(_DemandingPlant):
    symbol = "R"
    name = "Roseira"
    death_message = "Uma roseira murchou."
    settings = RosebushSettings


class Exotic(_DemandingPlant):
    symbol = "E"
    name = "Exotica"
    death_message = "Uma Exotica murchou."
    settings = ExoticSettings


class Weed(Plant):
    """A short-lived plant that withers after a fixed number of instants."""

    symbol = "E"
    name = "ErvaDaninha"
    death_message = "Uma ErvaDaninha murchou."

    def __init__(self) -> None:
        super().__init__(WeedSettings.initial_water, WeedSettings.initial_nutrients)
        self.instants = 0

    def act(self, soil: Soil) -> Optional[str]:
        self.instants += 1
        soil.remove_nutrients(WeedSettings.nutrient_absorption)
        soil.add_water(WeedSettings.water_absorption)
        if self.instants == WeedSettings.dies_after_turns:
            return self.die(soil)
        return None


_KINDS: dict[str, type[Plant]] = {
    "c": Cactus,
    "r": Rosebush,
    "e": Weed,
    "x": Exotic,
}


def create_plant(kind: str) -> Plant:
    """Create a plant from its one-letter kind (c, r, e, x, any case)."""
    try:
        return _KINDS[kind.lower()]()
    except KeyError:
        raise ValueError("Tipo de planta desconhecido.") from None