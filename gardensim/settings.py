"""Tunable constants for the garden simulation."""

from typing import Final


class GardenSettings:
    """Reference levels of water and nutrients in the garden."""

    water_min: Final = 80
    water_max: Final = 100
    nutrients_min: Final = 40
    nutrients_max: Final = 50


class WateringCanSettings:
    """Watering can capacity and dose."""

    capacity: Final = 200
    dose: Final = 10


class FertilizerSettings:
    """Fertilizer bag capacity and dose."""

    capacity: Final = 100
    dose: Final = 10


class GardenerSettings:
    """Limits on what the gardener may do per turn."""

    max_moves: Final = 10
    max_entries_exits: Final = 1
    max_plantings: Final = 2
    max_harvests: Final = 5


class CactusSettings:
    """Behaviour of the cactus."""

    water_absorption_percent: Final = 25
    nutrient_absorption: Final = 5
    dies_soil_water_above: Final = 100
    dies_soil_water_turns: Final = 3
    dies_soil_nutrients_below: Final = 1
    dies_soil_nutrients_turns: Final = 3
    multiplies_nutrients_above: Final = 100
    multiplies_water_above: Final = 50


class RosebushSettings:
    """Behaviour of the rosebush."""

    initial_water: Final = 25
    initial_nutrients: Final = 25
    water_loss: Final = 4
    nutrient_loss: Final = 4
    water_absorption: Final = 5
    nutrient_absorption: Final = 8
    dies_water_below: Final = 1
    dies_nutrients_below: Final = 1
    dies_nutrients_above: Final = 199
    multiplies_nutrients_above: Final = 100
    new_nutrients: Final = 25
    new_water_percent: Final = 50
    original_nutrients: Final = 100
    original_water_percent: Final = 50


class WeedSettings:
    """Behaviour of the weed."""

    initial_water: Final = 5
    initial_nutrients: Final = 5
    water_absorption: Final = 1
    nutrient_absorption: Final = 1
    dies_after_turns: Final = 60
    multiplies_nutrients_above: Final = 30
    multiplies_turns: Final = 5
    new_nutrients: Final = 5
    original_nutrients: Final = 5


class ExoticSettings:
    """Behaviour of the exotic plant."""

    initial_water: Final = 25
    initial_nutrients: Final = 25
    water_loss: Final = 4
    nutrient_loss: Final = 4
    water_absorption: Final = 5
    nutrient_absorption: Final = 8
    dies_water_below: Final = 1
    dies_nutrients_below: Final = 1
    dies_nutrients_above: Final = 199
    multiplies_nutrients_above: Final = 100
    new_nutrients: Final = 25
    new_water_percent: Final = 50
    original_nutrients: Final = 100
    original_water_percent: Final = 50