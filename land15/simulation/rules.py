"""Day rules — compute one day's cell states from the previous day's.

``step_day`` reads only from the read board and writes only interior
cells of the write board, so the two generations never alias.  Rules
that apply to every cell (moisture exchange) run first; vegetation
growth is then dispatched on cover type through ``COVER_RULES``.

Fire is carried but never started: ``burning`` is copied unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from land15.world.square import Lulc

if TYPE_CHECKING:
    from land15.simulation.config import Land15Config
    from land15.world.board import Board

INTERIOR = np.s_[1:-1, 1:-1]

# (biomass, soil water, config) -> next biomass, for the masked cells only
CoverRule = Callable[..., NDArray[np.float64]]


def neighbour_mean(grid: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return the mean of the four cardinal neighbours of each interior cell."""
    return (grid[:-2, 1:-1] + grid[2:, 1:-1] + grid[1:-1, :-2] + grid[1:-1, 2:]) / 4.0


def _logistic(
    biomass: NDArray[np.float64],
    soil: NDArray[np.float64],
    capacity: float,
    config: Land15Config,
) -> NDArray[np.float64]:
    """Grow biomass toward ``capacity``, slowed on dry soil."""
    if capacity <= 0:
        return np.zeros_like(biomass)
    wetness = 1.0
    if config.ambient_inundation > 0:
        wetness = np.clip(soil / config.ambient_inundation, 0.0, 1.0)
    growth = config.biomass_growth_rate * wetness * biomass * (1.0 - biomass / capacity)
    return np.clip(biomass + growth, 0.0, None)


def grow_trees(
    biomass: NDArray[np.float64],
    soil: NDArray[np.float64],
    config: Land15Config,
) -> NDArray[np.float64]:
    return _logistic(biomass, soil, config.tree_biomass, config)


def grow_grass(
    biomass: NDArray[np.float64],
    soil: NDArray[np.float64],
    config: Land15Config,
) -> NDArray[np.float64]:
    return _logistic(biomass, soil, config.grass_biomass, config)


COVER_RULES: dict[Lulc, CoverRule] = {
    Lulc.TREES: grow_trees,
    Lulc.GRASS: grow_grass,
}


def step_day(read: Board, write: Board, config: Land15Config) -> None:
    """Write the next day's interior cells into ``write``.

    Args:
        read: The current board; never modified.
        write: The board to fill; its border is left untouched.
        config: Rates and ambient levels for the rules.
    """
    cover = read.cover[INTERIOR]
    water = cover == Lulc.WATER

    write.cover[INTERIOR] = cover
    write.burning[INTERIOR] = read.burning[INTERIOR]
    write.elevation[INTERIOR] = read.elevation[INTERIOR]
    write.temperature[INTERIOR] = read.temperature[INTERIOR]
    write.pollution[INTERIOR] = read.pollution[INTERIOR]

    # Open water holds humidity and soil water at the ambient level,
    # acting as a fixed source or sink for the land around it.
    humidity = read.humidity[INTERIOR]
    humidity = humidity + config.humidity_exchange * (
        neighbour_mean(read.humidity) - humidity
    )
    write.humidity[INTERIOR] = np.where(water, config.ambient_humidity, humidity)

    soil = read.inundation[INTERIOR]
    soil = soil + config.soil_exchange * (neighbour_mean(read.inundation) - soil)
    soil = soil + config.daily_rainfall - config.soil_evaporation * soil
    soil = np.where(water, config.ambient_inundation, np.clip(soil, 0.0, None))
    write.inundation[INTERIOR] = soil

    biomass = read.biomass[INTERIOR].copy()
    for lulc, rule in COVER_RULES.items():
        cells = cover == lulc
        if cells.any():
            biomass[cells] = rule(biomass[cells], soil[cells], config)
    biomass[water] = 0.0
    write.biomass[INTERIOR] = biomass

    write.nutrients[INTERIOR] = np.where(water, 0.0, read.nutrients[INTERIOR])
