"""Field initialisation — stamp default environmental values by cover type."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from land15.world.square import Lulc

if TYPE_CHECKING:
    from land15.simulation.config import Land15Config
    from land15.world.board import Board


def initialize_fields(board: Board, config: Land15Config) -> None:
    """Fill every non-cover field of ``board`` from its cover layout.

    Ambient temperature, humidity and soil water are shared by all cells.
    Only Trees and Grass start with nutrients and biomass; water and bare
    cover types start with none.  Elevation is left as is.

    Args:
        board: Board whose ``cover`` is already final.
        config: Source of the ambient and vegetation constants.
    """
    cover = board.cover
    trees = cover == Lulc.TREES
    grass = cover == Lulc.GRASS

    board.burning[:] = False
    board.temperature[:] = config.ambient_temperature_c
    board.humidity[:] = config.ambient_humidity
    board.inundation[:] = config.ambient_inundation
    board.pollution[:] = 0.0
    board.nutrients[:] = np.where(trees | grass, config.plant_nutrients, 0.0)
    board.biomass[:] = np.where(
        trees,
        config.tree_biomass,
        np.where(grass, config.grass_biomass, 0.0),
    )
