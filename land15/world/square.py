"""Square — the full state of one grid position.

Boards store each field as a separate array; a ``Square`` is the
per-cell snapshot handed out to readers such as the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Lulc(IntEnum):
    """Land-use / land-cover classification of a cell."""

    UNKNOWN = 0
    SAND = 1
    WATER = 2
    TREES = 3
    LOW_BUILT = 4
    HIGH_BUILT = 5
    GRASS = 6
    ROCK = 7
    AGRICULTURE = 8
    WASTELAND = 9
    BARE = 10


@dataclass(frozen=True)
class Square:
    """A read-only snapshot of one cell.

    Attributes:
        cover: Land-cover class.
        burning: Whether the cell is on fire.
        elevation: Height above sea level in metres.
        temperature: Air temperature in degrees Celsius.
        humidity: Absolute humidity in g/m³.
        inundation: Soil water in g/m³.
        nutrients: Nutrient density in g/m³ (ppm).
        pollution: Pollutant density in g/m³ (ppm).
        biomass: Living plant matter (fuel) in g/m².
    """

    cover: Lulc = Lulc.WATER
    burning: bool = False
    elevation: float = 0.0
    temperature: float = 0.0
    humidity: float = 0.0
    inundation: float = 0.0
    nutrients: float = 0.0
    pollution: float = 0.0
    biomass: float = 0.0
