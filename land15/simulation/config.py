"""Config — load island and simulation parameters from YAML files.

All tunable constants (grid size, island shape, outcrop seeding, height
relaxation, ambient field defaults, day-rule rates) live in YAML and are
parsed into a typed dataclass here.  The engine validates the config once
at construction and never re-checks it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from land15.common.random import RANDOM_SOURCES

MIN_GRID_SIZE = 3

INT_FIELDS = frozenset(
    {
        "w",
        "h",
        "island_warp_harmonics_n",
        "island_grow_cycles",
        "seed",
        "warmup_days",
        "height_relax_iterations",
    },
)


class ConfigError(ValueError):
    """Raised when a configuration cannot describe a valid island."""


@dataclass(frozen=True)
class Land15Config:
    """Island generation and simulation configuration.

    Attributes:
        w: Number of grid columns (>= 3).
        h: Number of grid rows (>= 3).
        island_radius_p: Island radius as a fraction of the normalised
            half-extent; cells whose warped position lies within it are land.
        island_river_aspect_p: Half-width of the river channel in the same
            normalised units.
        island_warp_harmonics_n: Number of sinusoidal warp harmonics.
        island_warp_harmonic_decay: Amplitude ratio between successive
            harmonics.
        island_warp_harmonic_amplitude: Amplitude of the first harmonic.
        island_rock_prob: Per-cell probability of seeding Rock.
        island_tree_prob: Per-cell probability of seeding Trees.
        island_grow_cycles: Number of outcrop growth cycles.
        island_height_offset: Offset added to every raw seed height.
        island_fixed_height_p: Fraction of land cells pinned during height
            relaxation.
        seed: RNG seed for deterministic replay.
        random_source: ``"numpy"`` or ``"xorshift"``.
        warmup_days: Days simulated before the island is observable.
        height_relax_iterations: Rounds of height relaxation.
        elevation_scale_m: Metres per unit of relaxed height.
        ambient_temperature_c: Initial temperature of every cell.
        ambient_humidity: Initial absolute humidity (g/m³); also the
            humidity held over open water.
        ambient_inundation: Initial soil water (g/m³); also the level held
            under open water.
        plant_nutrients: Initial nutrients on vegetated cells (ppm).
        tree_biomass: Initial and carrying-capacity biomass of Trees (g/m²).
        grass_biomass: Initial and carrying-capacity biomass of Grass (g/m²).
        humidity_exchange: Fraction of the gap to the neighbour mean closed
            by humidity each day.
        soil_exchange: Same, for soil water.
        daily_rainfall: Soil water added to land cells each day (g/m³).
        soil_evaporation: Fraction of soil water lost from land each day.
        biomass_growth_rate: Logistic growth rate of vegetation per day.
    """

    w: int = 40
    h: int = 30
    island_radius_p: float = 0.8
    island_river_aspect_p: float = 0.1
    island_warp_harmonics_n: int = 2
    island_warp_harmonic_decay: float = 0.75
    island_warp_harmonic_amplitude: float = 0.1
    island_rock_prob: float = 0.01
    island_tree_prob: float = 0.1
    island_grow_cycles: int = 5
    island_height_offset: float = 1.0
    island_fixed_height_p: float = 0.05

    seed: int = 42
    random_source: str = "numpy"
    warmup_days: int = 3650
    height_relax_iterations: int = 200
    elevation_scale_m: float = 100.0

    # Field defaults
    ambient_temperature_c: float = 20.0
    ambient_humidity: float = 12.0
    ambient_inundation: float = 250.0
    plant_nutrients: float = 5.0
    tree_biomass: float = 20000.0
    grass_biomass: float = 800.0

    # Day rules
    humidity_exchange: float = 0.2
    soil_exchange: float = 0.1
    daily_rainfall: float = 2.5
    soil_evaporation: float = 0.01
    biomass_growth_rate: float = 0.02

    def validate(self) -> None:
        """Check that the configuration describes a buildable island.

        Raises:
            ConfigError: On values of the wrong type, undersized grids,
                probabilities outside ``[0, 1]``, negative counts or
                rates, or an unknown random source.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in INT_FIELDS:
                ok = isinstance(value, int) and not isinstance(value, bool)
                expected = "an integer"
            elif f.name == "random_source":
                ok = isinstance(value, str)
                expected = "a string"
            else:
                ok = isinstance(value, (int, float)) and not isinstance(value, bool)
                expected = "a number"
            if not ok:
                msg = f"{f.name} must be {expected}, got {value!r}"
                raise ConfigError(msg)

        if self.w < MIN_GRID_SIZE or self.h < MIN_GRID_SIZE:
            msg = (
                f"grid {self.w}x{self.h} is smaller than the minimum "
                f"{MIN_GRID_SIZE}x{MIN_GRID_SIZE}"
            )
            raise ConfigError(msg)

        for name in (
            "island_rock_prob",
            "island_tree_prob",
            "island_fixed_height_p",
            "humidity_exchange",
            "soil_exchange",
            "soil_evaporation",
            "biomass_growth_rate",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                msg = f"{name}={value} is outside [0, 1]"
                raise ConfigError(msg)

        for name in (
            "island_warp_harmonics_n",
            "island_grow_cycles",
            "warmup_days",
            "height_relax_iterations",
        ):
            if getattr(self, name) < 0:
                msg = f"{name} must be non-negative, got {getattr(self, name)}"
                raise ConfigError(msg)

        if self.random_source not in RANDOM_SOURCES:
            msg = (
                f"random_source={self.random_source!r} is not one of "
                f"{sorted(RANDOM_SOURCES)}"
            )
            raise ConfigError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Land15Config:
        """Load configuration from a YAML file.

        Keys missing from the file keep their defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated Land15Config instance (not yet validated).

        Raises:
            FileNotFoundError: If the config file does not exist.
            ConfigError: If the file contains keys this config lacks.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"unknown config keys in {path}: {', '.join(unknown)}"
            raise ConfigError(msg)

        return cls(**{name: data[name] for name in known if name in data})
