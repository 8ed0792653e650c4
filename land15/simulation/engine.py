"""SimulationEngine — island generation and the day-stepping loop.

Owns the grid, its two boards, and the random source.  Construction
validates the config and, by default, builds the island:

1. Generate the island into the current board (mask, cover, elevation,
   fields)
2. Copy it into the other board so both share the same border
3. Advance ``warmup_days`` days so initial artefacts settle

Each day reads the current board, writes the other, then flips parity.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from land15.common.random import RandomSource, make_random_source
from land15.generation.pipeline import generate_island
from land15.simulation.config import Land15Config
from land15.simulation.rules import step_day
from land15.world.grid import BoardNotReadyError, BoardView, Grid


@dataclass
class SimulationEngine:
    """Drives the island forward one day at a time.

    Attributes:
        config: Island and simulation configuration.
        rng: Random source; built from ``config.seed`` when omitted.
        initialize: Whether to generate and warm up the island on
            construction.
        grid: The double-buffered board pair.
        day: Days advanced so far, warm-up included.
        generated: True once the island has been generated.
        ready: True once warm-up has finished.
    """

    config: Land15Config
    rng: RandomSource | None = None
    initialize: bool = True
    grid: Grid = field(init=False)
    day: int = field(init=False, default=0)
    generated: bool = field(init=False, default=False)
    ready: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        """Validate config, build the random source and grid."""
        self.logger = logging.getLogger(__name__)
        self.config.validate()
        if self.rng is None:
            self.rng = make_random_source(self.config.random_source, self.config.seed)
        self.grid = Grid(width=self.config.w, height=self.config.h)
        self.logger.info(
            f"SimulationEngine initialised: {self.config.w}x{self.config.h}, "
            f"seed {self.config.seed}",
        )
        if self.initialize:
            self.initialize_board()

    @property
    def parity(self) -> int:
        """Which board is current: 0 for A, 1 for B."""
        return self.grid.parity

    def initialize_board(self) -> None:
        """Generate the island, then run the warm-up period."""
        generate_island(self.grid.current, self.config, self.rng)
        self.grid.sync()
        self.generated = True

        start = time.perf_counter()
        self.run(self.config.warmup_days)
        self.ready = True
        self.logger.info(
            f"Warm-up of {self.config.warmup_days} days finished in "
            f"{time.perf_counter() - start:.2f}s",
        )

    def advance_day(self) -> None:
        """Advance the simulation by one day.

        Raises:
            BoardNotReadyError: If the island has not been generated.
        """
        if not self.generated:
            msg = "cannot advance a day before the island is generated"
            raise BoardNotReadyError(msg)
        step_day(self.grid.current, self.grid.next, self.config)
        self.grid.flip()
        self.day += 1

    def run(self, days: int) -> None:
        """Advance a fixed number of days.

        Args:
            days: Number of days to advance.
        """
        for _ in range(days):
            self.advance_day()

    def view(self) -> BoardView:
        """Return the read-only view of the current board.

        Raises:
            BoardNotReadyError: If warm-up has not finished.
        """
        if not self.ready:
            msg = "the island is not ready to be observed yet"
            raise BoardNotReadyError(msg)
        return BoardView(self.grid)
