"""Entry point for ``python -m land15``.

Loads the default YAML config, generates and warms up an island, and
opens a Pygame window to watch it.  ``--headless`` skips the window and
just advances the simulation.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pathlib

from land15.generation.pipeline import cover_counts
from land15.simulation.config import Land15Config
from land15.simulation.engine import SimulationEngine

_DEFAULT_CONFIG = pathlib.Path(__file__).resolve().parent / "config" / "default.yaml"


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, launch renderer.

    Args:
        argv: Command-line arguments; ``sys.argv[1:]`` when omitted.
    """
    parser = argparse.ArgumentParser(
        prog="land15",
        description="Land15 - procedural island ecosystem",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: the bundled default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config seed",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=16,
        help="Pixel size per grid cell (default: 16)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Target frames per second (default: 60)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Simulated days per second (default: 1)",
    )
    parser.add_argument(
        "--headless",
        type=int,
        metavar="DAYS",
        default=None,
        help="Run DAYS days without a window and log a cover summary",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    logger = logging.getLogger("land15")

    config = Land15Config.from_yaml(args.config)
    if args.seed is not None:
        config = dataclasses.replace(config, seed=args.seed)
    engine = SimulationEngine(config=config)

    if args.headless is not None:
        engine.run(args.headless)
        counts = cover_counts(engine.view().field("cover"))
        logger.info(
            f"Day {engine.day}: "
            + ", ".join(f"{lulc.name.lower()}={n}" for lulc, n in counts.items() if n),
        )
        return

    from land15.ui.pygame_client import PygameRenderer

    renderer = PygameRenderer(
        engine=engine,
        cell_size=args.cell_size,
        days_per_second=args.speed,
    )
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
