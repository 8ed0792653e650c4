"""Elevation — noisy seed heights relaxed into smooth terrain.

A random subset of land cells, plus every water cell, is pinned to its
seed height.  Relaxation repeatedly re-pins those cells and blurs the
interior with a 3x3 tent kernel, so the pinned heights spread outward
and the free cells settle into a smooth surface between them.

Operates on raw NumPy arrays; the board is only touched by
``solve_elevation``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from land15.world.square import Lulc

if TYPE_CHECKING:
    from land15.common.random import RandomSource

logger = logging.getLogger(__name__)


def seed_heights(
    cover: NDArray[np.int8],
    rng: RandomSource,
    *,
    offset: float,
) -> NDArray[np.float64]:
    """Draw the raw height of every cell.

    Each cell draws ``v`` in ``[-1, 1)`` and gets ``sign(v) * v² + offset``,
    noise that keeps its sign but clusters near zero.  Water is 0.

    Args:
        cover: Cover layout; water cells get height 0.
        rng: Random source; consumes one value per cell, row-major.
        offset: Height added to every land cell.

    Returns:
        A ``(height, width)`` array of seed heights.
    """
    height, width = cover.shape
    z = np.empty((height, width), dtype=np.float64)
    for y in range(height):
        for x in range(width):
            v = rng.next_range(-1.0, 1.0)
            z[y, x] = np.sign(v) * v * v + offset
    z[cover == Lulc.WATER] = 0.0
    return z


def fixed_height_mask(
    cover: NDArray[np.int8],
    rng: RandomSource,
    *,
    fixed_prob: float,
) -> NDArray[np.bool_]:
    """Choose which cells keep their seed height during relaxation.

    Args:
        cover: Cover layout; every water cell is fixed.
        rng: Random source; consumes one value per cell, row-major.
        fixed_prob: Chance a land cell is fixed.

    Returns:
        Boolean mask of pinned cells.
    """
    height, width = cover.shape
    fixed = np.zeros((height, width), dtype=np.bool_)
    for y in range(height):
        for x in range(width):
            fixed[y, x] = rng.next_unit() < fixed_prob
    return fixed | (cover == Lulc.WATER)


def tent_blur(field: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convolve interior cells with the normalised 3x3 tent kernel.

    Weights are 4 at the centre, 2 on the edges, and 1 on the corners,
    over 16.  Border cells are copied unchanged.

    Args:
        field: Height field.

    Returns:
        A new blurred array.
    """
    out = field.copy()
    out[1:-1, 1:-1] = (
        4.0 * field[1:-1, 1:-1]
        + 2.0
        * (field[:-2, 1:-1] + field[2:, 1:-1] + field[1:-1, :-2] + field[1:-1, 2:])
        + field[:-2, :-2]
        + field[:-2, 2:]
        + field[2:, :-2]
        + field[2:, 2:]
    ) / 16.0
    return out


def relax_heights(
    seed: NDArray[np.float64],
    fixed: NDArray[np.bool_],
    *,
    iterations: int,
) -> NDArray[np.float64]:
    """Diffuse free heights around the pinned ones.

    Each round resets pinned cells to their seed value and then blurs.
    Every value stays a weighted mean of seed values, so the result is
    bounded by the seed range.

    Args:
        seed: Seed heights.
        fixed: Cells to re-pin every round.
        iterations: Number of rounds.

    Returns:
        The relaxed height field (unscaled).
    """
    field = seed.copy()
    for _ in range(iterations):
        field = np.where(fixed, seed, field)
        field = tent_blur(field)
    return field


def solve_elevation(
    cover: NDArray[np.int8],
    rng: RandomSource,
    *,
    offset: float,
    fixed_prob: float,
    iterations: int,
    scale_m: float,
) -> NDArray[np.float64]:
    """Compute the elevation of every cell in metres.

    Args:
        cover: Cover layout (only the water mask matters).
        rng: Random source.
        offset: Seed height offset for land.
        fixed_prob: Fraction of land cells pinned during relaxation.
        iterations: Relaxation rounds.
        scale_m: Metres per unit of relaxed height.

    Returns:
        Elevation array in metres.
    """
    seed = seed_heights(cover, rng, offset=offset)
    fixed = fixed_height_mask(cover, rng, fixed_prob=fixed_prob)
    logger.debug(
        f"Relaxing heights: {int(fixed.sum())} pinned cells, {iterations} rounds",
    )
    return relax_heights(seed, fixed, iterations=iterations) * scale_m
