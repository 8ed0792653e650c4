"""Land cover — beach ring, outcrop seeding, and outcrop growth.

Turns the cleaned land mask into cover types in three steps:

1. Land becomes Grass, except land touching water, which becomes Sand.
2. Rock and Trees are scattered at random over the land.
3. A neighbour-majority automaton grows the scattered outcrops into
   clumps over a fixed number of cycles.

Sand never turns into Trees, so beaches stay open.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from land15.world.grid import NEIGHBOURS_4
from land15.world.square import Lulc

if TYPE_CHECKING:
    from land15.common.random import RandomSource

logger = logging.getLogger(__name__)


def classify_base_cover(mask: NDArray[np.bool_]) -> NDArray[np.int8]:
    """Convert a land mask into Water, Sand, and Grass.

    Args:
        mask: Boolean land mask with a False border.

    Returns:
        A ``(height, width)`` array of ``Lulc`` values.
    """
    cover = np.full(mask.shape, Lulc.WATER, dtype=np.int8)
    inland = np.zeros_like(mask, dtype=np.bool_)
    inland[1:-1, 1:-1] = (
        mask[:-2, 1:-1] & mask[1:-1, 2:] & mask[2:, 1:-1] & mask[1:-1, :-2]
    )
    cover[mask] = Lulc.SAND
    cover[mask & inland] = Lulc.GRASS
    return cover


def seed_outcrops(
    cover: NDArray[np.int8],
    rng: RandomSource,
    *,
    rock_prob: float,
    tree_prob: float,
) -> None:
    """Scatter Rock and Trees over land cells, in place.

    Every interior land cell draws once against ``rock_prob``; cells that
    miss draw again against ``tree_prob``.  Sand cells that win the tree
    draw stay Sand.

    Args:
        cover: Cover array to modify.
        rng: Random source.
        rock_prob: Probability a land cell becomes Rock.
        tree_prob: Probability a remaining land cell becomes Trees.
    """
    height, width = cover.shape
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            state = cover[y, x]
            if state == Lulc.WATER:
                continue
            if rng.next_unit() < rock_prob:
                cover[y, x] = Lulc.ROCK
            elif rng.next_unit() < tree_prob and state != Lulc.SAND:
                cover[y, x] = Lulc.TREES


def grow_outcrops(
    cover: NDArray[np.int8],
    rng: RandomSource,
    *,
    cycles: int,
) -> NDArray[np.int8]:
    """Grow Rock and Trees into their neighbours for ``cycles`` rounds.

    Each land cell counts Trees and Rock among its four neighbours.  With
    a tree majority the cell may become Trees (Sand cells sit the round
    out), otherwise it may become Rock; the chance is the winning count
    divided by four.  Every read in a cycle sees the previous cycle's
    layout, so the update order inside a cycle does not matter.

    Args:
        cover: Seeded cover array (left unmodified).
        rng: Random source.
        cycles: Number of growth rounds.

    Returns:
        The cover layout after the last cycle.
    """
    height, width = cover.shape
    prev = cover.copy()
    cur = cover.copy()
    for _ in range(cycles):
        for y in range(1, height - 1):
            for x in range(1, width - 1):
                state = prev[y, x]
                cur[y, x] = state
                if state == Lulc.WATER:
                    continue

                tree_count = 0
                rock_count = 0
                for dx, dy in NEIGHBOURS_4:
                    neighbour = prev[y + dy, x + dx]
                    if neighbour == Lulc.TREES:
                        tree_count += 1
                    elif neighbour == Lulc.ROCK:
                        rock_count += 1

                if tree_count > rock_count:
                    if state == Lulc.SAND:
                        continue
                    candidate, count = Lulc.TREES, tree_count
                else:
                    candidate, count = Lulc.ROCK, rock_count

                if rng.next_unit() < count / 4.0:
                    cur[y, x] = candidate
        prev, cur = cur, prev
    return prev


def seed_land_cover(
    mask: NDArray[np.bool_],
    rng: RandomSource,
    *,
    rock_prob: float,
    tree_prob: float,
    cycles: int,
) -> NDArray[np.int8]:
    """Run the full cover pipeline on a cleaned land mask.

    Returns:
        The final ``Lulc`` layout.
    """
    cover = classify_base_cover(mask)
    seed_outcrops(cover, rng, rock_prob=rock_prob, tree_prob=tree_prob)
    logger.debug(
        f"Seeded {int((cover == Lulc.ROCK).sum())} rock and "
        f"{int((cover == Lulc.TREES).sum())} tree cells",
    )
    return grow_outcrops(cover, rng, cycles=cycles)
