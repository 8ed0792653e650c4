"""Tests for land15.generation.land_cover."""

import numpy as np

from land15.common.random import GeneratorRandom
from land15.generation.land_cover import (
    classify_base_cover,
    grow_outcrops,
    seed_land_cover,
    seed_outcrops,
)
from land15.world.square import Lulc


def _grass_block(width: int, height: int) -> np.ndarray:
    """Cover with a Grass interior and a Water border."""
    cover = np.full((height, width), Lulc.WATER, dtype=np.int8)
    cover[1:-1, 1:-1] = Lulc.GRASS
    return cover


class TestClassifyBaseCover:
    """Tests for the Grass / Sand split."""

    def test_small_island_beach_ring(self) -> None:
        mask = np.zeros((5, 5), dtype=bool)
        mask[1:-1, 1:-1] = True
        cover = classify_base_cover(mask)
        assert cover[2, 2] == Lulc.GRASS
        ring = [(1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2), (3, 3)]
        for y, x in ring:
            assert cover[y, x] == Lulc.SAND
        assert (cover[0, :] == Lulc.WATER).all()

    def test_water_stays_water(self) -> None:
        mask = np.zeros((6, 6), dtype=bool)
        cover = classify_base_cover(mask)
        assert (cover == Lulc.WATER).all()

    def test_lake_gets_beach(self) -> None:
        mask = np.zeros((9, 9), dtype=bool)
        mask[1:-1, 1:-1] = True
        mask[4, 4] = False
        cover = classify_base_cover(mask)
        assert cover[4, 4] == Lulc.WATER
        assert cover[3, 4] == Lulc.SAND
        assert cover[4, 3] == Lulc.SAND
        assert cover[3, 3] == Lulc.GRASS


class TestSeedOutcrops:
    """Tests for the random Rock / Trees scatter."""

    def test_rock_prob_one_makes_all_land_rock(self, rng: GeneratorRandom) -> None:
        mask = np.zeros((8, 8), dtype=bool)
        mask[1:-1, 1:-1] = True
        cover = classify_base_cover(mask)
        seed_outcrops(cover, rng, rock_prob=1.0, tree_prob=0.0)
        assert (cover[1:-1, 1:-1] == Lulc.ROCK).all()
        assert (cover[0, :] == Lulc.WATER).all()

    def test_tree_prob_one_spares_sand(self, rng: GeneratorRandom) -> None:
        mask = np.zeros((8, 8), dtype=bool)
        mask[1:-1, 1:-1] = True
        cover = classify_base_cover(mask)
        sand = cover == Lulc.SAND
        grass = cover == Lulc.GRASS
        seed_outcrops(cover, rng, rock_prob=0.0, tree_prob=1.0)
        assert (cover[sand] == Lulc.SAND).all()
        assert (cover[grass] == Lulc.TREES).all()

    def test_zero_probabilities_change_nothing(self, rng: GeneratorRandom) -> None:
        cover = _grass_block(6, 6)
        before = cover.copy()
        seed_outcrops(cover, rng, rock_prob=0.0, tree_prob=0.0)
        assert np.array_equal(cover, before)

    def test_second_draw_only_after_rock_miss(self, fixed_rng) -> None:
        cover = _grass_block(3, 3)
        src = fixed_rng([0.0])
        seed_outcrops(cover, src, rock_prob=0.5, tree_prob=0.5)
        assert cover[1, 1] == Lulc.ROCK
        assert src.calls == 1

        cover = _grass_block(3, 3)
        src = fixed_rng([0.9, 0.1])
        seed_outcrops(cover, src, rock_prob=0.5, tree_prob=0.5)
        assert cover[1, 1] == Lulc.TREES
        assert src.calls == 2


class TestGrowOutcrops:
    """Tests for the neighbour-majority growth automaton."""

    def test_zero_cycles_returns_copy(self, rng: GeneratorRandom) -> None:
        cover = _grass_block(6, 6)
        cover[2, 2] = Lulc.ROCK
        grown = grow_outcrops(cover, rng, cycles=0)
        assert np.array_equal(grown, cover)
        assert grown is not cover

    def test_surrounded_cell_adopts_trees(self, fixed_rng) -> None:
        cover = _grass_block(7, 7)
        for y, x in [(2, 3), (4, 3), (3, 2), (3, 4)]:
            cover[y, x] = Lulc.TREES
        before = cover.copy()
        grown = grow_outcrops(cover, fixed_rng([0.99]), cycles=1)
        assert grown[3, 3] == Lulc.TREES
        # Only the fully surrounded cell reaches p = 1
        changed = grown != before
        assert changed.sum() == 1
        # Input buffer is left alone
        assert np.array_equal(cover, before)

    def test_sand_never_becomes_trees(self, fixed_rng) -> None:
        cover = _grass_block(5, 5)
        cover[2, 2] = Lulc.SAND
        for y, x in [(1, 2), (3, 2), (2, 1), (2, 3)]:
            cover[y, x] = Lulc.TREES
        grown = grow_outcrops(cover, fixed_rng([0.0]), cycles=3)
        assert grown[2, 2] == Lulc.SAND

    def test_sand_can_become_rock(self, fixed_rng) -> None:
        cover = _grass_block(5, 5)
        cover[2, 2] = Lulc.SAND
        for y, x in [(1, 2), (3, 2), (2, 1), (2, 3)]:
            cover[y, x] = Lulc.ROCK
        grown = grow_outcrops(cover, fixed_rng([0.0]), cycles=1)
        assert grown[2, 2] == Lulc.ROCK

    def test_reads_previous_cycle_only(self, fixed_rng) -> None:
        cover = _grass_block(7, 5)
        cover[2, 1] = Lulc.TREES
        grown = grow_outcrops(cover, fixed_rng([0.0]), cycles=1)
        assert grown[2, 2] == Lulc.TREES
        # A same-cycle read of (2, 2) would have spread trees one step further
        assert grown[2, 3] == Lulc.GRASS

    def test_growth_spreads_over_cycles(self, fixed_rng) -> None:
        cover = _grass_block(7, 5)
        cover[2, 1] = Lulc.TREES
        grown = grow_outcrops(cover, fixed_rng([0.0]), cycles=2)
        assert grown[2, 3] == Lulc.TREES

    def test_water_untouched(self, rng: GeneratorRandom) -> None:
        cover = _grass_block(10, 10)
        cover[4:6, 4:6] = Lulc.WATER
        cover[2, 2] = Lulc.ROCK
        cover[7, 7] = Lulc.TREES
        grown = grow_outcrops(cover, rng, cycles=5)
        assert (grown[4:6, 4:6] == Lulc.WATER).all()
        assert (grown[0, :] == Lulc.WATER).all()


class TestSeedLandCover:
    """Tests for the combined cover pipeline."""

    def test_cover_closure(self, rng: GeneratorRandom) -> None:
        mask = np.zeros((20, 20), dtype=bool)
        mask[2:-2, 2:-2] = True
        cover = seed_land_cover(mask, rng, rock_prob=0.05, tree_prob=0.2, cycles=5)
        allowed = {Lulc.WATER, Lulc.SAND, Lulc.GRASS, Lulc.ROCK, Lulc.TREES}
        assert {Lulc(int(v)) for v in np.unique(cover)} <= allowed
        assert ((cover == Lulc.WATER) == ~mask).all()
