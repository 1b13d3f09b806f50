"""
Tests for food placement.
"""

import random
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.food import place_food, free_cells


def all_cells(tile_count):
    return [(x, y) for x in range(tile_count) for y in range(tile_count)]


class TestPlaceFood:

    def test_never_on_occupied_cell(self):
        """Food lands on a free cell for sparse and dense boards alike."""
        rng = random.Random(42)
        cells = all_cells(10)

        for fill in (3, 30, 60, 90, 99):
            occupied = set(rng.sample(cells, fill))
            for _ in range(20):
                food = place_food(occupied, 10, rng)
                assert food is not None
                assert food not in occupied
                assert 0 <= food[0] < 10 and 0 <= food[1] < 10

    def test_full_board_returns_none(self):
        """20x20 board with all 400 cells occupied has nowhere to put food."""
        assert place_food(all_cells(20), 20, random.Random(0)) is None

    def test_single_free_cell_is_found(self):
        occupied = set(all_cells(20)) - {(13, 7)}
        assert place_food(occupied, 20, random.Random(0)) == (13, 7)

    def test_sampling_fallback_still_terminates(self):
        """A random source that keeps hitting occupied cells falls back to enumeration."""

        class Stubborn(random.Random):
            def randrange(self, *args, **kwargs):
                return 0

        food = place_food({(0, 0)}, 4, Stubborn(1))
        assert food is not None
        assert food != (0, 0)

    def test_dense_board_is_roughly_uniform(self):
        """Enumeration picks each free cell with similar frequency."""
        occupied = set(all_cells(4)) - {(0, 0), (1, 1), (2, 2), (3, 3)}
        rng = random.Random(5)

        counts = {}
        for _ in range(4000):
            food = place_food(occupied, 4, rng)
            counts[food] = counts.get(food, 0) + 1

        assert set(counts) == {(0, 0), (1, 1), (2, 2), (3, 3)}
        assert min(counts.values()) > 800

    def test_defaults_to_module_random(self):
        food = place_food([(0, 0)], 3)
        assert food in free_cells([(0, 0)], 3)


class TestFreeCells:

    def test_free_cells_excludes_occupied(self):
        free = free_cells([(0, 0), (1, 0)], 2)
        assert sorted(free) == [(0, 1), (1, 1)]
