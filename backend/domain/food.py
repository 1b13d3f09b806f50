"""
Food placement on a square board.
"""

import random
from typing import Collection, List, Optional, Tuple

# Below this share of free cells, sampling is skipped in favour of enumeration
SAMPLING_FREE_RATIO = 0.5
MAX_SAMPLE_ATTEMPTS = 32


def free_cells(occupied: Collection[Tuple[int, int]], tile_count: int) -> List[Tuple[int, int]]:
    """Return every board cell not in occupied, column by column."""
    occupied = set(occupied)
    return [
        (x, y)
        for x in range(tile_count)
        for y in range(tile_count)
        if (x, y) not in occupied
    ]


def place_food(
    occupied: Collection[Tuple[int, int]],
    tile_count: int,
    rng: Optional[random.Random] = None
) -> Optional[Tuple[int, int]]:
    """
    Pick a uniformly random free cell for the food.

    Rejection sampling is used while at least half of the board is free;
    otherwise (or if sampling keeps missing) all free cells are enumerated.

    Args:
        occupied: cells covered by the snake
        tile_count: board width and height in cells
        rng: random source, defaults to the module-level generator

    Returns:
        The chosen (x, y), or None when the board is full.
    """
    rng = rng or random
    occupied = set(occupied)
    total = tile_count * tile_count
    free_count = total - len(occupied)

    if free_count <= 0:
        return None

    if free_count / total >= SAMPLING_FREE_RATIO:
        for _ in range(MAX_SAMPLE_ATTEMPTS):
            cell = (rng.randrange(tile_count), rng.randrange(tile_count))
            if cell not in occupied:
                return cell

    candidates = free_cells(occupied, tile_count)
    if not candidates:
        return None
    return rng.choice(candidates)
