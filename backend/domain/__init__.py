"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (database, scheduling, rendering).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_VECTORS, OPPOSITE_MOVES,
    TILE_COUNT, INITIAL_SNAKE, BASE_SPEED_MS, MIN_SPEED_MS, STORAGE_KEY,
)
from .snake import Snake
from .game_state import GameState
from .food import place_food, free_cells

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_VECTORS', 'OPPOSITE_MOVES',
    'TILE_COUNT', 'INITIAL_SNAKE', 'BASE_SPEED_MS', 'MIN_SPEED_MS', 'STORAGE_KEY',
    'Snake',
    'GameState',
    'place_food',
    'free_cells',
]
