"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_VECTORS, OPPOSITE_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding walls, reversal and
    self-collisions.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random

    def get_move(self, game_state: GameState) -> str:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]
        food = game_state.food

        valid_moves: List[str] = []
        for move, (dx, dy) in DIRECTION_VECTORS.items():
            if move == OPPOSITE_MOVES[game_state.direction]:
                continue

            new_x, new_y = head_x + dx, head_y + dy

            # Check wall collisions
            if (new_x < 0 or new_x >= game_state.tile_count or
                    new_y < 0 or new_y >= game_state.tile_count):
                continue

            # The tail only moves away when no food is eaten
            body = snake_positions if (new_x, new_y) == food else snake_positions[:-1]
            if (new_x, new_y) in body:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)
