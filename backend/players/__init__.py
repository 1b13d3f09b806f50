"""
Player implementations for Snake.

Players are autopilots: they feed direction intents into the game the same
way keyboard, button or swipe input does.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
