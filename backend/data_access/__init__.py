"""
Data access layer for Snake persistence.

Currently this is only the high score, kept in a small key/value table.
"""

from .high_scores import HighScoreStore

__all__ = [
    'HighScoreStore',
]
