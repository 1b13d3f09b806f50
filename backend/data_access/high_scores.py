"""
High score persistence.

The best score is a single integer stored under a fixed key. Reads never
fail: anything missing or unreadable counts as zero.
"""

import logging
import sqlite3
from typing import Optional

from domain.constants import STORAGE_KEY
from .repositories import KeyValueRepository

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Loads and saves the persisted high score.
    """

    def __init__(self, db_path: Optional[str] = None, key: str = STORAGE_KEY):
        self.key = key
        self._repo = KeyValueRepository(db_path)

    def load(self) -> int:
        """
        Return the stored high score, or 0 if it is missing, corrupt or the
        database cannot be opened.
        """
        try:
            raw = self._repo.get_value(self.key)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Could not read high score (%s), defaulting to 0", e)
            return 0

        if raw is None:
            return 0

        try:
            value = int(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring corrupt high score value %r", raw)
            return 0

        return value if value >= 0 else 0

    def save(self, value: int) -> None:
        """Persist a new high score."""
        if value < 0:
            raise ValueError(f"High score must be non-negative, got {value}")
        self._repo.set_value(self.key, str(value))
        logger.info("Saved high score %s", value)
