"""
Key/value repository for small pieces of persisted state.
"""

from typing import Optional

from .base import BaseRepository


class KeyValueRepository(BaseRepository):
    """
    Repository for the key_value table.
    """

    def get_value(self, key: str) -> Optional[str]:
        """
        Fetch the raw stored value for a key.

        Returns:
            The stored string, or None if the key is absent.
        """
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT value FROM key_value WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None

    def set_value(self, key: str, value: str) -> None:
        """Insert or replace the value stored for a key."""
        with self.connection() as (conn, cursor):
            cursor.execute("""
                INSERT INTO key_value (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
            """, (key, value))
