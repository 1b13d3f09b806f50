"""
Tests for the high score store.

These run against a real SQLite file in a temporary directory.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_access import HighScoreStore
from data_access.repositories import KeyValueRepository
from domain.constants import STORAGE_KEY


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "snake.db")


class TestHighScoreStore:

    def test_missing_value_loads_as_zero(self, db_path):
        assert HighScoreStore(db_path).load() == 0

    def test_save_then_load(self, db_path):
        HighScoreStore(db_path).save(12)
        assert HighScoreStore(db_path).load() == 12

    def test_save_overwrites(self, db_path):
        store = HighScoreStore(db_path)
        store.save(3)
        store.save(8)
        assert store.load() == 8

    @pytest.mark.parametrize("raw", ["abc", "", "-4", "3.5"])
    def test_corrupt_value_loads_as_zero(self, db_path, raw):
        KeyValueRepository(db_path).set_value(STORAGE_KEY, raw)
        assert HighScoreStore(db_path).load() == 0

    def test_unreadable_database_loads_as_zero(self, tmp_path):
        """A directory where the database file should be cannot be opened."""
        assert HighScoreStore(str(tmp_path)).load() == 0

    def test_negative_save_rejected(self, db_path):
        with pytest.raises(ValueError):
            HighScoreStore(db_path).save(-1)

    def test_keys_are_independent(self, db_path):
        HighScoreStore(db_path, key="a").save(1)
        HighScoreStore(db_path, key="b").save(2)
        assert HighScoreStore(db_path, key="a").load() == 1
        assert HighScoreStore(db_path, key="b").load() == 2

    def test_env_path_is_used_by_default(self, db_path, monkeypatch):
        monkeypatch.setenv("SNAKE_DB_PATH", db_path)
        HighScoreStore().save(6)
        assert HighScoreStore(db_path).load() == 6

    def test_unusable_db_directory_loads_as_zero(self, tmp_path, monkeypatch):
        """SNAKE_DB_PATH below a regular file cannot have its directory created."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        monkeypatch.setenv("SNAKE_DB_PATH", str(blocker / "snake.db"))

        assert HighScoreStore().load() == 0
