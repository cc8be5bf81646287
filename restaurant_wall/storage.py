"""Local persistent storage backed by SQLite.

``LocalStorage`` is a tiny key/value store holding string values, one row per
key. ``RestaurantCache`` keeps the last known restaurant collection in it.
"""

import logging
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from restaurant_wall.models import Restaurant, restaurant_list_adapter

logger = logging.getLogger(__name__)

CACHE_KEY = "restaurants"

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS local_storage (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL
    )
"""


class StorageError(Exception):
    """Raised when local storage cannot be read or written."""


class LocalStorage:
    """String key/value store in a single SQLite file."""

    def __init__(self, path: str | Path) -> None:
        """Initialize the store.

        Nothing is opened until the first read or write, so an unusable path
        only fails the operations that touch it.

        Args:
            path: Location of the SQLite file
        """
        self.path = Path(path)

    def _execute(self, sql: str, params: tuple = ()) -> list[tuple]:
        try:
            conn = sqlite3.connect(self.path)
            try:
                with conn:
                    conn.execute(_CREATE_TABLE)
                    rows = conn.execute(sql, params).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            msg = f"Local storage at {self.path} failed: {e}"
            raise StorageError(msg) from e
        return rows

    def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        rows = self._execute("SELECT value FROM local_storage WHERE key = ?", (key,))
        return rows[0][0] if rows else None

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        self._execute(
            "INSERT OR REPLACE INTO local_storage (key, value) VALUES (?, ?)",
            (key, value),
        )


class RestaurantCache:
    """Snapshot of the restaurant collection in local storage."""

    def __init__(self, storage: LocalStorage, key: str = CACHE_KEY) -> None:
        self.storage = storage
        self.key = key

    def save(self, restaurants: Iterable[Restaurant]) -> None:
        """Overwrite the snapshot with the given collection.

        Raises:
            StorageError: If the snapshot cannot be written
        """
        payload = restaurant_list_adapter.dump_json(list(restaurants), by_alias=True)
        self.storage.set_item(self.key, payload.decode("utf-8"))

    def load(self) -> list[Restaurant] | None:
        """Return the cached collection, or None when there is no usable snapshot."""
        try:
            raw = self.storage.get_item(self.key)
        except StorageError:
            logger.exception("Could not read cached restaurants")
            return None

        if raw is None:
            return None

        try:
            return restaurant_list_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid cached restaurants: {e}")
            return None
