# utils/local_storage.py
"""
Browser-style key/value storage backed by SQLAlchemy.

Stores string values under string keys in a single table, mirroring the
getItem/setItem/removeItem surface of window.localStorage.
"""

import logging
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from .db import get_db_engine, get_transaction, execute_query, execute_update

logger = logging.getLogger(__name__)

TABLE_NAME = "local_storage"


class LocalStorage:
    """
    Key/value store.

    Usage:
        storage = LocalStorage()
        storage.set_item("userPreferences", '{"theme": "dark"}')
        raw = storage.get_item("userPreferences")
    """

    def __init__(self, engine: Engine = None):
        self.engine = engine or get_db_engine()
        self._ensure_table()

    def _ensure_table(self):
        with get_transaction(self.engine) as conn:
            conn.execute(text(
                f"CREATE TABLE IF NOT EXISTS {TABLE_NAME} ("
                "  item_key VARCHAR(255) PRIMARY KEY,"
                "  item_value TEXT NOT NULL"
                ")"
            ))

    def get_item(self, key: str) -> Optional[str]:
        """Return stored value or None when the key is absent."""
        rows = execute_query(
            f"SELECT item_value FROM {TABLE_NAME} WHERE item_key = :key",
            {"key": key},
            engine=self.engine
        )
        return rows[0]["item_value"] if rows else None

    def set_item(self, key: str, value: str):
        """Insert or replace a value."""
        with get_transaction(self.engine) as conn:
            conn.execute(
                text(f"DELETE FROM {TABLE_NAME} WHERE item_key = :key"),
                {"key": key}
            )
            conn.execute(
                text(f"INSERT INTO {TABLE_NAME} (item_key, item_value) VALUES (:key, :value)"),
                {"key": key, "value": value}
            )
        logger.debug(f"Stored {len(value)} chars under '{key}'")

    def remove_item(self, key: str) -> bool:
        """Delete a key; returns whether it existed."""
        return execute_update(
            f"DELETE FROM {TABLE_NAME} WHERE item_key = :key",
            {"key": key},
            engine=self.engine
        ) > 0

    def keys(self) -> List[str]:
        rows = execute_query(f"SELECT item_key FROM {TABLE_NAME} ORDER BY item_key", engine=self.engine)
        return [row["item_key"] for row in rows]

    def clear(self):
        removed = execute_update(f"DELETE FROM {TABLE_NAME}", engine=self.engine)
        logger.info(f"🧹 Local storage cleared ({removed} items)")
