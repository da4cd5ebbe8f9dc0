"""Local storage - SQLite-backed key/value store for widget preferences."""

import os
import sqlite3
from pathlib import Path

from .models import SCHEMA_SQL


DB_FILENAME = 'widget.db'


def get_db_path(data_dir: str | os.PathLike | None = None) -> str:
    """Get the database file path, creating its directory if needed."""
    db_dir = Path(data_dir or os.getenv('WEATHER_WIDGET_DATA_DIR', './data'))
    db_dir.mkdir(parents=True, exist_ok=True)
    return str(db_dir / DB_FILENAME)


class LocalStorage:
    """String key/value storage with ``get_item``/``set_item`` semantics.

    Every call opens its own connection, so the store holds no open handle
    between operations.
    """

    def __init__(self, data_dir: str | os.PathLike | None = None):
        self.db_path = get_db_path(data_dir)
        self._initialized = False

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        if not self._initialized:
            try:
                conn.executescript(SCHEMA_SQL)
                conn.commit()
            except sqlite3.Error:
                conn.close()
                raise
            self._initialized = True
        return conn

    def get_item(self, key: str) -> str | None:
        """Return the stored value for ``key`` or None if absent."""
        conn = self._connect()
        try:
            row = conn.execute(
                'SELECT value FROM local_storage WHERE key = ?',
                (key,),
            ).fetchone()
            return row['value'] if row else None
        finally:
            conn.close()

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        conn = self._connect()
        try:
            conn.execute(
                """
                INSERT OR REPLACE INTO local_storage (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                """,
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()

    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""
        conn = self._connect()
        try:
            conn.execute('DELETE FROM local_storage WHERE key = ?', (key,))
            conn.commit()
        finally:
            conn.close()
