"""Key-value blob storage for whole collections.

A collection is a JSON array saved under a string key. Saving always
overwrites the whole array; loading never fails, falling back to an empty
list when the key is missing or the stored value cannot be decoded.
"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Protocol

from reading_tracker.storage.database import get_connection, initialize_database

logger = logging.getLogger(__name__)

BOOKS_KEY = "books"
NOTES_KEY = "notes"
SESSIONS_KEY = "readingSessions"


class BlobStore(Protocol):
    """Storage backend used by the library."""

    def load(self, key: str, default: list | None = None) -> list: ...

    def save(self, key: str, items: list) -> None: ...


def _decode(key: str, raw: str | None, default: list | None) -> list:
    """Decode a stored JSON array, substituting ``default`` when unusable."""
    fallback: list = list(default) if default is not None else []
    if raw is None:
        return fallback
    try:
        value: Any = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Corrupt data stored under %r, using empty collection", key)
        return fallback
    if not isinstance(value, list):
        logger.warning(
            "Expected a list under %r, got %s; using empty collection",
            key,
            type(value).__name__,
        )
        return fallback
    return value


class MemoryBlobStore:
    """In-process store, mainly for tests and throwaway sessions.

    Values are kept as JSON text so that loads return fresh copies, exactly
    as a persistent backend would.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def load(self, key: str, default: list | None = None) -> list:
        return _decode(key, self._data.get(key), default)

    def save(self, key: str, items: list) -> None:
        self._data[key] = json.dumps(items)

    def put_raw(self, key: str, raw: str) -> None:
        """Store an arbitrary string under ``key``, bypassing encoding."""
        self._data[key] = raw


class SQLiteBlobStore:
    """Blob store backed by a single SQLite table.

    Args:
        db_path: Path to the SQLite database file. Created on first use.
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        initialize_database(self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def load(self, key: str, default: list | None = None) -> list:
        """Load the collection stored under ``key``.

        Args:
            key: Collection name.
            default: Returned (copied) when nothing usable is stored.

        Returns:
            The decoded list, or a copy of ``default`` (empty list if None).
        """
        try:
            conn = get_connection(self._db_path)
            try:
                row = conn.execute(
                    "SELECT value FROM collections WHERE key = ?", (key,)
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Failed to read %r from %s", key, self._db_path)
            return list(default) if default is not None else []

        return _decode(key, row["value"] if row is not None else None, default)

    def save(self, key: str, items: list) -> None:
        """Overwrite the collection stored under ``key``.

        Args:
            key: Collection name.
            items: JSON-serializable list of records.
        """
        payload = json.dumps(items)
        conn = get_connection(self._db_path)
        try:
            conn.execute(
                """
                INSERT INTO collections (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, payload),
            )
            conn.commit()
        finally:
            conn.close()
        logger.debug("Saved %d records under %r", len(items), key)

    def put_raw(self, key: str, raw: str) -> None:
        """Store an arbitrary string under ``key``, bypassing encoding."""
        conn = get_connection(self._db_path)
        try:
            conn.execute(
                "INSERT OR REPLACE INTO collections (key, value) VALUES (?, ?)",
                (key, raw),
            )
            conn.commit()
        finally:
            conn.close()
