"""Persistence for library collections."""

from reading_tracker.storage.blob_store import (
    BOOKS_KEY,
    NOTES_KEY,
    SESSIONS_KEY,
    BlobStore,
    MemoryBlobStore,
    SQLiteBlobStore,
)
from reading_tracker.storage.database import get_connection, initialize_database

__all__ = [
    "BOOKS_KEY",
    "NOTES_KEY",
    "SESSIONS_KEY",
    "BlobStore",
    "MemoryBlobStore",
    "SQLiteBlobStore",
    "get_connection",
    "initialize_database",
]
