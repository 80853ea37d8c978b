"""In-memory library of books, notes and reading sessions.

The library is the only writer of the blob store. Every mutation rewrites the
affected collection in full; there is no transaction spanning collections, so
a failure between the book write and the cascading note/session writes can
leave orphaned records behind.
"""

import logging
from datetime import datetime
from typing import Any, TypeVar
from uuid import uuid4

from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from reading_tracker.models import Book, Note, ReadingSession
from reading_tracker.storage import BOOKS_KEY, NOTES_KEY, SESSIONS_KEY, BlobStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def new_id() -> str:
    """Return a fresh record identifier."""
    return str(uuid4())


class Library:
    """Owns the book, note and session collections for one user.

    Args:
        store: Backend the collections are loaded from and saved to.
    """

    def __init__(self, store: BlobStore) -> None:
        self._store = store
        self._books: list[Book] = self._load(BOOKS_KEY, Book)
        self._notes: list[Note] = self._load(NOTES_KEY, Note)
        self._sessions: list[ReadingSession] = self._load(SESSIONS_KEY, ReadingSession)
        logger.info(
            "Library loaded: %d books, %d notes, %d sessions",
            len(self._books),
            len(self._notes),
            len(self._sessions),
        )

    # ── Persistence ──────────────────────────────────────────────────────

    def _load(self, key: str, model: type[RecordT]) -> list[RecordT]:
        """Validate each stored record on its own, skipping the unreadable ones."""
        records: list[RecordT] = []
        for index, item in enumerate(self._store.load(key, [])):
            try:
                records.append(model.model_validate(item))
            except ModelValidationError:
                logger.warning(
                    "Skipping unreadable record %d in %r", index, key, exc_info=True
                )
        return records

    def _save_books(self) -> None:
        self._store.save(BOOKS_KEY, [b.model_dump(mode="json") for b in self._books])

    def _save_notes(self) -> None:
        self._store.save(NOTES_KEY, [n.model_dump(mode="json") for n in self._notes])

    def _save_sessions(self) -> None:
        self._store.save(
            SESSIONS_KEY, [s.model_dump(mode="json") for s in self._sessions]
        )

    @staticmethod
    def _merge(record: RecordT, fields: dict[str, Any]) -> RecordT:
        """Copy ``record`` with ``fields`` applied, ignoring unknown names."""
        known = {
            name: value
            for name, value in fields.items()
            if name in type(record).model_fields and name not in ("id", "created_at")
        }
        ignored = set(fields) - set(known)
        if ignored:
            logger.debug("Ignoring unknown fields %s", sorted(ignored))
        return record.model_copy(update=known)

    # ── Books ────────────────────────────────────────────────────────────

    @property
    def books(self) -> list[Book]:
        return list(self._books)

    def add_book(self, book: Book) -> str:
        """Add a book and return its new identifier.

        The book gets a fresh id and creation time and starts unread and
        unrated, whatever the incoming values were.
        """
        stored = book.model_copy(
            update={
                "id": new_id(),
                "created_at": datetime.now(),
                "current_page": 0,
                "rating": 0,
            }
        )
        self._books.append(stored)
        self._save_books()
        logger.info("Added book %s (%r)", stored.id, stored.title)
        return stored.id

    def get_book(self, book_id: str) -> Book | None:
        return next((b for b in self._books if b.id == book_id), None)

    def update_book(self, book_id: str, **fields: Any) -> None:
        """Merge ``fields`` into the book; unknown ids are ignored.

        A bookmark past a shortened book is pulled back to its last page.
        """
        for index, book in enumerate(self._books):
            if book.id == book_id:
                merged = self._merge(book, fields)
                if 0 < merged.total_pages < merged.current_page:
                    logger.info(
                        "Clamping current page of book %s to %d",
                        book_id,
                        merged.total_pages,
                    )
                    merged = merged.model_copy(
                        update={"current_page": merged.total_pages}
                    )
                self._books[index] = merged
                self._save_books()
                return
        logger.debug("update_book: no book with id %s", book_id)

    def delete_book(self, book_id: str) -> None:
        """Remove a book together with all of its notes and sessions."""
        self._books = [b for b in self._books if b.id != book_id]
        self._save_books()

        self._notes = [n for n in self._notes if n.book_id != book_id]
        self._save_notes()

        self._sessions = [s for s in self._sessions if s.book_id != book_id]
        self._save_sessions()
        logger.info("Deleted book %s and its notes and sessions", book_id)

    # ── Notes ────────────────────────────────────────────────────────────

    @property
    def notes(self) -> list[Note]:
        return list(self._notes)

    def add_note(self, note: Note) -> Note:
        stored = note.model_copy(update={"id": new_id(), "created_at": datetime.now()})
        self._notes.append(stored)
        self._save_notes()
        return stored

    def get_note(self, note_id: str) -> Note | None:
        return next((n for n in self._notes if n.id == note_id), None)

    def update_note(self, note_id: str, **fields: Any) -> None:
        """Merge ``fields`` into the note; unknown ids are ignored."""
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                self._notes[index] = self._merge(note, fields)
                self._save_notes()
                return
        logger.debug("update_note: no note with id %s", note_id)

    def delete_note(self, note_id: str) -> None:
        self._notes = [n for n in self._notes if n.id != note_id]
        self._save_notes()

    def notes_for_book(self, book_id: str) -> list[Note]:
        """Return the book's notes ordered by page number."""
        return sorted(
            (n for n in self._notes if n.book_id == book_id), key=lambda n: n.page
        )

    # ── Reading sessions ─────────────────────────────────────────────────

    @property
    def sessions(self) -> list[ReadingSession]:
        return list(self._sessions)

    def add_session(self, session: ReadingSession) -> ReadingSession:
        stored = session.model_copy(
            update={"id": new_id(), "created_at": datetime.now()}
        )
        self._sessions.append(stored)
        self._save_sessions()
        return stored

    def get_session(self, session_id: str) -> ReadingSession | None:
        return next((s for s in self._sessions if s.id == session_id), None)

    def sessions_for_book(self, book_id: str) -> list[ReadingSession]:
        """Return the book's sessions in the order they were recorded."""
        return [s for s in self._sessions if s.book_id == book_id]
