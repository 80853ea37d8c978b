"""Application context tying configuration, storage and the library together.

A ``ReadingTracker`` is created once at startup and handed to whatever
presentation layer drives it; nothing in the package keeps global state.
"""

import logging
from datetime import date
from pathlib import Path

from reading_tracker.catalog import CatalogClient, CatalogResult, volume_to_book
from reading_tracker.config import AppConfig, load_config
from reading_tracker.errors import ValidationError
from reading_tracker.library import Library
from reading_tracker.log_setup import configure_logging
from reading_tracker.models import Book, GoalCheck, Note, NoteType, Projection, ReadingSession
from reading_tracker.stats import (
    average_wpm,
    completion_date,
    estimate_completion,
    evaluate_goal,
    progress_percentage,
    remaining_pages,
    required_daily_minutes,
)
from reading_tracker.storage import BlobStore, SQLiteBlobStore
from reading_tracker.timer import ReadingTimer
from reading_tracker.validation import (
    validate_book_form,
    validate_current_page,
    validate_daily_minutes,
    validate_desired_days,
    validate_note,
    validate_rating,
    validate_total_pages,
)

logger = logging.getLogger(__name__)


class ReadingTracker:
    """Facade over the library, statistics engine and catalog client.

    Args:
        config: Application configuration.
        store: Blob store override; defaults to SQLite at
            ``config.storage.sqlite_path``.
        catalog: Catalog client override.
    """

    def __init__(
        self,
        config: AppConfig,
        store: BlobStore | None = None,
        catalog: CatalogClient | None = None,
    ) -> None:
        self.config = config
        self.library = Library(store or SQLiteBlobStore(config.storage.sqlite_path))
        self.catalog = catalog or CatalogClient(config.catalog)

    # ── Books ────────────────────────────────────────────────────────────

    def require_book(self, book_id: str) -> Book:
        """Return the book or reject the request with a user-facing message."""
        book = self.library.get_book(book_id)
        if book is None:
            raise ValidationError("Book not found.")
        return book

    def add_book(
        self,
        title: str,
        author: str,
        published_year: str | int,
        total_pages: int,
        edition: str = "",
        publisher: str = "",
        cover_image: str = "",
    ) -> str:
        """Validate the book form and add the book, returning its id."""
        validate_book_form(title, author, published_year, total_pages)
        return self.library.add_book(
            Book(
                title=title.strip(),
                author=author.strip(),
                published_year=str(published_year),
                total_pages=total_pages,
                edition=edition,
                publisher=publisher,
                cover_image=cover_image,
            )
        )

    def edit_book(
        self,
        book_id: str,
        title: str,
        author: str,
        published_year: str | int,
        total_pages: int,
        edition: str = "",
        publisher: str = "",
        cover_image: str = "",
    ) -> None:
        """Validate the book form and overwrite the book's details.

        Raises:
            ValidationError: If the form is incomplete, the book is unknown or
                ``total_pages`` falls below the current page.
        """
        book = self.require_book(book_id)
        validate_book_form(title, author, published_year, total_pages)
        validate_total_pages(book, total_pages)
        self.library.update_book(
            book_id,
            title=title.strip(),
            author=author.strip(),
            published_year=str(published_year),
            total_pages=total_pages,
            edition=edition,
            publisher=publisher,
            cover_image=cover_image,
        )

    def delete_book(self, book_id: str) -> None:
        self.library.delete_book(book_id)

    def set_current_page(self, book_id: str, page: int) -> None:
        """Record reading progress after checking it fits the book."""
        book = self.library.get_book(book_id)
        if book is None:
            return
        validate_current_page(book, page)
        self.library.update_book(book_id, current_page=page)

    def rate_book(self, book_id: str, rating: int) -> None:
        validate_rating(rating)
        self.library.update_book(book_id, rating=rating)

    # ── Notes ────────────────────────────────────────────────────────────

    def add_note(
        self, book_id: str, page: int, content: str, note_type: NoteType = NoteType.ANNOTATION
    ) -> Note:
        """Validate and store a note on ``page`` of a book."""
        validate_note(self.require_book(book_id), page, content)
        return self.library.add_note(
            Note(book_id=book_id, type=note_type, page=page, content=content)
        )

    def edit_note(
        self, note_id: str, page: int, content: str, note_type: NoteType | None = None
    ) -> None:
        note = self.library.get_note(note_id)
        if note is None:
            return
        validate_note(self.require_book(note.book_id), page, content)
        fields: dict[str, object] = {"page": page, "content": content}
        if note_type is not None:
            fields["type"] = note_type
        self.library.update_note(note_id, **fields)

    # ── Sessions ─────────────────────────────────────────────────────────

    def new_timer(self, book_id: str, interval: float = 1.0) -> ReadingTimer:
        return ReadingTimer(
            self.require_book(book_id),
            interval=interval,
            words_per_page=self.config.reading.words_per_page,
        )

    def record_session(self, timer: ReadingTimer, end_page: int) -> ReadingSession:
        """Stop ``timer`` at ``end_page``, store the session and move the bookmark.

        Raises:
            ValidationError: If the pages or duration are rejected; nothing
                is stored in that case.
        """
        session = self.library.add_session(timer.stop(end_page))
        self.library.update_book(session.book_id, current_page=session.end_page)
        logger.info(
            "Recorded session %s on book %s at %d WPM",
            session.id,
            session.book_id,
            session.wpm,
        )
        return session

    # ── Statistics ───────────────────────────────────────────────────────

    def average_wpm(self, book_id: str) -> int:
        return average_wpm(self.library.sessions_for_book(book_id))

    def progress(self, book_id: str) -> int:
        book = self.library.get_book(book_id)
        return progress_percentage(book) if book is not None else 0

    def planning_wpm(self, book_id: str) -> int:
        """Measured speed on the book, or the configured default without sessions."""
        return self.average_wpm(book_id) or self.config.reading.default_wpm

    def projection(self, book_id: str, daily_minutes: int) -> Projection | None:
        validate_daily_minutes(daily_minutes)
        book = self.require_book(book_id)
        return estimate_completion(
            remaining_pages(book),
            daily_minutes,
            self.planning_wpm(book_id),
            self.config.reading.words_per_page,
            self.config.reading.default_wpm,
        )

    def projected_finish(
        self, book_id: str, daily_minutes: int, today: date | None = None
    ) -> date | None:
        projection = self.projection(book_id, daily_minutes)
        if projection is None:
            return None
        return completion_date(projection.days_needed, today)

    def required_daily_minutes(self, book_id: str, desired_days: int) -> int:
        validate_desired_days(desired_days)
        return required_daily_minutes(
            remaining_pages(self.require_book(book_id)),
            desired_days,
            self.planning_wpm(book_id),
            self.config.reading.words_per_page,
            self.config.reading.default_wpm,
        )

    def check_goal(
        self, book_id: str, daily_minutes: int, desired_days: int
    ) -> GoalCheck | None:
        """Compare the projection for ``daily_minutes`` against ``desired_days``."""
        validate_desired_days(desired_days)
        projection = self.projection(book_id, daily_minutes)
        if projection is None:
            return None
        return evaluate_goal(
            projection,
            desired_days,
            remaining_pages(self.require_book(book_id)),
            self.planning_wpm(book_id),
            self.config.reading.words_per_page,
            self.config.reading.default_wpm,
        )

    # ── Catalog ──────────────────────────────────────────────────────────

    def add_from_catalog_record(self, record: dict) -> str:
        """Add a book straight from a search result record.

        Raises:
            CatalogNotFoundError: If the record lacks volume metadata.
        """
        return self.library.add_book(volume_to_book(record))

    async def import_from_catalog(self, volume_id: str) -> CatalogResult:
        """Fetch a volume and add it to the library.

        The same volume can be imported more than once.

        Returns:
            The stored book on success, otherwise the catalog's error message.
        """
        result = await self.catalog.fetch_volume(volume_id)
        if not result.ok:
            return result
        book_id = self.library.add_book(result.books[0])
        stored = self.library.get_book(book_id)
        return CatalogResult(books=[stored] if stored is not None else [])


def create_tracker(config_path: str | Path = "config.yaml") -> ReadingTracker:
    """Load configuration, set up logging and open the library."""
    config = load_config(config_path)
    configure_logging(config.logging)
    tracker = ReadingTracker(config)
    logger.info("%s %s ready", config.app.name, config.app.version)
    return tracker
