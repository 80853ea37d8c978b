"""Input checks applied before anything reaches the library.

Each validator raises ``ValidationError`` with a message suitable for showing
to the user, and returns nothing on success.
"""

from reading_tracker.errors import ValidationError
from reading_tracker.models import Book


def validate_book_form(
    title: str, author: str, year: str | int | None, total_pages: int | None
) -> None:
    """Require the fields the add/edit book form marks as mandatory."""
    if not str(title or "").strip() or not str(author or "").strip():
        raise ValidationError("Please fill in all required fields.")
    if year in (None, "") or not total_pages:
        raise ValidationError("Please fill in all required fields.")
    if total_pages < 0:
        raise ValidationError("Total pages must be a positive number.")


def validate_total_pages(book: Book, total_pages: int) -> None:
    """Refuse to shorten a book below the page the reader has reached."""
    if total_pages < book.current_page:
        raise ValidationError(
            f"Total pages cannot be less than the current page ({book.current_page})."
        )


def validate_current_page(book: Book, page: int) -> None:
    if page < 0 or page > book.total_pages:
        raise ValidationError(
            f"Please enter a page between 0 and {book.total_pages}."
        )


def validate_rating(rating: int) -> None:
    if rating < 0 or rating > 5:
        raise ValidationError("Rating must be between 0 and 5 stars.")


def validate_note(book: Book, page: int | None, content: str) -> None:
    """Check a note's page lies within the book and it has content."""
    if page is None or not content or not content.strip():
        raise ValidationError("Please fill in all fields.")
    if page < 1 or page > book.total_pages:
        raise ValidationError(f"The page must be between 1 and {book.total_pages}.")


def validate_start_page(book: Book, start_page: int | None) -> None:
    if not start_page:
        raise ValidationError("Please enter the starting page.")
    if start_page < 1 or start_page > book.total_pages:
        raise ValidationError(
            f"The starting page must be between 1 and {book.total_pages}."
        )


def validate_session_pages(
    book: Book, start_page: int | None, end_page: int | None
) -> None:
    """Check both session pages lie within the book and the end follows the start."""
    validate_start_page(book, start_page)
    if not end_page:
        raise ValidationError("Please enter the final page.")
    if end_page < 1 or end_page > book.total_pages:
        raise ValidationError(
            f"The final page must be between 1 and {book.total_pages}."
        )
    if start_page is not None and end_page <= start_page:
        raise ValidationError("The final page must be greater than the starting page.")


def validate_duration(seconds: int) -> None:
    if seconds <= 0:
        raise ValidationError("The reading session has not lasted any time yet.")


def validate_daily_minutes(minutes: int | None) -> None:
    if not minutes or minutes <= 0:
        raise ValidationError("Please enter the daily time available.")


def validate_desired_days(days: int | None) -> None:
    if not days or days <= 0:
        raise ValidationError("The number of days must be at least 1.")
