"""Dashboard queries over the book collection.

All functions are pure: they take a list of books and return a new list or
a summary, never touching the library itself.
"""

import math
from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from reading_tracker.models import Book, LibraryStats

T = TypeVar("T")

BOOKS_PER_PAGE = 9
RANKING_BOOKS_PER_PAGE = 10


class ReadingStatus(str, Enum):
    ALL = "all"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


def library_stats(books: Sequence[Book]) -> LibraryStats:
    """Count total, in-progress, completed and rated books."""
    return LibraryStats(
        total=len(books),
        in_progress=sum(1 for b in books if b.is_in_progress),
        completed=sum(1 for b in books if b.is_completed),
        rated=sum(1 for b in books if b.rating > 0),
    )


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def filter_books(
    books: Sequence[Book],
    status: ReadingStatus = ReadingStatus.ALL,
    search: str = "",
    author: str = "",
    year: str = "",
    publisher: str = "",
) -> list[Book]:
    """Filter books the way the dashboard does.

    Text criteria are case-insensitive substring matches; empty criteria
    match everything. ``search`` matches either title or author.

    Args:
        books: Books to filter.
        status: Restrict to in-progress or completed books.
        search: Free text matched against title and author.
        author: Substring of the author.
        year: Substring of the published year.
        publisher: Substring of the publisher.

    Returns:
        Matching books in their original order.
    """
    result: list[Book] = []
    for book in books:
        if status == ReadingStatus.IN_PROGRESS and not book.is_in_progress:
            continue
        if status == ReadingStatus.COMPLETED and not book.is_completed:
            continue
        if search and not (
            _contains(book.title, search) or _contains(book.author, search)
        ):
            continue
        if author and not _contains(book.author, author):
            continue
        if year and year not in book.published_year:
            continue
        if publisher and not _contains(book.publisher, publisher):
            continue
        result.append(book)
    return result


def ranked_books(
    books: Sequence[Book], stars: int = 0, author: str = ""
) -> list[Book]:
    """Return rated books, best first.

    Args:
        books: Books to rank.
        stars: When non-zero, keep only books with exactly this rating.
        author: Substring of the author to match.
    """
    rated = [
        b
        for b in books
        if b.rating > 0
        and (stars == 0 or b.rating == stars)
        and (not author or _contains(b.author, author))
    ]
    # sorted() is stable, so equal ratings keep library order
    return sorted(rated, key=lambda b: b.rating, reverse=True)


def paginate(items: Sequence[T], page: int, per_page: int = BOOKS_PER_PAGE) -> list[T]:
    """Return the 1-indexed ``page`` of ``items``."""
    if page < 1 or per_page < 1:
        return []
    start = (page - 1) * per_page
    return list(items[start : start + per_page])


def page_count(total_items: int, per_page: int = BOOKS_PER_PAGE) -> int:
    if per_page < 1:
        return 0
    return math.ceil(total_items / per_page)


def _distinct(values: list[str]) -> list[str]:
    return list(dict.fromkeys(v for v in values if v))


def distinct_authors(books: Sequence[Book], rated_only: bool = False) -> list[str]:
    """Unique non-empty authors, in first-seen order."""
    return _distinct([b.author for b in books if not rated_only or b.rating > 0])


def distinct_years(books: Sequence[Book]) -> list[str]:
    return _distinct([b.published_year for b in books])


def distinct_publishers(books: Sequence[Book]) -> list[str]:
    return _distinct([b.publisher for b in books])
