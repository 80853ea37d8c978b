"""Library state and queries."""

from reading_tracker.library.filters import (
    ReadingStatus,
    distinct_authors,
    distinct_publishers,
    distinct_years,
    filter_books,
    library_stats,
    page_count,
    paginate,
    ranked_books,
)
from reading_tracker.library.store import Library

__all__ = [
    "Library",
    "ReadingStatus",
    "distinct_authors",
    "distinct_publishers",
    "distinct_years",
    "filter_books",
    "library_stats",
    "page_count",
    "paginate",
    "ranked_books",
]
