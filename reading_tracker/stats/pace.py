"""Reading speed and progress figures.

Speeds assume a fixed density of ``WORDS_PER_PAGE`` words on every page.
Rounding is half-up, so 2.5 becomes 3.
"""

import math
from collections import Counter
from collections.abc import Iterable, Sequence

from reading_tracker.models import Book, Note, NoteType, ReadingSession

WORDS_PER_PAGE = 250


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with ties rounding up."""
    return math.floor(value + 0.5)


def session_wpm(
    start_page: int,
    end_page: int,
    elapsed_seconds: float,
    words_per_page: int = WORDS_PER_PAGE,
) -> int:
    """Words per minute for one reading interval.

    Args:
        start_page: Page the reader started on.
        end_page: Page the reader stopped on.
        elapsed_seconds: Length of the interval.
        words_per_page: Assumed words on each page.

    Returns:
        ``round((end_page - start_page) * words_per_page / minutes)``.

    Raises:
        ValueError: If ``elapsed_seconds`` is not positive.
    """
    if elapsed_seconds <= 0:
        raise ValueError("Cannot compute reading speed for a zero-length session")
    minutes = elapsed_seconds / 60
    return round_half_up((end_page - start_page) * words_per_page / minutes)


def average_wpm(sessions: Sequence[ReadingSession]) -> int:
    """Mean WPM across sessions, rounded; 0 when there are none."""
    if not sessions:
        return 0
    return round_half_up(sum(s.wpm for s in sessions) / len(sessions))


def progress_percentage(book: Book) -> int:
    """Share of the book already read, as a whole percentage in [0, 100]."""
    if book.total_pages <= 0:
        return 0
    percentage = round_half_up(book.current_page / book.total_pages * 100)
    return max(0, min(100, percentage))


def remaining_pages(book: Book) -> int:
    return max(0, book.total_pages - book.current_page)


def pages_read_in_sessions(sessions: Iterable[ReadingSession]) -> int:
    return sum(s.pages_read for s in sessions)


def total_reading_seconds(sessions: Iterable[ReadingSession]) -> int:
    return sum(s.duration for s in sessions)


def format_duration(seconds: int) -> str:
    """Format a second count as ``HH:MM:SS``."""
    hours, rest = divmod(max(0, seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def count_notes_by_type(notes: Iterable[Note]) -> dict[NoteType, int]:
    """Number of notes of each type, with every type present."""
    counts = Counter(n.type for n in notes)
    return {note_type: counts.get(note_type, 0) for note_type in NoteType}
