"""Data models for the reading tracker."""

from reading_tracker.models.book import Book
from reading_tracker.models.note import Note, NoteType
from reading_tracker.models.session import ReadingSession
from reading_tracker.models.stats import GoalCheck, LibraryStats, Projection

__all__ = [
    "Book",
    "GoalCheck",
    "LibraryStats",
    "Note",
    "NoteType",
    "Projection",
    "ReadingSession",
]
