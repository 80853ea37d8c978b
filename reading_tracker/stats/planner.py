"""Completion projections for the reading planner."""

import math
from collections.abc import Sequence
from datetime import date, timedelta

from reading_tracker.models import Book, GoalCheck, Projection, ReadingSession
from reading_tracker.stats.pace import (
    WORDS_PER_PAGE,
    average_wpm,
    remaining_pages,
    round_half_up,
)

DEFAULT_WPM = 200


def _effective_wpm(wpm: float | None, default_wpm: int) -> float:
    return wpm if wpm and wpm > 0 else default_wpm


def minutes_to_finish(
    pages: int,
    wpm: float | None = DEFAULT_WPM,
    words_per_page: int = WORDS_PER_PAGE,
    default_wpm: int = DEFAULT_WPM,
) -> float:
    """Reading minutes needed for ``pages`` pages at ``wpm``.

    A missing or non-positive ``wpm`` falls back to ``default_wpm``.
    """
    return pages * words_per_page / _effective_wpm(wpm, default_wpm)


def estimate_completion(
    pages: int,
    daily_minutes: int,
    wpm: float | None = DEFAULT_WPM,
    words_per_page: int = WORDS_PER_PAGE,
    default_wpm: int = DEFAULT_WPM,
) -> Projection | None:
    """Project how long the remaining pages will take.

    Args:
        pages: Pages left to read.
        daily_minutes: Minutes the reader can spend per day.
        wpm: Reading speed; falls back to ``default_wpm`` when missing.
        words_per_page: Assumed words on each page.
        default_wpm: Speed used when ``wpm`` is unusable.

    Returns:
        The projection, or None when ``daily_minutes`` is not positive.
    """
    if daily_minutes <= 0:
        return None
    total_minutes = minutes_to_finish(pages, wpm, words_per_page, default_wpm)
    return Projection(
        total_minutes=total_minutes,
        days_needed=math.ceil(total_minutes / daily_minutes),
        hours_needed=round_half_up(total_minutes / 60),
    )


def required_daily_minutes(
    pages: int,
    desired_days: int,
    wpm: float | None = DEFAULT_WPM,
    words_per_page: int = WORDS_PER_PAGE,
    default_wpm: int = DEFAULT_WPM,
) -> int:
    """Daily minutes needed to finish ``pages`` within ``desired_days``.

    Returns 0 when ``desired_days`` is not positive.
    """
    if desired_days <= 0:
        return 0
    total_minutes = minutes_to_finish(pages, wpm, words_per_page, default_wpm)
    return math.ceil(total_minutes / desired_days)


def completion_date(days_needed: int, today: date | None = None) -> date:
    """Calendar date reached after ``days_needed`` whole days."""
    return (today or date.today()) + timedelta(days=days_needed)


def evaluate_goal(
    projection: Projection,
    desired_days: int,
    pages: int,
    wpm: float | None = DEFAULT_WPM,
    words_per_page: int = WORDS_PER_PAGE,
    default_wpm: int = DEFAULT_WPM,
) -> GoalCheck:
    """Check a projection against the number of days the reader wants."""
    attainable = projection.days_needed <= desired_days
    return GoalCheck(
        desired_days=desired_days,
        attainable=attainable,
        slack_days=desired_days - projection.days_needed if attainable else 0,
        required_daily_minutes=required_daily_minutes(
            pages, desired_days, wpm, words_per_page, default_wpm
        ),
    )


def plan_for_book(
    book: Book,
    sessions: Sequence[ReadingSession],
    daily_minutes: int,
    words_per_page: int = WORDS_PER_PAGE,
    default_wpm: int = DEFAULT_WPM,
) -> Projection | None:
    """Projection for a book using the reader's measured speed on it.

    Books without sessions are projected at ``default_wpm``.
    """
    return estimate_completion(
        remaining_pages(book),
        daily_minutes,
        average_wpm(sessions) or default_wpm,
        words_per_page,
        default_wpm,
    )
