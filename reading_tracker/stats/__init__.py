"""Reading statistics and projection engine."""

from reading_tracker.stats.pace import (
    WORDS_PER_PAGE,
    average_wpm,
    count_notes_by_type,
    format_duration,
    pages_read_in_sessions,
    progress_percentage,
    remaining_pages,
    round_half_up,
    session_wpm,
    total_reading_seconds,
)
from reading_tracker.stats.planner import (
    DEFAULT_WPM,
    completion_date,
    estimate_completion,
    evaluate_goal,
    minutes_to_finish,
    plan_for_book,
    required_daily_minutes,
)

__all__ = [
    "DEFAULT_WPM",
    "WORDS_PER_PAGE",
    "average_wpm",
    "completion_date",
    "count_notes_by_type",
    "estimate_completion",
    "evaluate_goal",
    "format_duration",
    "minutes_to_finish",
    "pages_read_in_sessions",
    "plan_for_book",
    "progress_percentage",
    "remaining_pages",
    "required_daily_minutes",
    "round_half_up",
    "session_wpm",
    "total_reading_seconds",
]
