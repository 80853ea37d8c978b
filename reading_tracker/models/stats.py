"""Derived statistics returned by the projection engine and library queries."""

from pydantic import BaseModel


class Projection(BaseModel):
    """Time needed to finish the remaining pages at a given pace and daily budget."""

    total_minutes: float
    days_needed: int
    hours_needed: int


class GoalCheck(BaseModel):
    """Comparison of a projection against a reader-chosen number of days."""

    desired_days: int
    attainable: bool
    slack_days: int = 0  # days to spare when attainable
    required_daily_minutes: int = 0


class LibraryStats(BaseModel):
    """Headline counts shown on the dashboard."""

    total: int = 0
    in_progress: int = 0
    completed: int = 0
    rated: int = 0
