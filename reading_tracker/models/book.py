"""Book data model."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator


class Book(BaseModel):
    """A book in the user's library.

    ``total_pages`` may be 0 for books imported from the catalog without a
    page count; the page-bound invariant only applies once it is known.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    author: str = ""
    published_year: str = ""
    total_pages: int = Field(default=0, ge=0)
    current_page: int = Field(default=0, ge=0)
    edition: str = ""
    publisher: str = ""
    cover_image: str = ""  # URL or data URI
    rating: int = Field(default=0, ge=0, le=5)  # 0 = unrated
    created_at: datetime = Field(default_factory=datetime.now)

    # Filled in by catalog imports
    description: str = ""
    isbn: str = ""
    published_date: str = ""
    catalog_id: str = ""
    language: str = ""
    categories: str = ""

    @model_validator(mode="after")
    def _check_current_page(self) -> "Book":
        if self.total_pages > 0 and self.current_page > self.total_pages:
            raise ValueError(
                f"current_page {self.current_page} exceeds total_pages {self.total_pages}"
            )
        return self

    @property
    def is_started(self) -> bool:
        return self.current_page > 0

    @property
    def is_completed(self) -> bool:
        return self.total_pages > 0 and self.current_page >= self.total_pages

    @property
    def is_in_progress(self) -> bool:
        return self.current_page > 0 and self.current_page < self.total_pages
