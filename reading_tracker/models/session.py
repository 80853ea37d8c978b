"""Reading session data model."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class ReadingSession(BaseModel):
    """One timed, contiguous reading interval.

    Sessions are created when a timed interval completes and are never
    edited afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    book_id: str
    start_page: int = Field(ge=1)
    end_page: int = Field(ge=1)
    duration: int = Field(gt=0)  # seconds
    wpm: int = 0
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def pages_read(self) -> int:
        return self.end_page - self.start_page
