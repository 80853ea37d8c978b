"""Page-anchored note data model."""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field


class NoteType(str, Enum):
    """Kinds of note a reader can attach to a page."""

    ANNOTATION = "annotation"
    QUOTATION = "quotation"
    BOOKMARK = "bookmark"


class Note(BaseModel):
    """A note taken on a specific page of a book."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    book_id: str
    type: NoteType = NoteType.ANNOTATION
    page: int = Field(ge=1)
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
