"""Book status snapshot model."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ReadingStatus(str, Enum):
    """Lifecycle of a book in the library."""

    NOT_STARTED = "not_started"
    READING = "reading"
    COMPLETED = "completed"


class BookStatusSnapshot(BaseModel):
    """Cumulative progress of one book. Exactly one exists per book."""

    book_id: str
    pages_read: int = Field(default=0, ge=0)
    status: ReadingStatus = ReadingStatus.NOT_STARTED
    updated_at: datetime = Field(default_factory=datetime.now)
